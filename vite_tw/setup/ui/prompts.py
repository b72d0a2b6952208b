"""Prompt interaction helpers for the scaffolder.

The setup flow asks exactly one question (whether to initialize git). The
console input it reads from is modeled as a ``PromptSession``: a scoped
resource the orchestrator opens, hands to ``ask_confirm`` and closes right
after the single read it serves. Reading from a closed session is an error.

Input sources
-------------
- An explicit text stream (``stream=``), read one line at a time. Used for
  piped input and tests.
- Questionary's text prompt when no stream is given and stdin is a TTY.
- ``sys.stdin`` otherwise.

See Also
--------
- `vite_tw/setup/pipeline/orchestrator.py`: sole caller.
- `vite_tw/exceptions.py`: ``UserInputError``.

"""

from __future__ import annotations

import logging
import sys
from types import TracebackType
from typing import TextIO

from vite_tw.exceptions import UserInputError
from vite_tw.setup import console_helpers as ch

logger = logging.getLogger(__name__)

UNDECODABLE_ANSWER: str = "\ufffd"


class PromptSession:
    """Line-based console input that is opened once and closed once.

    Parameters
    ----------
    stream : TextIO | None, optional
        Stream to read answers from. When ``None`` the session reads from the
        interactive console.
    use_questionary : bool | None, optional
        Force (``True``) or forbid (``False``) the Questionary prompt. When
        ``None`` it is used only if no stream is given and stdin is a TTY.

    Examples
    --------
    >>> import io
    >>> with PromptSession(stream=io.StringIO("n\\n")) as session:
    ...     session.read_line("Continue? ")
    Continue? 'n'
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        use_questionary: bool | None = None,
    ) -> None:
        self._stream = stream
        if use_questionary is None:
            use_questionary = stream is None and _stdin_is_tty()
        self._use_questionary = use_questionary
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def read_line(self, prompt: str) -> str:
        r"""Show ``prompt`` and return one line of input without its newline.

        End of input is returned as an empty string. A line that cannot be
        decoded is returned as ``UNDECODABLE_ANSWER``.

        Raises
        ------
        UserInputError
            If the session has already been closed.
        KeyboardInterrupt
            If the user aborts the prompt.
        """
        if self._closed:
            raise UserInputError("Prompt session is closed")
        if self._use_questionary:
            answer = ch.questionary.text(prompt).unsafe_ask()
            return answer or ""
        stream = self._stream if self._stream is not None else sys.stdin
        ch._RICH_CONSOLE.print(prompt, end="")
        try:
            line = stream.readline()
        except UnicodeDecodeError as error:
            # Undecodable input reads as the replacement character
            logger.warning(f"Could not decode prompt answer: {error}")
            return UNDECODABLE_ANSWER
        except OSError as error:
            logger.warning(f"Could not read prompt answer: {error}")
            line = ""
        if not line:
            # EOF: finish the prompt line so later output starts cleanly
            ch.rprint()
        return line.rstrip("\r\n")

    def close(self) -> None:
        self._closed = True

    def __enter__(self) -> PromptSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _stdin_is_tty() -> bool:
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def is_affirmative(answer: str) -> bool:
    r"""Interpret a yes/no answer whose default is yes.

    Parameters
    ----------
    answer : str
        Raw text entered by the user.

    Returns
    -------
    bool
        True for an empty answer or ``y`` in any case (surrounding whitespace
        ignored); False for anything else, including ``yes``.

    Examples
    --------
    >>> [is_affirmative(a) for a in ("", "y", " Y ", "n", "yes")]
    [True, True, True, False, False]
    """
    value = answer.strip()
    return value == "" or value.lower() == "y"


def ask_confirm(session: PromptSession, prompt: str) -> bool:
    r"""Ask a single yes/no question and release the session.

    The session is closed after the read whatever the outcome, so it can
    never serve a second prompt.

    Parameters
    ----------
    session : PromptSession
        Open input session; closed on return.
    prompt : str
        The question, including its ``(Y/n)`` hint.

    Returns
    -------
    bool
        Result of ``is_affirmative`` on the answer.

    Raises
    ------
    UserInputError
        If ``session`` was already closed.
    """
    try:
        answer = session.read_line(prompt)
    finally:
        session.close()
    logger.debug(f"Prompt answer: {answer!r}")
    return is_affirmative(answer)


__all__ = ["PromptSession", "ask_confirm", "is_affirmative"]
