"""Central application exception hierarchy.

This module defines the base application exception ``AppError`` and the
specialized subclasses used by the scaffolder to represent its fatal failure
modes (bad user input, a required external command failing, and file I/O
while patching generated files). The runner is the single place that turns
these into console messages and exit codes.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all application-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'PATCH_ERROR'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging.
    transient : bool, optional
        Whether the error is temporary and may be retried.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'k': 'v'})
    >>> e.code
    'CODE'
    """

    __slots__ = ("code", "message", "context", "transient")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class UserInputError(AppError):
    """Raised when user input is missing or can no longer be read."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("USER_INPUT_ERROR", message, context=context, transient=False)


class CommandFailedError(AppError):
    """Raised when an external command the setup cannot do without fails."""

    __slots__ = ("command",)

    def __init__(
        self,
        message: str,
        *,
        command: str,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            "COMMAND_FAILED_ERROR",
            message,
            context={"command": command, **dict(context or {})},
            transient=False,
        )
        self.command = command


class PatchError(AppError):
    """Raised when a generated file cannot be read or written."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("PATCH_ERROR", message, context=context, transient=False)
