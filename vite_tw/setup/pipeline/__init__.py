"""Package boundary for the scaffolding sequence.

Exposes the command table, the subprocess runner, step status helpers and
the orchestrator as separate modules. The package itself contains no logic.

Typical usage::

    from vite_tw.setup.pipeline import orchestrator

"""
