"""Setup-time orchestration for the scaffolder.

Holds the command runner, the orchestrator, the file patches and the console
UI. The package itself contains no logic.
"""
