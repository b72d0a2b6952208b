"""Global configuration constants for the scaffolder.

Defines the generated file locations, the text injected into them and the
defaults used by the CLI and logging setup.
"""

from __future__ import annotations

# Vite template used for the new project
VITE_TEMPLATE: str = "react-ts"
DEFAULT_BRANCH: str = "main"

# TailwindCSS development dependencies
TAILWIND_PACKAGES: tuple[str, ...] = ("tailwindcss", "postcss", "autoprefixer")

# Generated files, relative to the project directory
TAILWIND_CONFIG_FILENAME: str = "tailwind.config.ts"
INDEX_CSS_RELATIVE_PATH: str = "src/index.css"

# Config patch: first empty content list is replaced by the source globs
TAILWIND_CONTENT_PATTERN: str = r"content: \[\]"
TAILWIND_CONTENT_REPLACEMENT: str = (
    'content: ["./index.html", "./src/**/*.{js,ts,jsx,tsx}"]'
)

# Stylesheet patch: prepended verbatim, followed by the original content
TAILWIND_DIRECTIVES: str = (
    "@import 'tailwindcss/base';\n"
    "@import 'tailwindcss/components';\n"
    "@import 'tailwindcss/utilities';\n"
    "\n"
)

FILE_ENCODING: str = "utf-8"

# Process exit codes
EXIT_OK: int = 0
EXIT_FAILURE: int = -1
EXIT_INTERRUPTED: int = 130

# CLI defaults and logging
DEFAULT_LOG_LEVEL: str = "WARNING"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# UI defaults
LANG: str = "en"
SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "sv")
