"""Internationalization helpers for the scaffolder console output.

Provide translation strings and utilities to select and apply the current UI
language. Every user-facing message in the setup flow is looked up here by
key.

Typical usage::

    from vite_tw.setup.i18n import translate, set_language, LANG

"""

from __future__ import annotations

from vite_tw.config import LANG as _DEFAULT_LANG
from vite_tw.config import SUPPORTED_LANGUAGES

LANG: str = _DEFAULT_LANG
TEXTS: dict[str, dict[str, str]] = {
    "en": {
        "missing_directory": "Please enter the directory name",
        "intro": "Creating a new React TypeScript project with Vite and TailwindCSS 🚀",
        "create_project_ok": "React TypeScript project created",
        "create_project_fail": "Failed to create the project. Please do it manually.",
        "install_styling_deps_ok": "Installed TailwindCSS",
        "install_styling_deps_fail": "Failed to install tailwindcss. Please do it manually.",
        "init_styling_config_ok": "Initialized TailwindCSS",
        "init_styling_config_fail": "Failed to initialize Tailwind CSS. Please do it manually.",
        "patch_config_ok": "Updated tailwind.config.ts",
        "patch_config_fail": "Error updating tailwind.config.ts",
        "patch_stylesheet_ok": "Updated index.css",
        "patch_stylesheet_fail": "Error updating index.css",
        "git_prompt": "Do you want to initialize Git in the project? (Y/n): ",
        "git_skipped": "Skipped Git initialization.",
        "init_vcs_ok": "Initialized Git",
        "init_vcs_fail": "Failed to initialize Git. Please do it manually.",
        "rename_branch_ok": "Changed the branch",
        "rename_branch_fail": "Failed to change the branch. Please do it manually.",
        "install_deps_ok": "Installed the dependencies",
        "install_deps_fail": "Failed to install dependencies. Please do it manually.",
        "completed": "🍻 Successfully created a new React project with Vite and TailwindCSS 🚀",
        "summary_title": "Setup summary",
        "summary_step": "Step",
        "summary_status": "Status",
        "step_create_project": "Create Vite project",
        "step_install_styling_deps": "Install TailwindCSS",
        "step_init_styling_config": "Initialize TailwindCSS",
        "step_patch_config": "Update tailwind.config.ts",
        "step_patch_stylesheet": "Update index.css",
        "step_init_vcs": "Initialize Git",
        "step_rename_branch": "Rename branch",
        "step_install_deps": "Install dependencies",
        "exiting": "Exiting.",
    },
    "sv": {
        "missing_directory": "Ange katalognamnet",
        "intro": "Skapar ett nytt React TypeScript-projekt med Vite och TailwindCSS 🚀",
        "create_project_ok": "React TypeScript-projektet har skapats",
        "create_project_fail": "Kunde inte skapa projektet. Gör det manuellt.",
        "install_styling_deps_ok": "TailwindCSS installerat",
        "install_styling_deps_fail": "Kunde inte installera tailwindcss. Gör det manuellt.",
        "init_styling_config_ok": "TailwindCSS initierat",
        "init_styling_config_fail": "Kunde inte initiera Tailwind CSS. Gör det manuellt.",
        "patch_config_ok": "tailwind.config.ts uppdaterad",
        "patch_config_fail": "Fel vid uppdatering av tailwind.config.ts",
        "patch_stylesheet_ok": "index.css uppdaterad",
        "patch_stylesheet_fail": "Fel vid uppdatering av index.css",
        "git_prompt": "Vill du initiera Git i projektet? (Y/n): ",
        "git_skipped": "Git-initiering hoppades över.",
        "init_vcs_ok": "Git initierat",
        "init_vcs_fail": "Kunde inte initiera Git. Gör det manuellt.",
        "rename_branch_ok": "Grenen har bytt namn",
        "rename_branch_fail": "Kunde inte byta namn på grenen. Gör det manuellt.",
        "install_deps_ok": "Beroenden installerade",
        "install_deps_fail": "Kunde inte installera beroenden. Gör det manuellt.",
        "completed": "🍻 Ett nytt React-projekt med Vite och TailwindCSS har skapats 🚀",
        "summary_title": "Sammanfattning",
        "summary_step": "Steg",
        "summary_status": "Status",
        "step_create_project": "Skapa Vite-projekt",
        "step_install_styling_deps": "Installera TailwindCSS",
        "step_init_styling_config": "Initiera TailwindCSS",
        "step_patch_config": "Uppdatera tailwind.config.ts",
        "step_patch_stylesheet": "Uppdatera index.css",
        "step_init_vcs": "Initiera Git",
        "step_rename_branch": "Byt namn på gren",
        "step_install_deps": "Installera beroenden",
        "exiting": "Avslutar.",
    },
}


def translate(key: str) -> str:
    r"""Translate a UI key to the current language.

    Returns the corresponding UI string for the given key using the current
    ``LANG`` value. If either the language or key is missing, returns the key
    itself.

    Parameters
    ----------
    key : str
        The string key for the UI message to be translated.

    Returns
    -------
    str
        The translated string if available, or the key itself as fallback.

    Examples
    --------
    >>> translate("git_skipped")
    'Skipped Git initialization.'
    >>> translate("UNKNOWN_KEY")
    'UNKNOWN_KEY'
    """
    return TEXTS.get(LANG, TEXTS["en"]).get(key, key)


_ = translate


def set_language(lang: str) -> None:
    """Set the module-level UI language.

    Unsupported codes fall back to English.
    """
    global LANG
    LANG = lang if lang in SUPPORTED_LANGUAGES else _DEFAULT_LANG


__all__ = ["LANG", "TEXTS", "_", "set_language", "translate"]
