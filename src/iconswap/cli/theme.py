# src/iconswap/cli/theme.py
# Styles for the codemod report: one per file status plus the canvas line prefixes.

from rich.theme import Theme

_STATUS_STYLES = {
    "updated": "green",
    "unchanged": "dim",
    "missing": "dark_orange",
    "failed": "bold red",
    "skipped": "dim italic",
    "path": "bold",
    "detail": "dim cyan",
}


def get_theme(mode: str) -> Theme:
    """
    Returns the report theme. ``alert`` is used once any file failed and
    makes the banner and summary prefixes stand out.
    """
    styles = dict(_STATUS_STYLES)
    if mode == "alert":
        styles.update({
            "step": "bold magenta",
            "info": "magenta",
            "success": "bold yellow",
            "warning": "bold dark_orange",
            "error": "bold white on red",
        })
    else:
        styles.update({
            "step": "bold blue",
            "info": "blue",
            "success": "bold green",
            "warning": "dark_orange",
            "error": "bold red",
        })
    return Theme(styles)
