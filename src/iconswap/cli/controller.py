# src/iconswap/cli/controller.py
# Canvas: console front for everything the codemod prints.

from rich.console import Console

from iconswap.cli.theme import get_theme


class Canvas:
    def __init__(self, console: Console = None, mode: str = "calm"):
        self.mode = mode
        self.console = console or Console(theme=get_theme(mode), highlight=False)

    def configure(self, mode: str = "calm", no_color: bool = False):
        """Swap the underlying console, e.g. after parsing --no-color."""
        self.mode = mode
        self.console = Console(theme=get_theme(mode), no_color=no_color, highlight=False)

    def set_mode(self, mode: str):
        self.mode = mode
        self.console.push_theme(get_theme(mode))

    def start_process(self, title: str):
        self.console.print(f"\n[step]{title}[/]\n")

    def end_process(self, message: str):
        self.console.print(f"\n{message}")

    def step(self, message: str):
        self.console.print(f"[step][STEP][/]: {message}")

    def info(self, message: str):
        self.console.print(f"[info][INFO][/]: {message}")

    def success(self, message: str):
        self.console.print(f"[success][SUCCESS][/]: {message}")

    def warning(self, message: str):
        self.console.print(f"[warning][WARNING][/]: {message}")

    def error(self, message: str):
        self.console.print(f"[error][ERROR][/]: {message}")

    def print(self, *args, **kwargs):
        self.console.print(*args, **kwargs)


# Instantiate globally for imports
canvas = Canvas()
