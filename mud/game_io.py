from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.theme import Theme

PROMPT = "> "

custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",
    "dim": "dim",
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})


class GameIO:
    """
    Terminal front for the game. Game text goes out verbatim on `console`;
    debug panels go to `debug_console` (stderr) and only when debug is on.
    """
    def __init__(self, console=None, stream=None, debug=False, debug_console=None):
        self.console = console or Console(theme=custom_theme)
        self.stream = stream
        self.debug_enabled = debug
        self.debug_console = debug_console or Console(theme=custom_theme, stderr=True)

    def write(self, message):
        self.console.print(str(message), markup=False, emoji=False, highlight=False, soft_wrap=True)

    def read_line(self):
        """Next input line without its newline, or None once input is exhausted."""
        try:
            line = self.console.input(PROMPT, markup=False, emoji=False, stream=self.stream)
        except EOFError:
            return None
        if self.stream is not None:
            if line == "":
                return None
            line = line.rstrip("\r\n")
        return line

    def debug(self, title, fields):
        if not self.debug_enabled:
            return
        body = "\n".join(f"[dim]{name}:[/] {escape(str(value))}" for name, value in fields)
        self.debug_console.print(Panel(body, title=f"[DEBUG: {title}]", border_style="dim"))

    def warn(self, title, details):
        self.debug_console.print(Panel(
            f"[warning]{escape(title)}[/]\n{escape(str(details))}",
            border_style="warning"
        ))
