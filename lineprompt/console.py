from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        'info': 'bright_black',
        'item': 'bold blue',
        'error': 'bold red',
    }
)
console = Console(theme=theme, highlight=False, soft_wrap=True)
stderr_console = Console(theme=theme, style='info', highlight=False, stderr=True)


def new_console() -> Console:
    return Console(theme=theme, style='info', highlight=False)
