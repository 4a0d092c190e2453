import logging

from rich.logging import RichHandler

from lineprompt import console
from lineprompt.state import STATE


def setup_logging() -> None:
    level = logging.DEBUG if STATE.debug_logs else logging.WARNING
    handler = RichHandler(
        console=console.stderr_console,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    root = logging.getLogger('lineprompt')
    root.handlers = [handler]
    root.setLevel(level)
