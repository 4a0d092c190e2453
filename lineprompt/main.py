import sys

import typer
from rich.console import Console


def _abort():
    Console(stderr=True).show_cursor()
    sys.exit(1)


def run_app_cli():
    from lineprompt.cli import app as app_cli

    app_cli()


def app():
    from lineprompt.exception import PromptException

    try:
        run_app_cli()
    except (KeyboardInterrupt, typer.Abort):
        _abort()
    except SystemExit as e:
        if e.code == 130:
            _abort()
        else:
            raise
    except PromptException as e:
        print(str(e), end='', file=sys.stderr)
        sys.exit(1)
