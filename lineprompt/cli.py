from typing import Annotated, Optional

import typer

from lineprompt import console, logs, reader, utils
from lineprompt.config import DEFAULT_LABEL, PromptSettings
from lineprompt.state import STATE

app = typer.Typer(add_completion=False)


def version_callback(value: bool) -> None:
    if value:
        version = utils.get_version()

        console.console.print(f'lineprompt version {version}')
        raise typer.Exit()


@app.command()
def main(
    label: Annotated[
        str,
        typer.Option(
            '--label',
            '-l',
            help='Text shown on stderr before reading each line.',
        ),
    ] = DEFAULT_LABEL,
    max_attempts: Annotated[
        Optional[int],
        typer.Option(
            '--max-attempts',
            min=1,
            help='Give up after this many blank lines. Retries forever by default.',
        ),
    ] = None,
    debug_logs: bool = typer.Option(
        False,
        '--debug-logs',
        help='Whether to print debug logs on stderr.',
    ),
    version: Annotated[
        bool,
        typer.Option(
            '--version',
            '-v',
            callback=version_callback,
            is_eager=True,
            help='Show the version and exit.',
        ),
    ] = False,
):
    """Read one non-blank line from stdin and print it back."""
    STATE.debug_logs = debug_logs
    logs.setup_logging()

    settings = PromptSettings(label=label, max_attempts=max_attempts)
    answer = reader.prompt(settings.label, max_attempts=settings.max_attempts)
    typer.echo(settings.format_answer(answer))
