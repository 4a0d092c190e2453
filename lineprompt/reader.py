import enum
import logging
import sys
from typing import Optional, TextIO

from lineprompt.exception import AttemptsExhaustedError, EndOfInputError

logger = logging.getLogger(__name__)


class ReadState(enum.Enum):
    WAITING = 'waiting'
    DONE = 'done'


def write_label(label: str, stream: TextIO):
    stream.write(label)
    stream.flush()


def read_line(stream: TextIO) -> Optional[str]:
    """Read a single line from `stream`.

    Returns the line with its delimiter, the partial content buffered before
    end of stream, or None when the stream yields nothing at all.
    """
    line = stream.readline()
    if not line:
        return None
    return line


def prompt(
    label: str,
    *,
    stdin: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    max_attempts: Optional[int] = None,
) -> str:
    """Prompt with `label` on stderr until a non-blank line is read from stdin.

    The label is written verbatim, once per attempt, without a newline.
    Blank lines (after trimming) are retried. Raises EndOfInputError when
    stdin is exhausted, and AttemptsExhaustedError when `max_attempts` blank
    lines were read.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stderr = stderr if stderr is not None else sys.stderr

    state = ReadState.WAITING
    attempts = 0
    answer = ''
    while state == ReadState.WAITING:
        if max_attempts is not None and attempts >= max_attempts:
            with AttemptsExhaustedError(attempts) as e:
                e.print(
                    f'[error]No answer given after [item]{attempts}[/item] attempt(s).[/error]'
                )

        write_label(label, stderr)
        attempts += 1
        line = read_line(stdin)
        if line is None:
            logger.debug('Input stream exhausted after %d attempt(s).', attempts)
            with EndOfInputError(attempts) as e:
                e.print('[error]Input ended before an answer was given.[/error]')

        answer = line.strip()
        if answer:
            state = ReadState.DONE
        else:
            logger.debug('Blank line on attempt %d, prompting again.', attempts)

    return answer
