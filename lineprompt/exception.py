from typing import List, Optional

from rich.console import Capture

from lineprompt import console


class PromptException(RuntimeError):
    """Error whose message is rendered through a rich console.

    Messages are added with `print`. Used as a context manager, the exception
    collects everything printed inside the block and raises itself on exit.
    """

    def __init__(self):
        super().__init__()
        self.msg: List[str] = []
        self.capture: Optional[Capture] = None
        self.console = console.new_console()

    def print(self, *args, **kwargs):
        if self.capture is not None:
            self.console.print(*args, **kwargs)
            return
        with self.console.capture() as capture:
            self.console.print(*args, **kwargs)
        self.msg.append(capture.get())

    def __enter__(self):
        self.capture = self.console.capture()
        self.capture.__enter__()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if self.capture is not None:
            self.capture.__exit__(exc_type, exc_value, traceback)
            self.msg.append(self.capture.get())
            self.capture = None
        if exc_type is not None:
            return
        raise self

    def __str__(self) -> str:
        return ''.join(self.msg)


class EndOfInputError(PromptException):
    """Input stream was exhausted before a non-blank line arrived."""

    def __init__(self, attempts: int):
        super().__init__()
        self.attempts = attempts


class AttemptsExhaustedError(PromptException):
    """Too many blank lines were read before a non-blank one arrived."""

    def __init__(self, attempts: int):
        super().__init__()
        self.attempts = attempts
