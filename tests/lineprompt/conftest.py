import logging

import pytest
from rich.console import Console

from lineprompt.state import STATE


@pytest.fixture(scope='session')
def monkeysession():
    from _pytest.monkeypatch import MonkeyPatch

    mpatch = MonkeyPatch()
    yield mpatch
    mpatch.undo()


@pytest.fixture(autouse=True, scope='session')
def rich_no_markup(monkeysession):
    monkeysession.setattr(
        'lineprompt.console.console',
        Console(soft_wrap=True, no_color=True, highlight=False),
    )


@pytest.fixture(autouse=True)
def reset_state():
    yield
    STATE.debug_logs = False
    logger = logging.getLogger('lineprompt')
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
