import pytest
from pydantic import ValidationError

from lineprompt.config import DEFAULT_LABEL, PromptSettings


def test_defaults():
    settings = PromptSettings()

    assert settings.label == DEFAULT_LABEL
    assert settings.answer_prefix == 'Answer: '
    assert settings.max_attempts is None


def test_format_answer():
    assert PromptSettings().format_answer('42') == 'Answer: 42'


def test_rejects_non_positive_attempts():
    with pytest.raises(ValidationError):
        PromptSettings(max_attempts=0)
