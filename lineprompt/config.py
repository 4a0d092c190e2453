from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_LABEL = 'Enter a value: '
DEFAULT_ANSWER_PREFIX = 'Answer: '


class PromptSettings(BaseModel):
    label: str = Field(
        default=DEFAULT_LABEL,
        description='Text written to stderr before every read attempt.',
    )

    answer_prefix: str = Field(
        default=DEFAULT_ANSWER_PREFIX,
        description='Prefix printed before the answer on stdout.',
    )

    max_attempts: Optional[int] = Field(
        default=None,
        ge=1,
        description='Maximum number of read attempts. Unbounded when not set.',
    )

    def format_answer(self, answer: str) -> str:
        return f'{self.answer_prefix}{answer}'
