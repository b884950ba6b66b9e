"""
Explicit validation & Pydantic models
- Turn a raw line typed by the user into something the game can use.
- Surrounding whitespace is stripped before any check.
- A failed check raises pydantic's ValidationError (a ValueError) with a readable reason.
"""

from typing import List

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from .config import GameConfig
from .types import Code

DIGITS = "0123456789"


# 1. Startup menu selection ("1" -> 3 digits, ...)
class LengthChoice(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    choice: str = Field(..., description="Menu key typed by the user")

    @field_validator("choice")
    @classmethod
    def validate_choice(cls, choice: str, info: ValidationInfo) -> str:
        # valid keys come from the config passed in as validation context
        choices = (info.context or {}).get("choices")
        if choices is None:
            raise ValueError("No menu to check the choice against; use LengthChoice.parse().")
        if choice not in choices:
            raise ValueError(f"Unknown choice {choice!r}.")
        return choice

    def length(self, config: GameConfig) -> int:
        return config.length_choices[self.choice]

    @classmethod
    def parse(cls, text: str, config: GameConfig) -> "LengthChoice":
        return cls.model_validate(
            {"choice": text}, context={"choices": config.length_choices}
        )


# 2. One guess line ("12345" for a 5 digit game)
class GuessInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(..., description="The line the user typed")
    length: int = Field(..., ge=0, description="How many digits the secret has")

    @model_validator(mode="after")
    def validate_guess(self) -> "GuessInput":
        """
        We check the length first, then that every character is a plain 0-9 digit.
        Characters like '²' or full-width digits are rejected on purpose.
        """
        if len(self.text) != self.length:
            raise ValueError(f"Guess must have exactly {self.length} digits.")

        index = 0
        while index < len(self.text):
            if self.text[index] not in DIGITS:
                raise ValueError("Guess must contain digits 0-9 only.")
            index += 1
        return self

    @property
    def digits(self) -> Code:
        return [int(ch) for ch in self.text]


def first_error(exc: ValidationError) -> str:
    """Pull the human part out of a ValidationError ('Value error, ...' prefix dropped)."""
    errors: List[dict] = exc.errors()
    if not errors:
        return str(exc)
    message = str(errors[0].get("msg", ""))
    prefix = "Value error, "
    if message.startswith(prefix):
        message = message[len(prefix):]
    return message
