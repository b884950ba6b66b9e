"""
Game settings in one place.

- max_attempts: how many counted guesses a player gets
- length_choices: startup menu, maps what the user types to a code length

Nothing is read from the environment or from files; the CLI uses DEFAULT_CONFIG.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_ATTEMPTS = 10


class GameConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(MAX_ATTEMPTS, ge=1, description="Guesses allowed per game")
    length_choices: Dict[str, int] = Field(
        default_factory=lambda: {"1": 3, "2": 5, "3": 7},
        description="Menu key -> number of digits in the secret",
    )

    @field_validator("length_choices")
    @classmethod
    def validate_lengths(cls, choices: Dict[str, int]) -> Dict[str, int]:
        if not choices:
            raise ValueError("At least one length choice is required.")
        for key, length in choices.items():
            if length < 1:
                raise ValueError(f"Length for choice {key!r} must be at least 1.")
        return choices

    def menu_keys(self) -> str:
        """Render the keys the way the menu asks for them: '1, 2, or 3'."""
        keys = list(self.length_choices)
        if len(keys) == 1:
            return keys[0]
        return ", ".join(keys[:-1]) + ", or " + keys[-1]


DEFAULT_CONFIG = GameConfig()
