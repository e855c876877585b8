import pathlib
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from puzzle_solver.errors import InvalidConfiguration

COMMON_INPUTS: Tuple[str, ...] = (
    "", "foo", "bar", "test", "password", "1", "2", "3",
    "bitcoin", "satoshi", "hello", "world",
)

DEFAULT_XOR_KEY = "KEY"
DEFAULT_FEASIBILITY_THRESHOLD = 20
DEFAULT_SUCCESS_THRESHOLD = 15


class SolverSettings(BaseModel):
    """Tunables for the strategies and the latency-wrapped caller."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    feasibility_threshold: int = Field(default=DEFAULT_FEASIBILITY_THRESHOLD, ge=0)
    success_threshold: int = Field(default=DEFAULT_SUCCESS_THRESHOLD, ge=0)
    xor_key: str = Field(default=DEFAULT_XOR_KEY, min_length=1)
    dictionary: Tuple[str, ...] = COMMON_INPUTS
    strict_sequence_parsing: bool = False
    min_delay: float = Field(default=0.5, ge=0.0)
    max_delay: float = Field(default=2.0, ge=0.0)

    @model_validator(mode="after")
    def _check_ranges(self) -> "SolverSettings":
        if self.success_threshold > self.feasibility_threshold:
            raise ValueError(
                f"success_threshold ({self.success_threshold}) must not exceed "
                f"feasibility_threshold ({self.feasibility_threshold})"
            )
        if self.max_delay < self.min_delay:
            raise ValueError(f"max_delay ({self.max_delay}) must not be below min_delay ({self.min_delay})")
        return self


def load_settings(file_path: str | pathlib.Path) -> SolverSettings:
    """Load solver settings from a JSON file."""
    path = pathlib.Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = f.read()
    try:
        return SolverSettings.model_validate_json(data)
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid settings in {path}: {e}") from e
