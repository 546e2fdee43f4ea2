"""Engine configuration.

Settings can come from a JSON file and are overridden by command-line flags.
Example file::

    {
        "rounds": 40,
        "seed": 1234,
        "log_level": "DEBUG",
        "log_file": "large_primes.log"
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from large_primes.errors import DomainError

# Witness rounds for Fermat and Miller-Rabin. Miller-Rabin's false-positive
# probability is at most 4**-rounds.
DEFAULT_ROUNDS = 20

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EngineConfig:
    """Runtime settings shared by all actions."""
    rounds: int = DEFAULT_ROUNDS
    seed: Optional[int] = None        # None draws a fresh seed each run
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def validate(self) -> 'EngineConfig':
        if isinstance(self.rounds, bool) or not isinstance(self.rounds, int) or self.rounds < 1:
            raise DomainError(f"rounds must be a positive integer, got {self.rounds!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise DomainError(f"seed must be an integer, got {self.seed!r}")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise DomainError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        self.log_level = self.log_level.upper()
        return self

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level.upper())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'EngineConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__}).validate()


def load_config(path: Union[str, Path]) -> EngineConfig:
    """Load an EngineConfig from a JSON file.

    Args:
        path: Path to a JSON object with EngineConfig fields. Unknown keys
            are ignored.

    Returns:
        Validated configuration.

    Raises:
        DomainError: If the file is not a JSON object or a field is out
            of range.
        OSError: If the file cannot be read.
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DomainError(f"config file {path} is not valid UTF-8 JSON: {e}") from e

    if not isinstance(data, dict):
        raise DomainError(f"config file {path} must contain a JSON object")

    return EngineConfig.from_dict(data)
