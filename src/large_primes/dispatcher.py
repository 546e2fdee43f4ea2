"""Action dispatch.

Validates the inputs for one requested action, converts decimal text to
integers, runs exactly one tester or generator and wraps the outcome in an
ActionResult.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

import numpy as np

from large_primes.config import EngineConfig
from large_primes.core.integers import parse_integer
from large_primes.core.power import power as exact_power
from large_primes.core.sieve import generate_primes
from large_primes.errors import DomainError
from large_primes.primality import (
    RandomSource,
    Verdict,
    default_rng,
    fermat,
    lucas_lehmer,
    miller_rabin,
    standard,
)

logger = logging.getLogger(__name__)

IntLike = Union[int, str]


class Action(str, Enum):
    STANDARD = "standard"
    FERMAT = "fermat"
    MILLER_RABIN = "miller-rabin"
    GENERATE = "generate"
    POWER = "power"
    LUCAS_LEHMER = "lucas-lehmer"

    @classmethod
    def parse(cls, value: Union[str, 'Action']) -> 'Action':
        if isinstance(value, Action):
            return value
        try:
            return cls(value.strip().lower().replace("_", "-"))
        except (AttributeError, ValueError):
            choices = ", ".join(a.value for a in cls)
            raise DomainError(f"unknown action {value!r} (choose from {choices})") from None

    def __str__(self) -> str:
        return self.value


_TEST_NAMES = {
    Action.STANDARD: "Standard test",
    Action.FERMAT: "Fermat test",
    Action.MILLER_RABIN: "Miller-Rabin test",
}


@dataclass
class ActionResult:
    """Outcome of a single dispatched action."""
    action: Action
    inputs: Dict[str, int]
    value: Any                 # Verdict, int, or np.ndarray of primes
    elapsed: float = 0.0
    extra: Dict[str, Any] = field(default_factory=dict)

    def describe(self) -> str:
        """One-line human readable summary."""
        if self.action in _TEST_NAMES:
            return f"{_TEST_NAMES[self.action]}: {self.inputs['target']} is {self.value}"
        if self.action == Action.LUCAS_LEHMER:
            return f"Lucas-Lehmer test: M{self.inputs['mersenne_exp']} is {self.value}"
        if self.action == Action.POWER:
            return f"Power {self.inputs['target']}^{self.inputs['power']}: {self.value}"
        return f"Primes up to {self.inputs['maximum']}: {self.value.tolist()}"

    def to_dict(self) -> Dict[str, Any]:
        if isinstance(self.value, Verdict):
            value: Any = self.value.value
        elif isinstance(self.value, np.ndarray):
            value = self.value.tolist()
        else:
            value = self.value

        d = {
            "action": self.action.value,
            "inputs": dict(self.inputs),
            "result": value,
            "elapsed": self.elapsed,
        }
        d.update(self.extra)
        return d


def _require(value: Optional[IntLike], name: str) -> int:
    if value is None:
        flag = "--" + name.replace("_", "-")
        raise DomainError(f"{flag} is required for this action")
    return parse_integer(value, name)


def dispatch(
    action: Union[str, Action],
    *,
    target: Optional[IntLike] = None,
    power: Optional[IntLike] = None,
    maximum: Optional[IntLike] = None,
    mersenne_exp: Optional[IntLike] = None,
    rounds: Optional[IntLike] = None,
    rng: Optional[RandomSource] = None,
    config: Optional[EngineConfig] = None,
) -> ActionResult:
    """Run one action on validated inputs.

    Args:
        action: Action name (e.g. ``"miller-rabin"``) or Action member.
        target: Number to test, or the base for ``power``.
        power: Exponent for ``power``.
        maximum: Upper bound for ``generate``.
        mersenne_exp: Exponent p of 2**p - 1 for ``lucas-lehmer``.
        rounds: Witness rounds for ``fermat`` and ``miller-rabin``. Falls
            back to ``config.rounds``.
        rng: Random source for base selection. Built from ``config.seed``
            when None.
        config: Engine settings. Defaults to EngineConfig().

    Returns:
        ActionResult holding the verdict, power, or prime array.

    Raises:
        ParseError: If an input is not a non-negative decimal integer.
        DomainError: If a required input is missing or out of range.
    """
    action = Action.parse(action)
    if config is None:
        config = EngineConfig()

    start = time.perf_counter()
    extra: Dict[str, Any] = {}

    if action in (Action.STANDARD, Action.FERMAT, Action.MILLER_RABIN):
        n = _require(target, "target")
        inputs = {"target": n}
        logger.info(f"Running {action} on a {n.bit_length()}-bit target")

        if action == Action.STANDARD:
            value = standard(n)
        else:
            k = config.rounds if rounds is None else parse_integer(rounds, "rounds")
            if rng is None:
                rng = default_rng(config.seed)
            test = fermat if action == Action.FERMAT else miller_rabin
            value = test(n, rounds=k, rng=rng)
            extra["rounds"] = k

    elif action == Action.GENERATE:
        m = _require(maximum, "maximum")
        inputs = {"maximum": m}
        logger.info(f"Generating primes up to {m}")
        value = generate_primes(m)

    elif action == Action.POWER:
        base = _require(target, "target")
        exponent = _require(power, "power")
        inputs = {"target": base, "power": exponent}
        logger.info(f"Computing {base}^{exponent}")
        value = exact_power(base, exponent)

    else:
        p = _require(mersenne_exp, "mersenne_exp")
        inputs = {"mersenne_exp": p}
        logger.info(f"Running Lucas-Lehmer on M{p}")
        value = lucas_lehmer(p)

    elapsed = time.perf_counter() - start
    logger.info(f"{action} finished in {elapsed:.6f}s")

    return ActionResult(action=action, inputs=inputs, value=value, elapsed=elapsed, extra=extra)
