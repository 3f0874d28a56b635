import secrets
from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1
# Mixed into user seeds so that small seeds (0, 1, 42...) do not start the
# stream with a run of tiny values.
SEED_SALT = 0x0FCDD36


def pm_next(state: int) -> int:
    return (state * A) % M


def seed_to_state(seed: int) -> int:
    """
    Map any integer seed onto a valid Park–Miller state (1..M-1).
    The mapping is stable across runs and platforms, so a recorded seed
    always replays the same level.
    """
    s = (A * (seed % M) + SEED_SALT) % M
    return pm_next(s) if s else SEED_SALT


def fresh_seed() -> int:
    # Non-deterministic seed for callers that did not ask for one.
    return secrets.randbelow(M - 1) + 1


@dataclass
class PMRandom:
    """
    Minimal-standard Park–Miller generator. One instance is created per
    generation call and passed explicitly; no module-level state is shared.
    """
    state: int

    def __post_init__(self) -> None:
        self.state %= M
        if self.state == 0:
            self.state = 1

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(seed_to_state(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        # Uniform in [0, 1): states run 1..M-1.
        return (self.next32() - 1) / (M - 1)

    def bounded(self, n: int) -> int:
        """Return 1..n inclusive."""
        assert n > 0
        return (self.next32() % n) + 1

    def chance(self, p: float) -> bool:
        """True with probability p (p <= 0 never, p >= 1 always)."""
        return self.random() < p

    def pick(self, seq: Sequence[T]) -> T:
        idx = self.bounded(len(seq)) - 1
        return seq[idx]
