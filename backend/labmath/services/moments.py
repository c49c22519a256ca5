from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

import numpy as np

Distribution = Literal["normal", "uniform", "exponential"]
Scale = Literal["linear", "log"]

DISTRIBUTIONS: tuple[str, ...] = ("normal", "uniform", "exponential")
DEFAULT_SEED = 0x1A2B3C4D

K_MIN, K_MAX = 1, 10
SAMPLES_MIN, SAMPLES_MAX = 200, 20_000

_MASK32 = 0xFFFFFFFF


@dataclass(frozen=True)
class MomentRow:
    k: int
    exact: float
    estimate: float


@dataclass(frozen=True)
class MomentsResult:
    distribution: str
    k_max: int
    samples: int
    seed: int
    rows: list[MomentRow]


class Xorshift32:
    """Marsaglia xorshift32 mapped onto [0, 1) via (state mod 1e9) / 1e9.

    A zero seed is a fixed point of the generator and yields 0.0 forever.
    """

    def __init__(self, seed: int) -> None:
        self._state = int(seed) & _MASK32

    def __call__(self) -> float:
        s = self._state
        s ^= (s << 13) & _MASK32
        s ^= s >> 17
        s ^= (s << 5) & _MASK32
        self._state = s
        return (s % 1_000_000_000) / 1_000_000_000


def _clamp_int(x: float, lo: int, hi: int) -> int:
    x = float(x)
    if not math.isfinite(x):
        raise ValueError("expected a finite number")
    # round-half-up, matching the slider widgets
    return min(hi, max(lo, math.floor(x + 0.5)))


def _check_distribution(dist: str) -> None:
    if dist not in DISTRIBUTIONS:
        raise ValueError(f"Unknown distribution: {dist!r} (expected one of {', '.join(DISTRIBUTIONS)})")


def double_factorial(n: int) -> int:
    if n <= 0:
        return 1
    prod = 1
    for k in range(n, 1, -2):
        prod *= k
    return prod


def exact_moment(dist: Distribution, k: int) -> float:
    """Raw moment E[X^k] for N(0,1), U(-1,1) and Exp(1)."""
    _check_distribution(dist)
    if k <= 0:
        return 1.0
    if dist == "normal":
        return 0.0 if k % 2 == 1 else float(double_factorial(k - 1))
    if dist == "uniform":
        return 0.0 if k % 2 == 1 else 1.0 / (k + 1)
    return float(math.factorial(k))


def sample(dist: Distribution, u: Xorshift32) -> float:
    if dist == "uniform":
        return 2.0 * u() - 1.0
    if dist == "exponential":
        return -math.log(max(1e-12, 1.0 - u()))
    # Box-Muller (cosine branch only)
    u1 = max(1e-12, u())
    u2 = u()
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)


def estimate_moments(
    dist: Distribution,
    *,
    k_max: float = 8,
    samples: float = 2500,
    seed: int = DEFAULT_SEED,
) -> MomentsResult:
    """Monte Carlo estimates of E[X^k] for k = 1..k_max next to the exact values.

    k_max is clamped to [1, 10] and samples to [200, 20000]. The stream is
    seeded, so the same inputs always produce the same estimates.
    """
    _check_distribution(dist)
    kk = _clamp_int(k_max, K_MIN, K_MAX)
    nn = _clamp_int(samples, SAMPLES_MIN, SAMPLES_MAX)

    u = Xorshift32(seed)
    x = np.fromiter((sample(dist, u) for _ in range(nn)), dtype=float, count=nn)

    # powers[:, j] = x ** (j + 1)
    powers = np.cumprod(np.repeat(x[:, None], kk, axis=1), axis=1)
    estimates = powers.sum(axis=0) / nn

    rows = [MomentRow(k=k, exact=exact_moment(dist, k), estimate=float(estimates[k - 1])) for k in range(1, kk + 1)]
    return MomentsResult(distribution=dist, k_max=kk, samples=nn, seed=int(seed) & _MASK32, rows=rows)


def bar_magnitude(x: float, scale: Scale) -> float:
    ax = abs(x)
    if scale == "linear":
        return ax
    return math.log10(1.0 + ax)


def max_magnitude(rows: list[MomentRow], scale: Scale) -> float:
    m = 1e-12
    for r in rows:
        m = max(m, bar_magnitude(r.exact, scale), bar_magnitude(r.estimate, scale))
    return m
