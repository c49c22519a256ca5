from __future__ import annotations

import math
from dataclasses import dataclass

# Abramowitz & Stegun 7.1.26 coefficients (|error| <= 1.5e-7).
_ERF_P = 0.3275911
_ERF_A1 = 0.254829592
_ERF_A2 = -0.284496736
_ERF_A3 = 1.421413741
_ERF_A4 = -1.453152027
_ERF_A5 = 1.061405429

_SQRT_2PI = math.sqrt(2.0 * math.pi)

P_MIN = 1e-12
P_MAX = 1.0 - 1e-12
BRACKET_LO = -8.0
BRACKET_HI = 8.0
BISECTION_STEPS = 80

# Upper bound on midpoint cells accepted at the API boundary.
MAX_PARTITIONS = 100_000


@dataclass(frozen=True)
class AreaResult:
    lo: float
    hi: float
    n: int
    exact: float
    approx: float
    error: float


@dataclass(frozen=True)
class Rectangle:
    x0: float
    x1: float
    height: float


@dataclass(frozen=True)
class ConfidenceResult:
    confidence: float
    alpha: float
    half_alpha: float
    p: float
    z: float


@dataclass(frozen=True)
class QuantileResult:
    p: float
    z: float
    tail: float


def _require_finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number")
    return value


def _partitions(n: float) -> int:
    n = _require_finite("n", n)
    return max(1, math.floor(n))


def pdf(z: float) -> float:
    """Standard normal PDF."""
    return math.exp(-0.5 * z * z) / _SQRT_2PI


def erf(x: float) -> float:
    """Error function, Abramowitz & Stegun 7.1.26.

    Evaluated on |x| with the sign reapplied, so erf(-x) == -erf(x) exactly.
    """
    sign = -1.0 if x < 0 else 1.0
    ax = abs(x)
    t = 1.0 / (1.0 + _ERF_P * ax)
    poly = (((_ERF_A5 * t + _ERF_A4) * t + _ERF_A3) * t + _ERF_A2) * t + _ERF_A1
    return sign * (1.0 - poly * t * math.exp(-ax * ax))


def cdf(z: float) -> float:
    """Standard normal CDF.

    No clamping on z: very large |z| saturates to 0.0 / 1.0.
    """
    return 0.5 * (1.0 + erf(z / math.sqrt(2.0)))


def inv_cdf(p: float) -> float:
    """Quantile of the standard normal by fixed-step bisection.

    p is clamped to [1e-12, 1 - 1e-12]. The bracket [-8, 8] is halved exactly
    80 times; there is no tolerance check, so the output is identical on every
    platform.
    """
    p = _require_finite("p", p)
    pp = min(P_MAX, max(P_MIN, p))
    lo = BRACKET_LO
    hi = BRACKET_HI
    for _ in range(BISECTION_STEPS):
        mid = (lo + hi) / 2.0
        if cdf(mid) < pp:
            lo = mid
        else:
            hi = mid
    return (lo + hi) / 2.0


def exact_area(a: float, b: float) -> float:
    """P(min(a,b) <= Z <= max(a,b))."""
    a = _require_finite("a", a)
    b = _require_finite("b", b)
    return cdf(max(a, b)) - cdf(min(a, b))


def _lerp(lo: float, hi: float, f: float) -> float:
    # stays finite even when hi - lo overflows
    return lo * (1.0 - f) + hi * f


def approx_area(a: float, b: float, n: float) -> float:
    """Midpoint Riemann sum of the PDF over [min(a,b), max(a,b)] with n cells."""
    a = _require_finite("a", a)
    b = _require_finite("b", b)
    lo = min(a, b)
    hi = max(a, b)
    nn = _partitions(n)
    w = (hi - lo) / nn

    total = 0.0
    if math.isfinite(w):
        for i in range(nn):
            total += pdf(lo + (i + 0.5) * w) * w
        return total

    # Span exceeds the float range: split the width so every term stays finite.
    for i in range(nn):
        h = pdf(_lerp(lo, hi, (i + 0.5) / nn))
        total += h * (hi / nn) - h * (lo / nn)
    return total


def riemann_rectangles(a: float, b: float, n: float) -> list[Rectangle]:
    """Midpoint rectangles as drawn by the area widget."""
    a = _require_finite("a", a)
    b = _require_finite("b", b)
    lo = min(a, b)
    hi = max(a, b)
    nn = _partitions(n)
    w = (hi - lo) / nn

    rects: list[Rectangle] = []
    for i in range(nn):
        if math.isfinite(w):
            x0 = lo + i * w
            x1 = x0 + w
            mid = lo + (i + 0.5) * w
        else:
            x0 = _lerp(lo, hi, i / nn)
            x1 = _lerp(lo, hi, (i + 1) / nn)
            mid = _lerp(lo, hi, (i + 0.5) / nn)
        rects.append(Rectangle(x0=x0, x1=x1, height=pdf(mid)))
    return rects


def area_summary(a: float, b: float, n: float) -> AreaResult:
    """Exact area, midpoint approximation and the signed error (approx - exact)."""
    a = _require_finite("a", a)
    b = _require_finite("b", b)
    nn = _partitions(n)
    exact = exact_area(a, b)
    approx = approx_area(a, b, nn)
    return AreaResult(lo=min(a, b), hi=max(a, b), n=nn, exact=exact, approx=approx, error=approx - exact)


def confidence_interval(confidence: float) -> ConfidenceResult:
    """Two-sided critical value: the central [-z, z] band holds `confidence` mass."""
    confidence = _require_finite("confidence", confidence)
    alpha = 1.0 - confidence
    p = 1.0 - alpha / 2.0
    return ConfidenceResult(confidence=confidence, alpha=alpha, half_alpha=alpha / 2.0, p=p, z=inv_cdf(p))


def quantile(p: float) -> QuantileResult:
    p = _require_finite("p", p)
    return QuantileResult(p=p, z=inv_cdf(p), tail=1.0 - p)


def curve(x_min: float = -4.0, x_max: float = 4.0, samples: int = 480) -> list[tuple[float, float]]:
    """(x, pdf(x)) at samples + 1 evenly spaced points, endpoints included."""
    x_min = _require_finite("x_min", x_min)
    x_max = _require_finite("x_max", x_max)
    if samples < 1:
        raise ValueError("samples must be >= 1")
    span = x_max - x_min
    points: list[tuple[float, float]] = []
    for i in range(samples + 1):
        if math.isfinite(span):
            x = x_min + (i / samples) * span
        else:
            x = _lerp(x_min, x_max, i / samples)
        points.append((x, pdf(x)))
    return points
