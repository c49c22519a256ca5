import math

import pytest

from labmath.services.stats import (
    approx_area,
    area_summary,
    cdf,
    confidence_interval,
    curve,
    erf,
    exact_area,
    inv_cdf,
    pdf,
    quantile,
    riemann_rectangles,
)


def test_pdf_peak_and_symmetry():
    assert pdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi), rel=1e-15)
    for z in [0.1, 0.5, 1.0, 1.96, 3.3, 7.25, 40.0]:
        assert pdf(z) == pdf(-z)
    assert pdf(40.0) == 0.0


def test_erf_is_odd_and_close_to_math_erf():
    for x in [0.05, 0.3, 0.9, 1.5, 2.2, 3.0, 5.0]:
        assert erf(-x) == -erf(x)
    for x in [0.0, 0.05, 0.3, 0.9, 1.5, 2.2, 3.0, 5.0]:
        assert abs(erf(x) - math.erf(x)) < 2e-7


def test_cdf_at_zero():
    assert abs(cdf(0.0) - 0.5) < 1e-6


def test_cdf_is_non_decreasing():
    zs = [-8.0 + i * 0.01 for i in range(1601)]
    values = [cdf(z) for z in zs]
    for lo, hi in zip(values, values[1:]):
        assert lo <= hi


def test_cdf_saturates_for_extreme_z():
    assert cdf(-40.0) == 0.0
    assert cdf(40.0) == 1.0


def test_inv_cdf_known_value():
    assert abs(inv_cdf(0.975) - 1.95996) < 1e-3
    assert abs(inv_cdf(0.5)) < 1e-6


def test_inv_cdf_round_trip():
    for i in range(1, 1000, 7):
        p = i / 1000.0
        assert abs(cdf(inv_cdf(p)) - p) < 1e-4


def test_inv_cdf_clamps_probabilities():
    low = inv_cdf(1e-12)
    high = inv_cdf(1.0 - 1e-12)

    assert inv_cdf(0.0) == low
    assert inv_cdf(-3.0) == low
    assert inv_cdf(1.0) == high
    assert inv_cdf(7.0) == high

    assert -8.0 < low < -6.5
    assert 6.5 < high < 8.0
    assert high == pytest.approx(-low, abs=1e-2)


def test_inv_cdf_rejects_nan():
    with pytest.raises(ValueError):
        inv_cdf(float("nan"))


def test_exact_area_one_sigma_and_order_independence():
    assert abs(exact_area(-1.0, 1.0) - 0.6827) < 1e-3
    assert exact_area(-0.3, 2.1) == exact_area(2.1, -0.3)
    assert exact_area(1.2, 1.2) == 0.0


def test_midpoint_sum_converges():
    a, b = -1.0, 1.0
    exact = exact_area(a, b)
    err_10 = abs(approx_area(a, b, 10) - exact)
    err_100 = abs(approx_area(a, b, 100) - exact)
    err_1000 = abs(approx_area(a, b, 1000) - exact)

    assert err_100 < err_10
    assert err_1000 < err_10
    assert err_1000 < 1e-5


def test_partition_count_is_floored_and_at_least_one():
    assert approx_area(-1.0, 1.0, 4.9) == approx_area(-1.0, 1.0, 4)
    assert approx_area(-1.0, 1.0, 0) == approx_area(-1.0, 1.0, 1)
    assert approx_area(-1.0, 1.0, -12) == approx_area(-1.0, 1.0, 1)
    # one cell: pdf at the midpoint times the width
    assert approx_area(-1.0, 1.0, 1) == pytest.approx(pdf(0.0) * 2.0, rel=1e-15)


def test_area_summary_error_is_approx_minus_exact():
    res = area_summary(1.0, -1.0, 12.7)
    assert (res.lo, res.hi, res.n) == (-1.0, 1.0, 12)
    assert res.error == res.approx - res.exact
    # pdf is concave on [-1, 1], so the midpoint rule overestimates
    assert res.error > 0


def test_riemann_rectangles_match_sum():
    rects = riemann_rectangles(2.0, -2.0, 8)
    assert len(rects) == 8
    assert rects[0].x0 == -2.0
    assert rects[-1].x1 == pytest.approx(2.0)
    total = sum(r.height * (r.x1 - r.x0) for r in rects)
    assert total == pytest.approx(approx_area(-2.0, 2.0, 8), rel=1e-12)


def test_confidence_interval_95():
    res = confidence_interval(0.95)
    assert res.alpha == pytest.approx(0.05)
    assert res.half_alpha == pytest.approx(0.025)
    assert res.p == pytest.approx(0.975)
    assert abs(res.z - 1.95996) < 1e-3
    assert exact_area(-res.z, res.z) == pytest.approx(0.95, abs=1e-6)


def test_quantile_readout():
    res = quantile(0.9)
    assert res.tail == pytest.approx(0.1)
    assert res.z == pytest.approx(1.28155, abs=1e-3)


def test_curve_sampling():
    pts = curve(-4.0, 4.0, 480)
    assert len(pts) == 481
    assert pts[0][0] == -4.0
    assert pts[-1][0] == 4.0
    assert pts[240] == (0.0, pdf(0.0))

    with pytest.raises(ValueError):
        curve(-1.0, 1.0, 0)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
def test_non_finite_bounds_rejected(bad):
    with pytest.raises(ValueError):
        exact_area(bad, 1.0)
    with pytest.raises(ValueError):
        approx_area(0.0, 1.0, bad)


def test_bounds_near_float_max_stay_finite():
    # hi - lo overflows to inf for these bounds
    assert approx_area(-1e308, 1e308, 4) == 0.0
    assert math.isfinite(approx_area(-1e308, 1e308, 1))
    assert approx_area(-1e308, 1e308, 1) > 0.0

    res = area_summary(-1e308, 1e308, 4)
    assert res.exact == 1.0
    assert res.error == -1.0

    rects = riemann_rectangles(1e308, -1e308, 4)
    assert rects[0].x0 == -1e308
    assert rects[-1].x1 == 1e308
    for r in rects:
        assert math.isfinite(r.x0) and math.isfinite(r.x1) and math.isfinite(r.height)


def test_curve_over_huge_span_stays_finite():
    pts = curve(-1e308, 1e308, 2)
    assert [x for x, _ in pts] == [-1e308, 0.0, 1e308]
    assert [y for _, y in pts] == [0.0, pdf(0.0), 0.0]
