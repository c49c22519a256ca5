"""Control metadata for the blog's math widgets.

Static: slider ranges, steps and defaults. The frontend renders its controls
from this, and the API clamps to the same limits.
"""

from __future__ import annotations

from labmath.services.moments import K_MAX, K_MIN, SAMPLES_MAX, SAMPLES_MIN

CATALOG: dict[str, object] = {
    "version": "1.0",
    "widgets": [
        {
            "key": "normal_area",
            "label": "Standard normal",
            "chart": {"x_min": -4.0, "x_max": 4.0, "y_max": 0.45, "curve_samples": 480},
            "modes": [
                {
                    "key": "area",
                    "label": "Area",
                    "endpoint": "/api/v1/normal/area",
                    "params": [
                        {"key": "a", "label": "a", "type": "range", "default": -1.0, "min": -4.0, "max": 4.0, "step": 0.05},
                        {"key": "b", "label": "b", "type": "range", "default": 1.0, "min": -4.0, "max": 4.0, "step": 0.05},
                        {"key": "n", "label": "rectangles", "type": "range", "default": 10, "min": 4, "max": 200, "step": 1},
                    ],
                    # Play: n steps by 2 every 90 ms and wraps from 200 back to 4.
                    "animation": {"param": "n", "interval_ms": 90, "step": 2, "wrap_at": 200, "wrap_to": 4},
                },
                {
                    "key": "ci",
                    "label": "Confidence Interval",
                    "endpoint": "/api/v1/normal/confidence-interval",
                    "params": [
                        {
                            "key": "confidence",
                            "label": "confidence",
                            "type": "range",
                            "default": 0.95,
                            "min": 0.5,
                            "max": 0.99,
                            "step": 0.005,
                        },
                    ],
                    "animation": {"param": "confidence", "interval_ms": 90, "center": 0.5, "amplitude": 0.49},
                },
                {
                    "key": "quantile",
                    "label": "Quantile",
                    "endpoint": "/api/v1/normal/quantile",
                    "params": [
                        {"key": "p", "label": "p = Φ(z)", "type": "range", "default": 0.975, "min": 0.5, "max": 0.999, "step": 0.001},
                    ],
                    "animation": {"param": "p", "interval_ms": 90, "center": 0.5, "amplitude": 0.499},
                },
            ],
        },
        {
            "key": "moments",
            "label": "Moments E[X^k]",
            "endpoint": "/api/v1/moments",
            "params": [
                {
                    "key": "distribution",
                    "label": "Distribution",
                    "type": "select",
                    "default": "normal",
                    "options": [
                        {"value": "normal", "label": "Normal(0,1)"},
                        {"value": "uniform", "label": "Uniform(-1,1)"},
                        {"value": "exponential", "label": "Exponential(1)"},
                    ],
                },
                {"key": "k_max", "label": "Max k", "type": "range", "default": 8, "min": K_MIN, "max": K_MAX, "step": 1},
                {
                    "key": "samples",
                    "label": "Samples",
                    "type": "range",
                    "default": 2500,
                    "min": SAMPLES_MIN,
                    "max": SAMPLES_MAX,
                    "step": 100,
                },
                {
                    "key": "scale",
                    "label": "Scale",
                    "type": "select",
                    "default": "log",
                    "options": [
                        {"value": "log", "label": "Log"},
                        {"value": "linear", "label": "Linear"},
                    ],
                },
            ],
        },
    ],
}
