"""Map a score in [0, 1] onto a red-to-green OKLCH color.

Interpolation runs in OKLCH with increasing hue, so the midpoint passes
through yellow rather than a muddy brown. Output is a CSS ``oklch()``
string that browsers and SVG renderers accept directly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Oklch:
    lightness: float
    chroma: float
    hue: float

    def css(self) -> str:
        # Hue at 8 decimals separates scores about 1e-10 apart.
        return (
            f"oklch({self.lightness * 100:.6f}% {self.chroma:.8f} {self.hue % 360:.8f})"
        )


LOW = Oklch(lightness=0.80, chroma=0.12, hue=25.0)
HIGH = Oklch(lightness=0.85, chroma=0.14, hue=145.0)

LOW_COLOR = LOW.css()
HIGH_COLOR = HIGH.css()


def _hue_span(start: float, end: float) -> float:
    """Positive hue distance from *start* to *end* going the increasing way round."""
    span = (end - start) % 360
    return span or 360.0


_HUE_SPAN = _hue_span(LOW.hue, HIGH.hue)


def score_color(score: float) -> str:
    """Color for a score; 0 is LOW_COLOR, 1 is HIGH_COLOR.

    Scores outside [0, 1] are clamped.
    """
    t = min(max(float(score), 0.0), 1.0)
    if t == 0.0:
        return LOW_COLOR
    if t == 1.0:
        return HIGH_COLOR
    return Oklch(
        lightness=LOW.lightness + (HIGH.lightness - LOW.lightness) * t,
        chroma=LOW.chroma + (HIGH.chroma - LOW.chroma) * t,
        hue=LOW.hue + _HUE_SPAN * t,
    ).css()


def legend_endpoints() -> tuple[str, str]:
    """Gradient endpoints for a legend: ``(score_color(0), score_color(1))``."""
    return score_color(0), score_color(1)
