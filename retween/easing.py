from __future__ import annotations

import math
from typing import Callable, Dict

# Penner constants
BACK_OVERSHOOT = 1.70158
ELASTIC_PERIOD = 0.4


def linear(t: float) -> float:
    """Linear easing."""
    return t


def ease_in_sine(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


def ease_in_out_sine(t: float) -> float:
    return 0.5 * (1 - math.cos(math.pi * t))


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t * t
    t -= 1
    return -0.5 * (t * (t - 2) - 1)


def ease_in_cubic(t: float) -> float:
    return t ** 3


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out curve."""
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t ** 3
    t -= 2
    return 0.5 * (t ** 3 + 2)


def ease_in_quart(t: float) -> float:
    return t ** 4


def ease_out_quart(t: float) -> float:
    """Quartic ease-out curve, the coordinator default."""
    return 1 - (t - 1) ** 4


def ease_in_out_quart(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t ** 4
    t -= 2
    return -0.5 * (t ** 4 - 2)


def ease_in_quint(t: float) -> float:
    return t ** 5


def ease_out_quint(t: float) -> float:
    return (t - 1) ** 5 + 1


def ease_in_out_quint(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t ** 5
    t -= 2
    return 0.5 * (t ** 5 + 2)


def ease_in_expo(t: float) -> float:
    return 0.0 if t == 0 else math.pow(1024, t - 1)


def ease_out_expo(t: float) -> float:
    return 1.0 if t == 1 else 1 - math.pow(2, -10 * t)


def ease_in_out_expo(t: float) -> float:
    if t == 0 or t == 1:
        return t
    t *= 2
    if t < 1:
        return 0.5 * math.pow(1024, t - 1)
    return 0.5 * (-math.pow(2, -10 * (t - 1)) + 2)


def ease_in_circ(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


def ease_out_circ(t: float) -> float:
    t -= 1
    return math.sqrt(1 - t * t)


def ease_in_out_circ(t: float) -> float:
    t *= 2
    if t < 1:
        return -0.5 * (math.sqrt(1 - t * t) - 1)
    t -= 2
    return 0.5 * (math.sqrt(1 - t * t) + 1)


def ease_in_back(t: float) -> float:
    s = BACK_OVERSHOOT
    return t * t * ((s + 1) * t - s)


def ease_out_back(t: float) -> float:
    s = BACK_OVERSHOOT
    t -= 1
    return t * t * ((s + 1) * t + s) + 1


def ease_in_out_back(t: float) -> float:
    s = BACK_OVERSHOOT * 1.525
    t *= 2
    if t < 1:
        return 0.5 * (t * t * ((s + 1) * t - s))
    t -= 2
    return 0.5 * (t * t * ((s + 1) * t + s) + 2)


def ease_out_bounce(t: float) -> float:
    if t < 1 / 2.75:
        return 7.5625 * t * t
    elif t < 2 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    elif t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


def ease_in_bounce(t: float) -> float:
    return 1 - ease_out_bounce(1 - t)


def ease_in_out_bounce(t: float) -> float:
    if t < 0.5:
        return ease_in_bounce(t * 2) * 0.5
    return ease_out_bounce(t * 2 - 1) * 0.5 + 0.5


def ease_in_elastic(t: float) -> float:
    if t == 0 or t == 1:
        return t
    p = ELASTIC_PERIOD
    s = p / 4
    t -= 1
    return -(math.pow(2, 10 * t) * math.sin((t - s) * (2 * math.pi) / p))


def ease_out_elastic(t: float) -> float:
    """Elastic ease-out curve."""
    if t == 0 or t == 1:
        return t
    p = ELASTIC_PERIOD
    s = p / 4
    return math.pow(2, -10 * t) * math.sin((t - s) * (2 * math.pi) / p) + 1


def ease_in_out_elastic(t: float) -> float:
    if t == 0 or t == 1:
        return t
    p = ELASTIC_PERIOD
    s = p / 4
    t = t * 2 - 1
    if t < 0:
        return -0.5 * (math.pow(2, 10 * t) * math.sin((t - s) * (2 * math.pi) / p))
    return math.pow(2, -10 * t) * math.sin((t - s) * (2 * math.pi) / p) * 0.5 + 1


EASING_FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "linear": linear,
    "easeInSine": ease_in_sine,
    "easeOutSine": ease_out_sine,
    "easeInOutSine": ease_in_out_sine,
    "easeInQuad": ease_in_quad,
    "easeOutQuad": ease_out_quad,
    "easeInOutQuad": ease_in_out_quad,
    "easeInCubic": ease_in_cubic,
    "easeOutCubic": ease_out_cubic,
    "easeInOutCubic": ease_in_out_cubic,
    "easeInQuart": ease_in_quart,
    "easeOutQuart": ease_out_quart,
    "easeInOutQuart": ease_in_out_quart,
    "easeInQuint": ease_in_quint,
    "easeOutQuint": ease_out_quint,
    "easeInOutQuint": ease_in_out_quint,
    "easeInExpo": ease_in_expo,
    "easeOutExpo": ease_out_expo,
    "easeInOutExpo": ease_in_out_expo,
    "easeInCirc": ease_in_circ,
    "easeOutCirc": ease_out_circ,
    "easeInOutCirc": ease_in_out_circ,
    "easeInBack": ease_in_back,
    "easeOutBack": ease_out_back,
    "easeInOutBack": ease_in_out_back,
    "easeInBounce": ease_in_bounce,
    "easeOutBounce": ease_out_bounce,
    "easeInOutBounce": ease_in_out_bounce,
    "easeInElastic": ease_in_elastic,
    "easeOutElastic": ease_out_elastic,
    "easeInOutElastic": ease_in_out_elastic,
}


def get_easing(
    ease: str | Callable[[float], float] | None,
) -> Callable[[float], float] | None:
    """Resolve ``ease`` to an easing function.

    Strings are looked up in :data:`EASING_FUNCTIONS` and raise ``KeyError``
    when unknown; callables and ``None`` are returned unchanged.
    """
    if isinstance(ease, str):
        if ease not in EASING_FUNCTIONS:
            raise KeyError(f"Unknown easing '{ease}'")
        return EASING_FUNCTIONS[ease]
    return ease


__all__ = [
    "linear",
    "ease_in_sine",
    "ease_out_sine",
    "ease_in_out_sine",
    "ease_in_quad",
    "ease_out_quad",
    "ease_in_out_quad",
    "ease_in_cubic",
    "ease_out_cubic",
    "ease_in_out_cubic",
    "ease_in_quart",
    "ease_out_quart",
    "ease_in_out_quart",
    "ease_in_quint",
    "ease_out_quint",
    "ease_in_out_quint",
    "ease_in_expo",
    "ease_out_expo",
    "ease_in_out_expo",
    "ease_in_circ",
    "ease_out_circ",
    "ease_in_out_circ",
    "ease_in_back",
    "ease_out_back",
    "ease_in_out_back",
    "ease_out_bounce",
    "ease_in_bounce",
    "ease_in_out_bounce",
    "ease_in_elastic",
    "ease_out_elastic",
    "ease_in_out_elastic",
    "get_easing",
    "BACK_OVERSHOOT",
    "ELASTIC_PERIOD",
    "EASING_FUNCTIONS",
]
