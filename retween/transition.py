"""Retargetable transitions.

A :class:`Transition` animates one value from ``start`` to ``end`` over
``duration`` milliseconds.  Any of its inputs may be changed while it runs:
changing the target continues from the value currently on screen instead of
jumping back to the original start.

The value type is pluggable.  A transition is given a ``tween`` function
computing the value for an elapsed fraction, an ``equals`` function deciding
whether two values are the same, and an optional ``copy`` applied to values
on the way in.  :meth:`Transition.scalar` and :meth:`Transition.attributes`
build the two common configurations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from .color import blend, blend_colors, is_color_string
from .easing import get_easing
from .ticker import CancelHandle, Ticker, default_ticker

logger = logging.getLogger(__name__)

Easing = Callable[[float], float]
TweenFunc = Callable[[Any, Any, float, Easing], Any]

_MISSING = object()


# ---------------------------------------------------------------------------
# Tweens and equality rules
# ---------------------------------------------------------------------------


def scalar_tween(start: float, end: float, t: float, easing: Easing) -> float:
    """Return the value ``t`` of the way from ``start`` to ``end``.

    ``end`` is returned exactly once ``t`` reaches 1.
    """
    if t >= 1:
        return end
    return blend(start, end, easing(t))


def value_tween(start, end, t: float, easing: Easing):
    """Like :func:`scalar_tween` but blends color strings channel-wise."""
    if t >= 1:
        return end
    if is_color_string(start) and is_color_string(end):
        return blend_colors(start, end, easing(t))
    return blend(start, end, easing(t))


def attributes_tween(
    start: Mapping[str, Any], end: Mapping[str, Any], t: float, easing: Easing
) -> Mapping[str, Any]:
    """Interpolate every key of ``end``.

    Identical values are carried through, a key missing on one side snaps to
    the other side, color strings are blended per channel and everything else
    is blended as a number.
    """
    if t >= 1:
        return freeze_attributes(end)
    v = easing(t)
    result: Dict[str, Any] = {}
    for key, dst in end.items():
        src = start.get(key)
        if src is dst or src == dst:
            result[key] = src
        elif src is None:
            result[key] = dst
        elif dst is None:
            result[key] = src
        elif is_color_string(src):
            result[key] = blend_colors(src, dst, v)
        else:
            result[key] = blend(src, dst, v)
    return MappingProxyType(result)


def values_equal(a, b) -> bool:
    return a == b


def attributes_equal(new: Mapping[str, Any], old: Mapping[str, Any]) -> bool:
    """Shallow comparison ignoring keys only ``old`` has."""
    if new is old:
        return True
    return all(key in old and old[key] == value for key, value in new.items())


def freeze_attributes(value: Optional[Mapping[str, Any]]):
    """Return an immutable shallow snapshot of ``value``."""
    if value is None:
        return None
    return MappingProxyType(dict(value))


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


@dataclass
class Segment:
    """Parameters governing the active ticker registration."""

    start_time: float
    duration: float
    start: Any
    end: Any
    easing: Easing
    cancel: Optional[CancelHandle] = None
    repeating: bool = True

    def progress(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return (now - self.start_time) / self.duration


class Transition:
    """Time-driven value animation that can be retargeted mid-flight.

    Configuration may be supplied in any order; the animation starts as soon
    as ``start``, ``end``, ``duration``, ``easing`` and a tick callback are
    all known.  Frames come from ``ticker``; without one the shared
    :data:`~retween.ticker.default_ticker` is used, which only advances when
    the application calls its ``tick()`` once per frame.

    Every setter returns the transition so calls can be chained::

        Transition.scalar(ticker).set_duration(300).set_easing("linear") \\
            .on_tick(print).set_from(0).set_to(100)
    """

    def __init__(
        self,
        ticker: Optional[Ticker] = None,
        tween: TweenFunc = scalar_tween,
        equals: Callable[[Any, Any], bool] = values_equal,
        copy: Optional[Callable[[Any], Any]] = None,
    ) -> None:
        self._ticker = ticker or default_ticker
        self._tween = tween
        self._equals = equals
        self._copy = copy
        self._start: Any = None
        self._end: Any = None
        self._duration: Optional[float] = None
        self._easing: Optional[Easing] = None
        self._callback: Optional[Callable[[Any], None]] = None
        self._completed_callback: Optional[Callable[[Any], None]] = None
        self._segment: Optional[Segment] = None
        self._destroyed = False
        self._last: Any = _MISSING

    @classmethod
    def scalar(cls, ticker: Optional[Ticker] = None) -> "Transition":
        """Return a transition over plain numbers."""
        return cls(ticker, tween=scalar_tween, equals=values_equal)

    @classmethod
    def attributes(cls, ticker: Optional[Ticker] = None) -> "Transition":
        """Return a transition over mappings of numbers and colors."""
        return cls(
            ticker,
            tween=attributes_tween,
            equals=attributes_equal,
            copy=freeze_attributes,
        )

    # Read-only state -------------------------------------------------
    @property
    def start_value(self):
        return self._start

    @property
    def end_value(self):
        return self._end

    @property
    def duration(self) -> Optional[float]:
        return self._duration

    @property
    def easing(self) -> Optional[Easing]:
        return self._easing

    @property
    def running(self) -> bool:
        return self._segment is not None

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    # Configuration ---------------------------------------------------
    def set_duration(self, ms: float) -> "Transition":
        """Set the duration in milliseconds used by the next segment."""
        if self._duration == ms:
            return self
        self._duration = ms
        self._try_run()
        return self

    def set_easing(self, ease: str | Easing) -> "Transition":
        """Set the easing curve by name or function."""
        fn = get_easing(ease)
        if self._easing is fn:
            return self
        self._easing = fn
        self._try_run()
        return self

    def on_tick(self, callback: Callable[[Any], None]) -> "Transition":
        """Call ``callback`` with every computed value, including the last."""
        if self._callback is callback:
            return self
        self._callback = callback
        self._try_run()
        return self

    def on_complete(self, callback: Callable[[Any], None]) -> "Transition":
        """Call ``callback`` with the final value of each completed animation."""
        if self._completed_callback is callback:
            return self
        self._completed_callback = callback
        self._try_run()
        return self

    def set_from(self, value) -> "Transition":
        """Redefine the start value.

        A running animation is completed immediately at ``value`` first, so
        unlike :meth:`set_to` this may produce a visible jump.  The current
        target survives and a new animation starts toward it.
        """
        if self._same(self._start, value):
            return self
        value = self._ingress(value)
        end = self._end
        if self._segment is not None:
            self.complete(value)
        self._start = value
        self._end = end
        self._try_run()
        return self

    def set_to(self, value) -> "Transition":
        """Animate toward ``value``, continuing from the visible value.

        ``None`` is ignored; use :meth:`complete` or :meth:`destroy` to stop.
        """
        if value is None or self._same(self._end, value):
            return self
        value = self._ingress(value)
        self._end = value
        seg = self._segment
        if seg is not None:
            now = self._ticker.now()
            t = seg.progress(now)
            current = self._tween(seg.start, seg.end, t, seg.easing)
            if t >= 1:
                # The old segment finished before its final frame was drawn
                self._set_complete(current)
                if not self._equals(current, value):
                    self._start = current
                    self._end = value
                logger.debug("Late retarget: completed at %r, next target %r", current, value)
                self._emit(current)
                self._emit_complete(current)
            elif not seg.repeating:
                # Pending delivery of an unchanged value becomes a real animation
                seg.cancel()
                self._segment = None
                self._start = current
                self._emit(current)
            else:
                self._start = current
                # Keep the originally requested finishing time
                seg.duration -= now - seg.start_time
                seg.start_time = now
                seg.start = current
                seg.end = value
                logger.debug(
                    "Retarget at %.3f: %r -> %r over %.1fms", t, current, value, seg.duration
                )
                self._emit(current)
        self._try_run()
        return self

    # Completion ------------------------------------------------------
    def complete(self, value=_MISSING) -> "Transition":
        """Finish the animation now.

        With ``value`` the transition unconditionally completes to it.
        Without one a running animation stops at its current value; an idle
        transition is left untouched.
        """
        if value is not _MISSING:
            value = self._ingress(value)
            self._set_complete(value)
            self._emit(value)
            self._emit_complete(value)
        elif self._segment is not None:
            seg = self._segment
            current = self._tween(
                seg.start, seg.end, seg.progress(self._ticker.now()), seg.easing
            )
            self._set_complete(current)
            self._emit(current)
            self._emit_complete(current)
        return self

    def destroy(self) -> None:
        """Stop ticking for good without firing callbacks."""
        if self._segment is not None:
            seg = self._segment
            seg.cancel()
            self._segment = None
            self._start = seg.start if self._last is _MISSING else self._last
            self._end = None
            logger.debug("Destroyed running transition")
        self._destroyed = True

    # Internal --------------------------------------------------------
    def _ingress(self, value):
        if self._copy is not None:
            return self._copy(value)
        return value

    def _same(self, old, new) -> bool:
        if old is new:
            return True
        if old is None or new is None:
            return False
        return self._equals(new, old)

    def _ready(self) -> bool:
        return (
            self._start is not None
            and self._end is not None
            and self._easing is not None
            and self._callback is not None
            and self._duration is not None
        )

    def _try_run(self) -> None:
        if self._segment is not None or self._destroyed or not self._ready():
            return
        seg = Segment(
            start_time=self._ticker.now(),
            duration=self._duration,
            start=self._start,
            end=self._end,
            easing=self._easing,
        )
        self._segment = seg
        self._last = _MISSING
        if self._equals(self._start, self._end):
            seg.repeating = False
            seg.cancel = self._ticker.once(lambda: self._finish_unchanged(seg))
            logger.debug("Nothing to animate, delivering %r next frame", self._end)
        else:
            seg.cancel = self._ticker.on_tick(self._on_tick)
            logger.debug(
                "Started %r -> %r over %sms", self._start, self._end, self._duration
            )

    def _finish_unchanged(self, seg: Segment) -> None:
        if self._segment is not seg:
            return
        value = seg.end
        self._set_complete(value)
        self._emit(value)
        self._emit_complete(value)

    def _on_tick(self) -> None:
        seg = self._segment
        if seg is None:
            return
        t = seg.progress(self._ticker.now())
        value = self._tween(seg.start, seg.end, t, seg.easing)
        if t >= 1:
            self._set_complete(value)
            logger.debug("Completed at %r", value)
            self._emit(value)
            self._emit_complete(value)
        else:
            self._emit(value)

    def _set_complete(self, value) -> None:
        if self._segment is not None:
            self._segment.cancel()
            self._segment = None
        # The next set_to continues from here without a new start value
        self._start = value
        self._end = None

    def _emit(self, value) -> None:
        self._last = value
        if self._callback is not None:
            self._callback(value)

    def _emit_complete(self, value) -> None:
        if self._completed_callback is not None:
            self._completed_callback(value)


__all__ = [
    "Easing",
    "TweenFunc",
    "Segment",
    "Transition",
    "scalar_tween",
    "value_tween",
    "attributes_tween",
    "values_equal",
    "attributes_equal",
    "freeze_attributes",
]
