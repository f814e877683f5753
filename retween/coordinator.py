from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from .config import DEFAULT_DURATION, DEFAULT_EASING, load_options
from .easing import get_easing
from .ticker import Ticker
from .transition import Easing, Transition, value_tween, values_equal

logger = logging.getLogger(__name__)


class AttributeCoordinator:
    """Animate many named values of one object, one transition per key.

    Values are written back to ``target`` by item assignment when it supports
    it (dicts, :class:`~retween.sprite.SpriteTarget`) and with ``setattr``
    otherwise.  Without a ``ticker`` the transitions run on
    :data:`~retween.ticker.default_ticker`, which the application must
    ``tick()`` once per frame.
    """

    def __init__(
        self,
        target: Any,
        duration: Optional[float] = None,
        easing: str | Easing | None = None,
        ticker: Optional[Ticker] = None,
    ) -> None:
        self.target = target
        self.duration = DEFAULT_DURATION if duration is None else duration
        self.easing = get_easing(easing if easing is not None else DEFAULT_EASING)
        self.ticker = ticker
        self._transitions: Dict[str, Transition] = {}
        self._on_complete: Optional[Callable[[str, Any], None]] = None

    @classmethod
    def from_options(
        cls,
        target: Any,
        path: Path | str | None = None,
        ticker: Optional[Ticker] = None,
    ) -> "AttributeCoordinator":
        """Build a coordinator using the duration and easing saved in ``path``."""
        options = load_options(path)
        return cls(target, options["duration"], options["easing"], ticker)

    # Target access ---------------------------------------------------
    def _write(self, key: str, value: Any) -> None:
        if self.target is None:
            return
        if hasattr(self.target, "__setitem__"):
            self.target[key] = value
        else:
            setattr(self.target, key, value)

    def _read(self, key: str) -> Any:
        if hasattr(self.target, "__getitem__"):
            try:
                return self.target[key]
            except (KeyError, IndexError):
                return None
        return getattr(self.target, key, None)

    def _make_transition(self, key: str, seed: Any) -> Transition:
        tr = Transition(self.ticker, tween=value_tween, equals=values_equal)

        def write(value: Any) -> None:
            self._write(key, value)

        def done(value: Any) -> None:
            if self._on_complete is not None:
                self._on_complete(key, value)

        tr.set_duration(self.duration).set_easing(self.easing)
        tr.on_tick(write).on_complete(done)
        tr.set_from(seed)
        logger.debug("Tracking attribute %r from %r", key, seed)
        return tr

    # Public API ------------------------------------------------------
    def set(self, attributes: Mapping[str, Any]) -> "AttributeCoordinator":
        """Animate each key of ``attributes`` toward its value.

        Keys left out keep animating toward their previous targets.
        """
        for key, value in dict(attributes).items():
            if value is None:
                continue
            tr = self._transitions.get(key)
            if tr is None:
                current = self._read(key)
                seed = value if current is None else current
                tr = self._make_transition(key, seed)
                self._transitions[key] = tr
            tr.set_to(value)
        return self

    def set_duration(self, ms: float) -> "AttributeCoordinator":
        """Change the duration used by the next animation of every key."""
        self.duration = ms
        for tr in self._transitions.values():
            tr.set_duration(ms)
        return self

    def set_easing(self, ease: str | Easing) -> "AttributeCoordinator":
        """Change the easing used by the next animation of every key."""
        self.easing = get_easing(ease)
        for tr in self._transitions.values():
            tr.set_easing(self.easing)
        return self

    def on_complete(self, callback: Callable[[str, Any], None]) -> "AttributeCoordinator":
        """Call ``callback(key, value)`` whenever one key finishes."""
        self._on_complete = callback
        return self

    def engine(self, key: str) -> Optional[Transition]:
        """Return the transition animating ``key``, if any."""
        return self._transitions.get(key)

    def keys(self) -> Iterator[str]:
        return iter(self._transitions)

    @property
    def running(self) -> bool:
        return any(tr.running for tr in self._transitions.values())

    def complete(self) -> None:
        """Stop every key at its current value."""
        for tr in list(self._transitions.values()):
            tr.complete()

    def destroy(self) -> None:
        """Destroy every transition and release the target."""
        for tr in self._transitions.values():
            tr.destroy()
        if self._transitions:
            logger.debug("Destroyed %d attribute transitions", len(self._transitions))
        self._transitions = {}
        self.target = None


__all__ = ["AttributeCoordinator"]
