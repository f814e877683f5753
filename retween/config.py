"""Default settings and the options file for :mod:`retween`."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict

# Every engine start, retarget and completion is appended to this file at
# DEBUG level when the package logger is lowered to DEBUG.
LOG_FILE = "retween.log"

logger = logging.getLogger("retween")
if not logger.handlers:
    handler = logging.FileHandler(LOG_FILE, encoding="utf-8", delay=True)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False

# Duration in milliseconds used by the attribute coordinator
DEFAULT_DURATION = 280
# Easing name used by the attribute coordinator
DEFAULT_EASING = "easeOutQuart"
# Frame rate targeted by ``PygameTicker.step``
DEFAULT_FPS = 60

USER_DIR = Path.home() / ".retween"
OPTIONS_FILE = USER_DIR / "options.json"

DEFAULTS: Dict[str, object] = {
    "duration": DEFAULT_DURATION,
    "easing": DEFAULT_EASING,
    "fps": DEFAULT_FPS,
}


def load_options(path: Path | str | None = None) -> dict:
    """Return :data:`DEFAULTS` updated with the values stored at ``path``."""
    options = dict(DEFAULTS)
    path = Path(path) if path is not None else OPTIONS_FILE
    if not path.exists():
        return options
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load options: %s", exc)
        return options
    if not isinstance(data, dict):
        logger.warning("Ignoring options file %s: expected an object", path)
        return options
    for key in DEFAULTS:
        if key in data:
            options[key] = data[key]
    return options


def save_options(options: dict, path: Path | str | None = None) -> None:
    """Write the known keys of ``options`` to ``path`` as JSON."""
    path = Path(path) if path is not None else OPTIONS_FILE
    data = {key: options[key] for key in DEFAULTS if key in options}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f)
    except OSError as exc:
        logger.warning("Failed to save options: %s", exc)


__all__ = [
    "LOG_FILE",
    "DEFAULT_DURATION",
    "DEFAULT_EASING",
    "DEFAULT_FPS",
    "USER_DIR",
    "OPTIONS_FILE",
    "DEFAULTS",
    "load_options",
    "save_options",
]
