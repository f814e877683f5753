from __future__ import annotations

from typing import Any

import pygame


class SpriteTarget:
    """Expose a pygame sprite's animatable properties as mapping keys.

    ``x``/``y`` map to the sprite's ``pos`` vector when it has one and to the
    centre of its ``rect`` otherwise, ``alpha`` to the image alpha and
    ``scale`` to ``set_scale``.  Any other key is a plain attribute.
    """

    def __init__(self, sprite: pygame.sprite.Sprite) -> None:
        self.sprite = sprite

    def __getitem__(self, key: str) -> Any:
        sprite = self.sprite
        if key in ("x", "y"):
            if hasattr(sprite, "pos"):
                return getattr(sprite.pos, key)
            cx, cy = sprite.rect.center
            return cx if key == "x" else cy
        if key == "alpha":
            alpha = sprite.image.get_alpha()
            return 255 if alpha is None else alpha
        if key == "scale":
            return getattr(sprite, "scale", 1.0)
        try:
            return getattr(sprite, key)
        except AttributeError:
            raise KeyError(key) from None

    def __setitem__(self, key: str, value: Any) -> None:
        sprite = self.sprite
        if key in ("x", "y"):
            if hasattr(sprite, "pos"):
                setattr(sprite.pos, key, value)
            elif key == "x":
                sprite.rect.centerx = int(value)
            else:
                sprite.rect.centery = int(value)
        elif key == "alpha":
            sprite.image.set_alpha(int(value))
        elif key == "scale":
            if hasattr(sprite, "set_scale"):
                sprite.set_scale(value)
        else:
            setattr(sprite, key, value)


__all__ = ["SpriteTarget"]
