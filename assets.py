"""Loading of the actor image."""

from __future__ import annotations

from pathlib import Path

import pygame

from log_utils import log_debug


class AssetLoadError(RuntimeError):
    """The actor image could not be loaded; the game cannot start."""


def load_image(path: str) -> pygame.Surface:
    """Load ``path`` into a Surface, converting it for the display if one is set."""
    image_path = Path(path)
    if not image_path.is_file():
        log_debug("assets.load_image", f"missing {image_path}")
        raise AssetLoadError(f"image not found: {image_path}")

    try:
        image = pygame.image.load(str(image_path))
    except pygame.error as exc:
        log_debug("assets.load_image", f"decode failed {image_path}: {exc}")
        raise AssetLoadError(f"cannot load image {image_path}: {exc}") from exc

    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    log_debug("assets.load_image", f"loaded {image_path} {image.get_width()}x{image.get_height()}")
    return image
