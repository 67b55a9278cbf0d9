"""Loading images into RGBA surfaces."""

from __future__ import annotations

from typing import BinaryIO

import pygame


class ReadImageError(Exception):
    """Raised when an image cannot be read or decoded."""


def _to_rgba(surface: pygame.Surface) -> pygame.Surface:
    size = surface.get_size()
    return pygame.image.frombytes(pygame.image.tobytes(surface, "RGBA"), size, "RGBA")


def read_image(stream: BinaryIO) -> pygame.Surface:
    """Decode an image from a binary stream, guessing its format, as 32-bit RGBA."""
    try:
        return _to_rgba(pygame.image.load(stream))
    except OSError as error:
        raise ReadImageError(f"cannot read image: {error}") from error
    except pygame.error as error:
        raise ReadImageError(f"cannot decode image: {error}") from error


def make_default_texture() -> pygame.Surface:
    """A 1x1 opaque white RGBA image."""
    texture = pygame.Surface((1, 1), pygame.SRCALPHA, 32)
    texture.fill((255, 255, 255, 255))
    return texture