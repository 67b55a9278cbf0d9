import io

import pygame
import pytest

from konui.media import ReadImageError, make_default_texture, read_image


def test_default_texture_is_one_white_pixel():
    texture = make_default_texture()
    assert texture.get_size() == (1, 1)
    assert tuple(texture.get_at((0, 0))) == (255, 255, 255, 255)
    assert texture.get_flags() & pygame.SRCALPHA


def test_read_image_round_trip(tmp_path):
    source = pygame.Surface((2, 1))
    source.set_at((0, 0), (255, 0, 0))
    source.set_at((1, 0), (0, 0, 255))
    path = tmp_path / "pixels.bmp"
    pygame.image.save(source, str(path))

    with open(path, "rb") as stream:
        image = read_image(stream)

    assert image.get_size() == (2, 1)
    assert tuple(image.get_at((0, 0))) == (255, 0, 0, 255)
    assert tuple(image.get_at((1, 0))) == (0, 0, 255, 255)
    assert image.get_flags() & pygame.SRCALPHA


def test_read_image_from_memory(tmp_path):
    source = pygame.Surface((3, 2))
    source.fill((10, 20, 30))
    path = tmp_path / "fill.bmp"
    pygame.image.save(source, str(path))
    image = read_image(io.BytesIO(path.read_bytes()))
    assert image.get_size() == (3, 2)
    assert tuple(image.get_at((2, 1))) == (10, 20, 30, 255)


def test_read_image_rejects_garbage():
    with pytest.raises(ReadImageError):
        read_image(io.BytesIO(b"this is not an image"))


def test_read_image_rejects_empty():
    with pytest.raises(ReadImageError):
        read_image(io.BytesIO(b""))