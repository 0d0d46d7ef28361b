"""Test configuration and fixtures for cl_image_editor.

All test images are generated with Pillow into pytest's tmp_path, so the
suite needs no checked-in media.
"""

from pathlib import Path

import pytest
from PIL import Image, ImageDraw

# Semi-transparent RGBA color used by the alpha preservation tests
HALF_ALPHA_COLOR = (10, 120, 200, 128)


# ============================================================================
# Image Fixtures
# ============================================================================


@pytest.fixture
def synthetic_image(tmp_path: Path) -> Path:
    """Generate an 800x600 JPEG with a grid and a centered circle."""
    output_path = tmp_path / "synthetic.jpg"

    img = Image.new("RGB", (800, 600), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, 800, 50):
        draw.line([(i, 0), (i, 600)], fill=(255, 255, 255), width=2)
    for i in range(0, 600, 50):
        draw.line([(0, i), (800, i)], fill=(255, 255, 255), width=2)

    draw.ellipse([300, 200, 500, 400], fill=(200, 100, 100))

    img.save(output_path, "JPEG", quality=85)

    return output_path


@pytest.fixture
def small_jpeg(tmp_path: Path) -> Path:
    """100x50 JPEG, smaller than the usual 300x200 target box."""
    output_path = tmp_path / "small.jpg"
    Image.new("RGB", (100, 50), color=(20, 200, 20)).save(output_path, "JPEG")
    return output_path


@pytest.fixture
def rgba_png(tmp_path: Path) -> Path:
    """200x100 PNG: left half fully transparent, right half semi-transparent."""
    output_path = tmp_path / "alpha.png"

    img = Image.new("RGBA", (200, 100), color=(0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rectangle([100, 0, 199, 99], fill=HALF_ALPHA_COLOR)
    img.save(output_path, "PNG")

    return output_path


@pytest.fixture
def transparent_gif(tmp_path: Path) -> Path:
    """120x120 GIF: top half uses the transparent palette index, bottom half red."""
    output_path = tmp_path / "keyed.gif"

    img = Image.new("P", (120, 120), color=0)
    img.putpalette([0, 0, 0, 255, 0, 0] + [0, 0, 0] * 254)
    draw = ImageDraw.Draw(img)
    draw.rectangle([0, 60, 119, 119], fill=1)
    img.save(output_path, "GIF", transparency=0)

    return output_path


@pytest.fixture
def bmp_image(tmp_path: Path) -> Path:
    """A valid raster image in a format the editor does not support."""
    output_path = tmp_path / "image.bmp"
    Image.new("RGB", (40, 40), color=(1, 2, 3)).save(output_path, "BMP")
    return output_path


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    output_path = tmp_path / "notes.jpg"
    _ = output_path.write_text("this is not an image\n", encoding="utf-8")
    return output_path


@pytest.fixture
def truncated_png(tmp_path: Path) -> Path:
    """PNG whose signature and header survive but whose pixel data is cut off."""
    full_path = tmp_path / "full.png"
    Image.effect_noise((256, 256), 64).convert("RGB").save(full_path, "PNG")

    output_path = tmp_path / "truncated.png"
    _ = output_path.write_bytes(full_path.read_bytes()[:200])
    return output_path
