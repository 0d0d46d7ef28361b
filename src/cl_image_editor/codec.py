"""Pillow-backed decode/encode for the registered formats."""

from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError, features

from .errors import LoadFailure, MissingDependency, SaveFailure
from .formats import FORMAT_REGISTRY, FormatSpec, FormatTag
from .settings import DEFAULT_SETTINGS, EditorSettings


def ensure_codec_available(spec: FormatSpec) -> None:
    """Raise MissingDependency if Pillow was built without the format's codec."""
    if spec.codec is None:
        return
    if not features.check_codec(spec.codec):
        raise MissingDependency(
            f"ImageEditor needs Pillow built with the '{spec.codec}' codec to handle {spec.pil_format}"
        )


def decode(path: str | Path, tag: FormatTag) -> Image.Image:
    """
    Decode the first frame of an image into memory.

    The returned image is detached from the file, so the file handle is
    closed before this function returns.

    Raises:
        LoadFailure: If Pillow cannot decode the file as `tag`, or its pixel
            count exceeds Pillow's decompression bomb limit
    """
    path = Path(path)
    spec = FORMAT_REGISTRY[tag]

    try:
        with Image.open(path, formats=[spec.pil_format]) as img:
            img.load()
            image = img.copy()
    except (UnidentifiedImageError, OSError, SyntaxError, Image.DecompressionBombError) as exc:
        raise LoadFailure(f"ImageEditor could not load the file {path}", path) from exc

    logger.debug(f"Decoded {path} as {spec.pil_format} {image.mode} {image.size}")
    return image


def save_options(image: Image.Image, spec: FormatSpec, settings: EditorSettings) -> dict[str, object]:
    """Encoder keyword arguments for `spec`; quality only applies to JPEG."""
    options: dict[str, object] = {}

    if spec.tag is FormatTag.JPEG:
        options["quality"] = settings.jpeg_quality or spec.quality
    elif spec.tag is FormatTag.PNG:
        level = settings.png_compress_level
        options["compress_level"] = spec.compress_level if level is None else level
    elif spec.tag is FormatTag.GIF and "transparency" in image.info:
        options["transparency"] = image.info["transparency"]

    return options


def encode(
    image: Image.Image,
    path: str | Path,
    spec: FormatSpec,
    settings: EditorSettings | None = None,
) -> bool:
    """
    Write `image` to `path` using the codec of `spec`.

    Raises:
        SaveFailure: If Pillow or the filesystem rejects the write
    """
    path = Path(path)
    settings = settings or DEFAULT_SETTINGS
    options = save_options(image, spec, settings)

    if not path.parent.exists():
        raise SaveFailure(f"Output directory does not exist: {path.parent}", path)

    try:
        image.save(path, format=spec.pil_format, **options)
    except (OSError, ValueError, KeyError) as exc:
        raise SaveFailure(f"ImageEditor could not save the file {path}", path) from exc

    logger.info(f"Saved {spec.pil_format} {image.size} to {path}")
    return True
