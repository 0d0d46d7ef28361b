"""Format registry and file-type sniffing."""

from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import ClassVar

import magic
from loguru import logger
from pydantic import BaseModel, ConfigDict

from .errors import LoadFailure, UnsupportedFormat

# libmagic needs at most this many leading bytes for raster signatures
SNIFF_BYTES = 2048


class FormatTag(StrEnum):
    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"


class Transparency(StrEnum):
    """How a format represents transparent pixels."""

    OPAQUE = "opaque"
    COLOR_KEY = "color_key"
    ALPHA = "alpha"


class FormatSpec(BaseModel):
    """Capabilities and encoder defaults of one format."""

    tag: FormatTag
    pil_format: str
    mime_types: tuple[str, ...]
    codec: str | None = None
    quality: int | None = None
    compress_level: int | None = None
    transparency: Transparency = Transparency.OPAQUE

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def supports_alpha(self) -> bool:
        return self.transparency is not Transparency.OPAQUE


FORMAT_REGISTRY: MappingProxyType[FormatTag, FormatSpec] = MappingProxyType(
    {
        FormatTag.JPEG: FormatSpec(
            tag=FormatTag.JPEG,
            pil_format="JPEG",
            mime_types=("image/jpeg", "image/pjpeg"),
            codec="jpg",
            quality=100,
        ),
        FormatTag.PNG: FormatSpec(
            tag=FormatTag.PNG,
            pil_format="PNG",
            mime_types=("image/png",),
            codec="zlib",
            compress_level=0,
            transparency=Transparency.ALPHA,
        ),
        FormatTag.GIF: FormatSpec(
            tag=FormatTag.GIF,
            pil_format="GIF",
            mime_types=("image/gif",),
            transparency=Transparency.COLOR_KEY,
        ),
    }
)

_MIME_TO_TAG: MappingProxyType[str, FormatTag] = MappingProxyType(
    {mime: spec.tag for spec in FORMAT_REGISTRY.values() for mime in spec.mime_types}
)


def format_from_mime(mime_type: str) -> FormatTag:
    try:
        return _MIME_TO_TAG[mime_type.lower()]
    except KeyError:
        raise UnsupportedFormat(f"ImageEditor does not support file type {mime_type}") from None


def detect_format(path: str | Path) -> FormatTag:
    """
    Sniff the file signature and map it to a FormatTag.

    Args:
        path: Path to the image file

    Returns:
        The detected FormatTag

    Raises:
        FileNotFoundError: If the path does not exist
        UnsupportedFormat: If the file type is not JPEG, PNG or GIF
        LoadFailure: If the file exists but cannot be read
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    try:
        with open(path, "rb") as f:
            header = f.read(SNIFF_BYTES)
    except OSError as exc:
        raise LoadFailure(f"ImageEditor could not read the file {path}", path) from exc

    mime = magic.Magic(mime=True)
    file_type = mime.from_buffer(header) or "application/octet-stream"
    logger.debug(f"Sniffed {path} as {file_type}")

    return format_from_mime(file_type)
