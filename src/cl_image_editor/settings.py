"""Editor configuration."""

from enum import StrEnum
from typing import ClassVar

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field


class ResampleFilter(StrEnum):
    """Area/interpolating filters accepted for the resampled copy.

    Nearest-neighbor is not offered.
    """

    BOX = "box"
    BILINEAR = "bilinear"
    HAMMING = "hamming"
    BICUBIC = "bicubic"
    LANCZOS = "lanczos"

    @property
    def pil_filter(self) -> Image.Resampling:
        return Image.Resampling[self.name]


class EditorSettings(BaseModel):
    """Tunables for resampling and encoding.

    Attributes:
        resample: Filter used when scaling the crop region
        jpeg_quality: Overrides the JPEG registry quality (1-100)
        png_compress_level: Overrides the PNG registry compression level (0-9)
        color_key_threshold: Alpha below this value becomes the GIF transparent key
    """

    resample: ResampleFilter = Field(
        default=ResampleFilter.LANCZOS,
        description="Resampling filter for the scaled copy",
    )
    jpeg_quality: int | None = Field(default=None, ge=1, le=100)
    png_compress_level: int | None = Field(default=None, ge=0, le=9)
    color_key_threshold: int = Field(default=128, ge=1, le=255)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


DEFAULT_SETTINGS = EditorSettings()
