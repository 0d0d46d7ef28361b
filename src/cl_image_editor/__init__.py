"""cl_image_editor - cover-fit thumbnailing for JPEG, PNG and GIF images."""

from .algo import CropPlan, compute_crop_plan, derive_height, resample
from .codec import decode, encode, ensure_codec_available
from .editor import ImageEditor
from .errors import (
    ImageEditorError,
    InvalidState,
    LoadFailure,
    MissingDependency,
    SaveFailure,
    UnsupportedFormat,
)
from .formats import FORMAT_REGISTRY, FormatSpec, FormatTag, Transparency, detect_format
from .settings import EditorSettings, ResampleFilter
from .thumbnail import CoverThumbnailParams, cover_thumbnail, cover_thumbnails

__version__ = "0.1.0"

__all__ = [
    "ImageEditor",
    "CropPlan",
    "compute_crop_plan",
    "derive_height",
    "resample",
    "decode",
    "encode",
    "ensure_codec_available",
    "detect_format",
    "FORMAT_REGISTRY",
    "FormatSpec",
    "FormatTag",
    "Transparency",
    "EditorSettings",
    "ResampleFilter",
    "CoverThumbnailParams",
    "cover_thumbnail",
    "cover_thumbnails",
    "ImageEditorError",
    "InvalidState",
    "LoadFailure",
    "MissingDependency",
    "SaveFailure",
    "UnsupportedFormat",
    "__version__",
]
