"""Cover-fit thumbnail batch entry points."""

from .algo import cover_thumbnail, cover_thumbnails
from .schema import CoverThumbnailParams

__all__ = ["CoverThumbnailParams", "cover_thumbnail", "cover_thumbnails"]
