"""ImageEditor: load, cover-fit resize and save a single image."""

from pathlib import Path
from types import TracebackType
from typing import Self

from loguru import logger
from PIL import Image

from .algo.crop_plan import compute_crop_plan, derive_height
from .algo.resample import resample
from .codec import decode, encode, ensure_codec_available
from .errors import InvalidState
from .formats import FORMAT_REGISTRY, FormatSpec, FormatTag, detect_format
from .settings import DEFAULT_SETTINGS, EditorSettings


class ImageEditor:
    """Owns the decoded buffer of one JPEG, PNG or GIF file.

    Construction either yields a loaded editor or raises. The buffer is
    replaced on every effective resize and released on close().

    Usage:
        ImageEditor.from_file("in.png").resize(300, 200).save("out.png")
    """

    def __init__(self, path: str | Path, settings: EditorSettings | None = None) -> None:
        """
        Raises:
            FileNotFoundError: If the file does not exist
            UnsupportedFormat: If the file is not JPEG, PNG or GIF
            MissingDependency: If Pillow lacks the codec for the format
            LoadFailure: If the file cannot be decoded
        """
        self.path: Path = Path(path)
        self.settings: EditorSettings = settings or DEFAULT_SETTINGS
        self.format: FormatTag = detect_format(self.path)
        self.spec: FormatSpec = FORMAT_REGISTRY[self.format]

        ensure_codec_available(self.spec)

        self._image: Image.Image | None = decode(self.path, self.format)

    @classmethod
    def from_file(cls, path: str | Path, settings: EditorSettings | None = None) -> Self:
        """Equivalent to ImageEditor(path, settings)."""
        return cls(path, settings)

    @property
    def image(self) -> Image.Image:
        if self._image is None:
            raise InvalidState(f"ImageEditor holds no image for {self.path}")
        return self._image

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def resize(self, width: int, height: int | None = None) -> Self:
        """
        Cover-fit the image into a width x height box.

        The image is cropped symmetrically so the box is filled without
        letterboxing. When the image is already smaller than the box in both
        dimensions it is left unchanged.

        Args:
            width: Target width (> 0)
            height: Target height (> 0); derived from the aspect ratio when omitted

        Returns:
            self
        """
        if width <= 0:
            raise ValueError(f"Target width must be positive, got {width}")
        if height is not None and height <= 0:
            raise ValueError(f"Target height must be positive, got {height}")

        current = self.image
        if height is None:
            height = derive_height(current.width, current.height, width)

        plan = compute_crop_plan(current.width, current.height, width, height)
        if plan is None:
            return self

        self._image = resample(current, plan, self.spec, self.settings)
        current.close()
        return self

    def save(self, destination: str | Path) -> bool:
        """
        Write the image to `destination` in its original format.

        Returns:
            True once the file is written

        Raises:
            InvalidState: If the editor was closed
            SaveFailure: If the image cannot be encoded or written
        """
        return encode(self.image, destination, self.spec, self.settings)

    def close(self) -> None:
        if self._image is not None:
            self._image.close()
            self._image = None
            logger.debug(f"Released image buffer for {self.path}")

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        size = "closed" if self._image is None else f"{self._image.width}x{self._image.height}"
        return f"ImageEditor(path={str(self.path)!r}, format={self.format.value}, size={size})"
