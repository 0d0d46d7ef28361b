"""Transparency-aware resampled copy of a crop region."""

from PIL import Image

from ..formats import FormatSpec, Transparency
from ..settings import DEFAULT_SETTINGS, EditorSettings
from ..utils.profiling import timed
from .crop_plan import CropPlan

# Palette slot reserved for the color key; quantization uses the other 255
TRANSPARENT_INDEX = 255
TRANSPARENT_COLOR = (0, 0, 0)

# Modes Pillow can resample with an interpolating filter
_OPAQUE_MODES = ("L", "RGB", "CMYK")
# 16-bit grayscale, as decoded from 16-bit PNGs
_WIDE_GRAY_MODES = ("I", "I;16", "I;16L", "I;16B", "I;16N")


def _to_8bit(image: Image.Image) -> Image.Image:
    if image.mode not in _WIDE_GRAY_MODES:
        return image
    # Plain convert() clips 16-bit samples at 255 instead of scaling them
    return image.convert("I").point(lambda v: v / 256).convert("L")


def _copy_region(source: Image.Image, plan: CropPlan, settings: EditorSettings) -> Image.Image:
    # Crop first so pixels outside the region never enter the filter window
    region = source.crop(plan.source_box)
    return region.resize(plan.dest_size, resample=settings.resample.pil_filter)


def _resample_opaque(image: Image.Image, plan: CropPlan, settings: EditorSettings) -> Image.Image:
    image = _to_8bit(image)
    source = image if image.mode in _OPAQUE_MODES else image.convert("RGB")
    canvas = Image.new(source.mode, plan.dest_size)
    canvas.paste(_copy_region(source, plan, settings), (plan.dest_x, plan.dest_y))
    return canvas


def _resample_alpha(image: Image.Image, plan: CropPlan, settings: EditorSettings) -> Image.Image:
    image = _to_8bit(image)
    source = image if image.mode == "RGBA" else image.convert("RGBA")
    canvas = Image.new("RGBA", plan.dest_size, (*TRANSPARENT_COLOR, 0))
    # No mask: alpha is copied as-is instead of composited onto the canvas
    canvas.paste(_copy_region(source, plan, settings), (plan.dest_x, plan.dest_y))
    return canvas


def _resample_color_key(image: Image.Image, plan: CropPlan, settings: EditorSettings) -> Image.Image:
    image = _to_8bit(image)
    source = image if image.mode == "RGBA" else image.convert("RGBA")
    region = _copy_region(source, plan, settings)

    canvas = region.convert("RGB").quantize(colors=TRANSPARENT_INDEX)
    palette = canvas.getpalette() or []
    palette = palette[: TRANSPARENT_INDEX * 3]
    palette += [0] * (TRANSPARENT_INDEX * 3 - len(palette))
    canvas.putpalette(palette + list(TRANSPARENT_COLOR))

    threshold = settings.color_key_threshold
    keyed = region.getchannel("A").point(lambda a: 255 if a < threshold else 0)
    canvas.paste(TRANSPARENT_INDEX, (0, 0, *canvas.size), mask=keyed)
    canvas.info["transparency"] = TRANSPARENT_INDEX
    return canvas


@timed
def resample(
    image: Image.Image,
    plan: CropPlan,
    spec: FormatSpec,
    settings: EditorSettings | None = None,
) -> Image.Image:
    """
    Redraw the plan's source region into a new buffer of the plan's size.

    Args:
        image: Source buffer, left untouched
        plan: Crop-and-scale plan computed for `image`
        spec: Format of the buffer, selects the transparency handling
        settings: Resampling filter and color-key threshold

    Returns:
        A new image of exactly plan.dest_size. The caller owns it.
    """
    settings = settings or DEFAULT_SETTINGS

    if spec.transparency is Transparency.ALPHA:
        return _resample_alpha(image, plan, settings)
    if spec.transparency is Transparency.COLOR_KEY:
        return _resample_color_key(image, plan, settings)
    return _resample_opaque(image, plan, settings)
