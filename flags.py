import io
import os

from PIL import Image

from common import DEFAULT_PNG_WIDTH, FLAGS_DIR
from countries import COUNTRIES
from exceptions import AssetReadError, RasterizationError
from logs import app_logger

PNG_SIGNATURE = b'\x89PNG'


def svg_flag_path(country):
    country = COUNTRIES.parse(country)
    return os.path.join(FLAGS_DIR, country.flag)


def svg_flag_contents(country):
    path = svg_flag_path(country)
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        app_logger.error(f"Error reading flag asset {path}: {e}")
        raise AssetReadError(path, e.strerror or str(e)) from e


def _render_svg(svg_bytes, width):
    # cairosvg needs the native cairo library, so it is only imported when rendering
    import cairosvg

    return cairosvg.svg2png(bytestring=svg_bytes, output_width=width)


def rasterize(svg_bytes, width):
    """
    Render SVG bytes to a PNG exactly `width` pixels wide, keeping the aspect ratio.
    Args:
        svg_bytes (bytes): Source SVG document.
        width (int): Target width in pixels, must be positive.
    Returns:
        bytes: PNG encoded image.
    """
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise ValueError(f"Flag width must be a positive integer, got {width!r}")

    try:
        png_bytes = _render_svg(svg_bytes, width)
        with Image.open(io.BytesIO(png_bytes)) as source:
            source.load()
            mode = source.mode if source.mode in ("RGB", "RGBA") else "RGBA"
            with source.convert(mode) as converted:
                w, h = converted.size
                height = max(1, int(round(h * width / w)))
                with converted.resize((width, height), Image.Resampling.LANCZOS) as scaled:
                    out = io.BytesIO()
                    scaled.save(out, format="PNG", optimize=True)
    except Exception as e:
        # cairosvg surfaces malformed XML through several parser specific errors
        app_logger.error(f"Error rasterizing flag at {width}px: {e}")
        raise RasterizationError(f"Unable to rasterize flag at {width}px: {e}") from e

    return out.getvalue()


def png_flag_contents(country, width=None):
    country = COUNTRIES.parse(country)
    width = DEFAULT_PNG_WIDTH if width is None else width

    svg_bytes = svg_flag_contents(country)
    app_logger.info(f"Rasterizing {country.value} flag at {width}px")
    return rasterize(svg_bytes, width)
