# =============================================================================
# lib/certificate.py - Participation Certificate Renderer
# =============================================================================
# Draws the participant's name and the event title onto the certificate
# template and returns PNG bytes. Rendering happens lazily at download time;
# "generating" a certificate only flips a flag in the database.
#
# Layout (relative to template size):
# - participant name: centred, 45% down, 36px bold
# - event title:      centred, 60% down, 24px
#
# When the template file is missing a plain bordered canvas is used so a
# download never fails just because an asset wasn't deployed.
# =============================================================================

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

FALLBACK_SIZE = (1600, 1131)
NAME_FONT_SIZE = 36
TITLE_FONT_SIZE = 24
NAME_Y_RATIO = 0.45
TITLE_Y_RATIO = 0.60
TEXT_COLOR = (0, 0, 0)
# Stroke used to embolden the name when no bold face is configured
FAUX_BOLD_STROKE = 1


@dataclass
class CertificateData:
    """Everything printed on (or needed to name) a certificate."""
    user_name: str
    event_name: str
    event_date: str
    event_location: str
    participation_type: str


class CertificateRenderError(Exception):
    """Raised when the template exists but cannot be read as an image."""


def _load_font(font_path: str | None, size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    if font_path and Path(font_path).is_file():
        return ImageFont.truetype(font_path, size)
    return ImageFont.load_default(size=size)


def _load_template(template_path: str | None) -> Image.Image:
    if template_path and Path(template_path).is_file():
        try:
            with Image.open(template_path) as template:
                return template.convert("RGB")
        except OSError as e:
            raise CertificateRenderError(f"Invalid certificate template {template_path}: {e}") from e

    logger.warning(f"Certificate template not found at {template_path}, using blank canvas")
    canvas = Image.new("RGB", FALLBACK_SIZE, (255, 255, 255))
    draw = ImageDraw.Draw(canvas)
    width, height = FALLBACK_SIZE
    draw.rectangle((24, 24, width - 24, height - 24), outline=(20, 83, 45), width=8)
    return canvas


def _draw_centered(
    draw: ImageDraw.ImageDraw,
    text: str,
    font: ImageFont.ImageFont | ImageFont.FreeTypeFont,
    width: int,
    center_y: float,
    stroke_width: int = 0,
) -> None:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font, stroke_width=stroke_width)
    x = (width - (right - left)) / 2 - left
    y = center_y - (bottom - top) / 2 - top
    draw.text(
        (x, y), text, font=font, fill=TEXT_COLOR,
        stroke_width=stroke_width, stroke_fill=TEXT_COLOR,
    )


def render_certificate(
    data: CertificateData,
    template_path: str | None = None,
    font_path: str | None = None,
    bold_font_path: str | None = None,
) -> bytes:
    """
    Render a certificate as PNG bytes.

    Args:
        data: Participant and event details
        template_path: PNG template; blank canvas when missing
        font_path: TrueType font; Pillow's default font when unset
        bold_font_path: Bold face for the name; without one the regular
            font is stroked to look bold

    Returns:
        PNG-encoded image bytes

    Raises:
        CertificateRenderError: If the template cannot be decoded
    """
    image = _load_template(template_path)
    width, height = image.size
    draw = ImageDraw.Draw(image)

    if bold_font_path and Path(bold_font_path).is_file():
        name_font, name_stroke = ImageFont.truetype(bold_font_path, NAME_FONT_SIZE), 0
    else:
        name_font, name_stroke = _load_font(font_path, NAME_FONT_SIZE), FAUX_BOLD_STROKE

    _draw_centered(draw, data.user_name, name_font, width, height * NAME_Y_RATIO, name_stroke)
    _draw_centered(draw, data.event_name, _load_font(font_path, TITLE_FONT_SIZE), width, height * TITLE_Y_RATIO)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    logger.debug(f"Rendered certificate for {data.user_name!r} ({width}x{height})")
    return buffer.getvalue()
