"""
services/layout_engine.py
Fixed coordinate grid of the certificate and the draw instructions for its text.

Coordinates are PDF points measured from the bottom-left corner of the
template's first page. The name baseline hangs off the page's half height,
everything else sits at fixed positions.
"""
from dataclasses import dataclass

from ocw_certificates.services.font_service import EmbeddedFonts
from ocw_certificates.services.name_service import NameLines
from ocw_certificates.services.text_metrics import fit_size

RGB = tuple[float, float, float]


@dataclass(frozen=True)
class LayoutConfig:
    left_margin: float
    date_x: float
    name_baseline_offset: float
    line_pitch: float
    level_offset: float
    date_baseline_y: float
    max_field_width: float
    nominal_name_size: float
    level_annotation_size: float
    date_size: float
    name_color: RGB
    level_color: RGB
    date_color: RGB

    def name_baseline_y(self, page_height: float) -> float:
        return page_height / 2 + self.name_baseline_offset


# ── Certificate geometry (not configurable) ────────────────────────────────────
LAYOUT = LayoutConfig(
    left_margin=95,
    date_x=95,
    name_baseline_offset=40,
    line_pitch=62,
    level_offset=38,
    date_baseline_y=108,
    max_field_width=420,
    nominal_name_size=42,
    level_annotation_size=11,
    date_size=11,
    name_color=(0.05, 0.1, 0.2),
    level_color=(0.5, 0.5, 0.5),
    date_color=(0.5, 0.5, 0.5),
)

LEVEL_ANNOTATION = "For successfully completing and passing the {level} level of English"


@dataclass(frozen=True)
class DrawInstruction:
    text: str
    x: float
    y: float
    size: float
    typeface: str
    color: RGB


def format_date(iso_date: str) -> str:
    """Reorder "YYYY-MM-DD" into "DD/MM/YYYY"."""
    year, month, day = iso_date.split("-")
    return f"{day}/{month}/{year}"


def layout_certificate(
    name_lines: NameLines,
    level: str,
    date: str,
    config: LayoutConfig,
    fonts: EmbeddedFonts,
    page_height: float,
) -> list[DrawInstruction]:
    """
    Position the certificate text fields.

    Name lines use the display face, shrunk to fit ``max_field_width``.
    The second name line is omitted when empty, but the level annotation
    keeps its position below where it would be.
    """
    name_y = config.name_baseline_y(page_height)

    def name_line(text: str, y: float) -> DrawInstruction:
        size = fit_size(fonts.display, text, config.nominal_name_size, config.max_field_width)
        return DrawInstruction(text, config.left_margin, y, size, fonts.display, config.name_color)

    instructions = [name_line(name_lines.first_line, name_y)]
    if name_lines.second_line:
        instructions.append(name_line(name_lines.second_line, name_y - config.line_pitch))

    instructions.append(DrawInstruction(
        text=LEVEL_ANNOTATION.format(level=level),
        x=config.left_margin,
        y=name_y - config.line_pitch - config.level_offset,
        size=config.level_annotation_size,
        typeface=fonts.italic,
        color=config.level_color,
    ))
    instructions.append(DrawInstruction(
        text=format_date(date),
        x=config.date_x,
        y=config.date_baseline_y,
        size=config.date_size,
        typeface=fonts.regular,
        color=config.date_color,
    ))
    return instructions
