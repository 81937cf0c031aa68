"""
services/text_metrics.py
Text width measurement and fit-to-width font sizing.
"""
from reportlab.pdfbase import pdfmetrics


def measure_width(typeface: str, text: str, size: float) -> float:
    """Rendered width of ``text`` in points, for a registered PDF font name."""
    return pdfmetrics.stringWidth(text, typeface, size)


def fit_size(typeface: str, text: str, nominal_size: float, max_width: float) -> float:
    """
    Return the font size at which ``text`` fits within ``max_width``.

    Text that already fits keeps ``nominal_size``. Otherwise the size is
    scaled down once, proportionally to the overflow; widths are linear in
    size for PDF font metrics, so no second pass is made. There is no lower
    bound on the result.
    """
    width = measure_width(typeface, text, nominal_size)
    if width <= max_width:
        return nominal_size
    return nominal_size * (max_width / width)
