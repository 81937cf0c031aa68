"""
services/pdf_generator.py
Generates a certificate PDF by overlaying the student's text onto the template.
- Only the first page of the template is used
- Text is drawn with ReportLab on an overlay page, then merged with pypdf
"""
import hashlib
import io
from pathlib import Path

from pypdf import PdfReader, PdfWriter
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from ocw_certificates.core.exceptions import FontEmbedError, TemplateLoadError
from ocw_certificates.models.certificate_model import CertificateRequest
from ocw_certificates.services.asset_store import AssetStore
from ocw_certificates.services.font_service import EmbeddedFonts, FontSet, LoadedFont, Typeface
from ocw_certificates.services.layout_engine import LAYOUT, DrawInstruction, layout_certificate
from ocw_certificates.services.name_service import segment_name
from ocw_certificates.utils.helpers import get_logger

logger = get_logger(__name__)


def _embed_typeface(typeface: Typeface) -> str:
    """
    Make a typeface usable by ReportLab and return its PDF font name.

    Loaded fonts are registered under a name derived from their contents,
    so the same file always maps to the same registration.
    """
    if not isinstance(typeface, LoadedFont):
        return typeface.face

    digest = hashlib.sha1(typeface.data).hexdigest()[:10]
    font_name = f"{Path(typeface.filename).stem}-{digest}"
    if font_name in pdfmetrics.getRegisteredFontNames():
        return font_name

    try:
        pdfmetrics.registerFont(TTFont(font_name, io.BytesIO(typeface.data)))
    except Exception as e:
        raise FontEmbedError(
            f"Font '{typeface.filename}' ({typeface.role.value}) could not be embedded: {e}"
        ) from e
    return font_name


class DocumentBuilder:
    """
    One certificate document under construction.

    Owns the parsed template and the overlay canvas. A builder is created
    per build and must not be reused once ``to_bytes`` has been called.
    """

    def __init__(self, template_bytes: bytes):
        try:
            reader = PdfReader(io.BytesIO(template_bytes))
            page_count = len(reader.pages)
        except Exception as e:
            raise TemplateLoadError(f"Certificate template is not a readable PDF: {e}") from e
        if page_count == 0:
            raise TemplateLoadError("Certificate template has no pages.")

        # The first page is attached to the writer up front so it can be merged into.
        self._writer = PdfWriter()
        try:
            self._page = self._writer.add_page(reader.pages[0])
            box = self._page.mediabox
            origin = (float(box.left), float(box.bottom))
            self.page_width = float(box.width)
            self.page_height = float(box.height)
        except Exception as e:
            raise TemplateLoadError(f"Certificate template first page is malformed: {e}") from e

        self._overlay = io.BytesIO()
        self._canvas = canvas.Canvas(self._overlay, pagesize=(self.page_width, self.page_height))
        # Template-relative coordinates: start from the media box origin.
        self._canvas.translate(*origin)
        self._finished = False

    def embed_fonts(self, font_set: FontSet) -> EmbeddedFonts:
        return EmbeddedFonts(
            bold=_embed_typeface(font_set.bold),
            regular=_embed_typeface(font_set.regular),
            italic=_embed_typeface(font_set.italic),
            display=_embed_typeface(font_set.display),
        )

    def draw(self, instructions: list[DrawInstruction]) -> None:
        if self._finished:
            raise RuntimeError("DocumentBuilder has already been serialized.")
        for item in instructions:
            self._canvas.setFillColorRGB(*item.color)
            self._canvas.setFont(item.typeface, item.size)
            self._canvas.drawString(item.x, item.y, item.text)

    def to_bytes(self) -> bytes:
        """Merge the overlay onto the first template page and serialize it."""
        if self._finished:
            raise RuntimeError("DocumentBuilder has already been serialized.")
        self._finished = True

        self._canvas.showPage()
        self._canvas.save()
        self._overlay.seek(0)
        overlay_page = PdfReader(self._overlay).pages[0]
        try:
            self._page.merge_page(overlay_page)
        except Exception as e:
            raise TemplateLoadError(f"Text could not be merged onto the certificate template: {e}") from e

        out = io.BytesIO()
        self._writer.write(out)
        return out.getvalue()


def render(template_bytes: bytes, font_set: FontSet, instructions: list[DrawInstruction]) -> bytes:
    """Draw already laid-out instructions onto the template and return the PDF bytes."""
    builder = DocumentBuilder(template_bytes)
    builder.embed_fonts(font_set)
    builder.draw(instructions)
    return builder.to_bytes()


def generate_certificate_pdf(request: CertificateRequest, assets: AssetStore) -> bytes:
    """
    Generate a certificate PDF for a validated request.

    Steps:
      1. Parse the cached template and target its first page
      2. Resolve and embed the font set (fallbacks for missing files)
      3. Split the name into two lines and lay out the four text fields
      4. Draw the fields and serialize the document
    """
    builder = DocumentBuilder(assets.template_bytes())
    fonts = builder.embed_fonts(assets.fonts.resolve_font_set())

    name_lines = segment_name(request.student_name)
    instructions = layout_certificate(
        name_lines,
        request.level.value,
        request.date,
        LAYOUT,
        fonts,
        builder.page_height,
    )
    sizes = ", ".join(f"{item.size:.1f}" for item in instructions[:-2])
    logger.info(f"Rendering '{name_lines.first_line} / {name_lines.second_line}' | name sizes: {sizes}")

    builder.draw(instructions)
    pdf_bytes = builder.to_bytes()
    logger.info(f"Certificate generated ({len(pdf_bytes)} bytes) for level {request.level.value}")
    return pdf_bytes
