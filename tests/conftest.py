import io
import shutil
from pathlib import Path

import pytest
import reportlab
from pypdf import PdfWriter
from reportlab.lib.pagesizes import A4, landscape
from reportlab.pdfgen import canvas

from ocw_certificates.services.asset_store import AssetStore

VERA_DIR = Path(reportlab.__file__).resolve().parent / "fonts"

# Stand-ins for the production typefaces, using fonts bundled with ReportLab
FONT_STAND_INS = {
    "Montserrat-Bold.ttf": "VeraBd.ttf",
    "Montserrat-Regular.ttf": "Vera.ttf",
    "Montserrat-LightItalic.ttf": "VeraIt.ttf",
    "Oswald-Bold.ttf": "VeraBd.ttf",
}


def make_template_pdf(pagesize=landscape(A4)) -> bytes:
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=pagesize)
    c.setFont("Helvetica", 18)
    c.drawString(95, pagesize[1] - 80, "Certificate of Achievement")
    c.showPage()
    c.save()
    return buffer.getvalue()


def make_empty_pdf() -> bytes:
    buffer = io.BytesIO()
    PdfWriter().write(buffer)
    return buffer.getvalue()


def build_assets(root: Path, fonts=tuple(FONT_STAND_INS), template: bytes | None = None) -> Path:
    """Lay out an assets directory with the given font files and template."""
    (root / "templates").mkdir(parents=True, exist_ok=True)
    (root / "fonts").mkdir(parents=True, exist_ok=True)
    (root / "templates" / "certificate-template.pdf").write_bytes(
        make_template_pdf() if template is None else template
    )
    for filename in fonts:
        shutil.copy(VERA_DIR / FONT_STAND_INS[filename], root / "fonts" / filename)
    return root


@pytest.fixture
def template_pdf() -> bytes:
    return make_template_pdf()


@pytest.fixture
def assets_dir(tmp_path) -> Path:
    return build_assets(tmp_path / "assets")


@pytest.fixture
def fallback_assets_dir(tmp_path) -> Path:
    """Template only, no font files at all."""
    return build_assets(tmp_path / "assets", fonts=())


@pytest.fixture
def assets(assets_dir) -> AssetStore:
    return AssetStore.from_directory(assets_dir)


@pytest.fixture
def fallback_assets(fallback_assets_dir) -> AssetStore:
    return AssetStore.from_directory(fallback_assets_dir)


@pytest.fixture
def missing_template_assets(tmp_path) -> AssetStore:
    root = build_assets(tmp_path / "assets", fonts=())
    (root / "templates" / "certificate-template.pdf").unlink()
    return AssetStore.from_directory(root)


@pytest.fixture
def empty_pdf() -> bytes:
    return make_empty_pdf()


@pytest.fixture
def make_assets(tmp_path):
    """Factory for stores with a chosen subset of the font files present."""
    def _make(fonts=tuple(FONT_STAND_INS), template: bytes | None = None) -> AssetStore:
        root = tmp_path / f"assets-{len(list(tmp_path.iterdir()))}"
        return AssetStore.from_directory(build_assets(root, fonts, template))
    return _make


@pytest.fixture
def broken_font_assets(tmp_path) -> AssetStore:
    root = build_assets(tmp_path / "assets", fonts=())
    (root / "fonts" / "Oswald-Bold.ttf").write_bytes(b"definitely not a truetype font")
    return AssetStore.from_directory(root)
