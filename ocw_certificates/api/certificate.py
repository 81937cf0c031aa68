"""
api/certificate.py
FastAPI router for certificate generation.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from ocw_certificates.models.certificate_model import CertificateRequest
from ocw_certificates.services.asset_store import AssetStore
from ocw_certificates.services.pdf_generator import generate_certificate_pdf
from ocw_certificates.utils.helpers import certificate_filename, get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/api/certificates", tags=["Certificates"])


def get_assets(request: Request) -> AssetStore:
    """Asset store created by the application lifespan."""
    return request.app.state.assets


# ── Generate certificate ───────────────────────────────────────────────────────

@router.post("", response_class=Response)
def create_certificate(
    payload: CertificateRequest,
    assets: AssetStore = Depends(get_assets),
):
    """
    Generate a certificate PDF for one student.

    Runs in the threadpool: each call builds its own document, only the
    asset store is shared.
    """
    pdf_bytes = generate_certificate_pdf(payload, assets)
    filename = certificate_filename(payload.student_name)
    logger.info(f"Certificate served: {filename}")
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
