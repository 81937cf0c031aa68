"""
main.py
FastAPI application factory and startup configuration.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ocw_certificates.api.certificate import router as certificate_router
from ocw_certificates.core.exceptions import CertificateError, InvalidCertificateRequest
from ocw_certificates.services.asset_store import AssetStore

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{loc or 'body'}: {error.get('msg')}")
    return "Invalid data: " + ", ".join(parts)


def create_app(assets: AssetStore | None = None) -> FastAPI:
    """
    Build the application.

    The asset store is loaded once in the lifespan (or taken as given) and
    shared by every request.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the template and fonts on startup."""
        app.state.assets = assets or AssetStore.from_directory()
        logger.info("Certificate assets ready.")
        yield
        logger.info("Shutting down certificate service.")

    app = FastAPI(
        title="OCW Certificate Service",
        description="Generate English proficiency certificates from a PDF template.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # ── Error handlers ─────────────────────────────────────────────────────────
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        error = InvalidCertificateRequest(_describe_validation_error(exc))
        logger.info(f"Rejected request to {request.url.path}: {error.message}")
        return JSONResponse(
            status_code=error.status_code,
            content={"error": error.message, "kind": error.kind.value},
        )

    @app.exception_handler(CertificateError)
    async def certificate_exception_handler(request: Request, exc: CertificateError):
        logger.error(f"Certificate build failed: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "kind": exc.kind.value},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error."})

    # ── Routers ────────────────────────────────────────────────────────────────
    app.include_router(certificate_router)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok", "service": "OCW Certificates"}

    return app


app = create_app()
