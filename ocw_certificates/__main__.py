"""Run the certificate service with uvicorn."""
import uvicorn

from ocw_certificates.core.config import settings

if __name__ == "__main__":
    uvicorn.run("ocw_certificates.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
