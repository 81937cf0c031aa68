"""
core/exceptions.py
Typed failures raised while building a certificate.

Every error carries an ErrorKind so the HTTP boundary can tell a bad
request apart from a server/resource fault without inspecting messages.
"""
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    RESOURCE_FAULT = "resource_fault"


class CertificateError(Exception):
    """Base class for all certificate build failures."""

    kind: ErrorKind = ErrorKind.RESOURCE_FAULT
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingTemplateError(CertificateError):
    """The template document is absent or unreadable."""


class TemplateLoadError(CertificateError):
    """The template bytes are not a usable PDF (unparsable or no pages)."""


class FontEmbedError(CertificateError):
    """A typeface resource could not be embedded into the document."""


class InvalidCertificateRequest(CertificateError):
    """The request payload violated the certificate schema."""

    kind = ErrorKind.INVALID_INPUT
    status_code = 400
