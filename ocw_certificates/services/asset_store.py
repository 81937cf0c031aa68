"""
services/asset_store.py
Process-wide, read-only cache of the certificate template and fonts.
"""
from pathlib import Path

from ocw_certificates.core.config import resolve_assets_dir, settings
from ocw_certificates.core.exceptions import MissingTemplateError
from ocw_certificates.services.font_service import FontStore
from ocw_certificates.utils.helpers import get_logger

logger = get_logger(__name__)


class AssetStore:
    """
    Holds the template bytes and the FontStore for the lifetime of the process.

    Created once at startup and shared by reference; nothing in it is mutated
    after construction. A missing template does not stop the store from being
    built: each certificate build fails with MissingTemplateError instead.
    """

    def __init__(self, template_path: str | Path, fonts: FontStore):
        self.template_path = Path(template_path)
        self.fonts = fonts
        self._template: bytes | None = None

        try:
            self._template = self.template_path.read_bytes()
        except OSError as e:
            logger.warning(f"Certificate template not readable: {self.template_path} ({e})")
        else:
            logger.info(f"Loaded certificate template: {self.template_path}")

    @classmethod
    def from_directory(cls, assets_dir: str | Path | None = None) -> "AssetStore":
        """Build the store from an assets directory laid out as templates/ and fonts/."""
        assets_dir = Path(assets_dir) if assets_dir else resolve_assets_dir()
        logger.info(f"Using assets directory: {assets_dir}")
        return cls(
            template_path=assets_dir / settings.TEMPLATE_FILE,
            fonts=FontStore(assets_dir / "fonts"),
        )

    def template_bytes(self) -> bytes:
        if self._template is None:
            raise MissingTemplateError(f"Certificate template not found: {self.template_path}")
        return self._template
