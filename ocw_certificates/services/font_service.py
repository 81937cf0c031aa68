"""
services/font_service.py
Handles font loading and fallback resolution for certificate text.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping

from ocw_certificates.core.config import settings
from ocw_certificates.utils.helpers import get_logger

logger = get_logger(__name__)


class FontRole(str, Enum):
    BOLD = "bold"
    REGULAR = "regular"
    ITALIC = "italic"
    DISPLAY = "display"


DEFAULT_FONT_FILES: dict[FontRole, str] = {
    FontRole.BOLD: settings.FONT_BOLD_FILE,
    FontRole.REGULAR: settings.FONT_REGULAR_FILE,
    FontRole.ITALIC: settings.FONT_ITALIC_FILE,
    FontRole.DISPLAY: settings.FONT_DISPLAY_FILE,
}


@dataclass(frozen=True)
class LoadedFont:
    """A typeface backed by a font file found on disk."""
    role: FontRole
    filename: str
    data: bytes


@dataclass(frozen=True)
class StandardFont:
    """One of the PDF standard faces, used when a font file is missing."""
    role: FontRole
    face: str


Typeface = LoadedFont | StandardFont


@dataclass(frozen=True)
class FontSet:
    bold: Typeface
    regular: Typeface
    italic: Typeface
    display: Typeface

    def __iter__(self):
        return iter((self.bold, self.regular, self.italic, self.display))


@dataclass(frozen=True)
class EmbeddedFonts:
    """PDF font names of a FontSet once embedded into a document."""
    bold: str
    regular: str
    italic: str
    display: str


class FontStore:
    """
    Read-only cache of font file contents.

    Every configured font file is read once, when the store is created.
    Files that do not exist are remembered as missing, so lookups never
    touch the filesystem again and the store can be shared between builds.
    """

    def __init__(self, fonts_dir: str | Path, font_files: Mapping[FontRole, str] | None = None):
        self.fonts_dir = Path(fonts_dir)
        self.font_files: dict[FontRole, str] = dict(font_files or DEFAULT_FONT_FILES)
        self._buffers: dict[str, bytes] = {}

        for role, filename in self.font_files.items():
            path = self.fonts_dir / filename
            try:
                self._buffers[filename] = path.read_bytes()
            except OSError:
                logger.warning(f"Font for role '{role.value}' not found: {path}")
                continue
            logger.info(f"Loaded font '{filename}' for role '{role.value}'")

    def load_font(self, filename: str) -> bytes | None:
        """Return the cached bytes of a font file, or None if it was not found."""
        return self._buffers.get(filename)

    def _load_role(self, role: FontRole) -> LoadedFont | None:
        filename = self.font_files[role]
        data = self.load_font(filename)
        if data is None:
            return None
        return LoadedFont(role, filename, data)

    def resolve_font_set(self) -> FontSet:
        """
        Resolve each role to a loaded font or its fallback.

        bold -> Helvetica-Bold, regular -> Helvetica,
        italic -> whatever regular resolved to, display -> whatever bold resolved to.
        """
        bold = self._load_role(FontRole.BOLD) or StandardFont(FontRole.BOLD, "Helvetica-Bold")
        regular = self._load_role(FontRole.REGULAR) or StandardFont(FontRole.REGULAR, "Helvetica")
        italic = self._load_role(FontRole.ITALIC) or regular
        display = self._load_role(FontRole.DISPLAY) or bold

        font_set = FontSet(bold=bold, regular=regular, italic=italic, display=display)
        for role, typeface in zip(FontRole, font_set):
            if isinstance(typeface, StandardFont):
                logger.debug(f"Role '{role.value}' falls back to standard font {typeface.face}")
            elif typeface.role is not role:
                logger.debug(f"Role '{role.value}' falls back to '{typeface.filename}'")
        return font_set
