"""
core/config.py
Centralized configuration using environment variables.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Package and project directories
PACKAGE_DIR = Path(__file__).resolve().parent.parent
BASE_DIR = PACKAGE_DIR.parent


class Settings:
    # App
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", 3000))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Assets (optional override of the search path)
    ASSETS_DIR: str = os.getenv("ASSETS_DIR", "")
    TEMPLATE_FILE: str = os.getenv("TEMPLATE_FILE", "templates/certificate-template.pdf")

    # Font files, relative to <assets>/fonts
    FONT_BOLD_FILE: str = os.getenv("FONT_BOLD_FILE", "Montserrat-Bold.ttf")
    FONT_REGULAR_FILE: str = os.getenv("FONT_REGULAR_FILE", "Montserrat-Regular.ttf")
    FONT_ITALIC_FILE: str = os.getenv("FONT_ITALIC_FILE", "Montserrat-LightItalic.ttf")
    FONT_DISPLAY_FILE: str = os.getenv("FONT_DISPLAY_FILE", "Oswald-Bold.ttf")


settings = Settings()


def resolve_assets_dir() -> Path:
    """
    Locate the assets directory.

    ASSETS_DIR wins when set; otherwise the package-local ``assets`` folder
    is used if it exists, else the project-root ``assets`` folder.
    """
    if settings.ASSETS_DIR:
        return Path(settings.ASSETS_DIR)
    local = PACKAGE_DIR / "assets"
    if local.is_dir():
        return local
    return BASE_DIR / "assets"
