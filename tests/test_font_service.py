import pytest

from ocw_certificates.core.exceptions import MissingTemplateError
from ocw_certificates.services.font_service import FontRole, LoadedFont, StandardFont


def test_all_fonts_loaded(assets):
    font_set = assets.fonts.resolve_font_set()

    assert all(isinstance(typeface, LoadedFont) for typeface in font_set)
    assert font_set.display.filename == "Oswald-Bold.ttf"
    assert font_set.italic.filename == "Montserrat-LightItalic.ttf"
    assert font_set.italic.role is FontRole.ITALIC


def test_missing_italic_falls_back_to_regular(make_assets):
    store = make_assets(fonts=("Montserrat-Bold.ttf", "Montserrat-Regular.ttf", "Oswald-Bold.ttf"))
    font_set = store.fonts.resolve_font_set()

    assert font_set.italic is font_set.regular
    assert font_set.italic.filename == "Montserrat-Regular.ttf"


def test_missing_display_falls_back_to_bold(make_assets):
    store = make_assets(fonts=("Montserrat-Bold.ttf", "Montserrat-Regular.ttf"))
    font_set = store.fonts.resolve_font_set()

    assert font_set.display is font_set.bold
    assert isinstance(font_set.bold, LoadedFont)


def test_no_font_files_uses_standard_faces(fallback_assets):
    font_set = fallback_assets.fonts.resolve_font_set()

    assert font_set.bold == StandardFont(FontRole.BOLD, "Helvetica-Bold")
    assert font_set.regular == StandardFont(FontRole.REGULAR, "Helvetica")
    assert font_set.italic == font_set.regular
    assert font_set.display == font_set.bold


def test_load_font_returns_none_for_unknown_file(assets):
    assert assets.fonts.load_font("Comic-Sans.ttf") is None
    assert assets.fonts.load_font("Oswald-Bold.ttf")


def test_resolution_is_repeatable(assets):
    assert assets.fonts.resolve_font_set() == assets.fonts.resolve_font_set()


def test_template_bytes_are_cached(assets, assets_dir):
    first = assets.template_bytes()
    (assets_dir / "templates" / "certificate-template.pdf").unlink()
    assert assets.template_bytes() == first


def test_missing_template_is_reported_per_build(missing_template_assets):
    with pytest.raises(MissingTemplateError, match="template not found"):
        missing_template_assets.template_bytes()


def test_assets_dir_override(monkeypatch, tmp_path):
    from ocw_certificates.core import config

    monkeypatch.setattr(config.settings, "ASSETS_DIR", str(tmp_path))
    assert config.resolve_assets_dir() == tmp_path


def test_assets_dir_prefers_package_local_folder(monkeypatch, tmp_path):
    from ocw_certificates.core import config

    package_dir = tmp_path / "pkg"
    (package_dir / "assets").mkdir(parents=True)
    monkeypatch.setattr(config.settings, "ASSETS_DIR", "")
    monkeypatch.setattr(config, "PACKAGE_DIR", package_dir)
    monkeypatch.setattr(config, "BASE_DIR", tmp_path)

    assert config.resolve_assets_dir() == package_dir / "assets"


def test_assets_dir_defaults_to_project_root(monkeypatch, tmp_path):
    from ocw_certificates.core import config

    package_dir = tmp_path / "pkg"
    package_dir.mkdir()
    monkeypatch.setattr(config.settings, "ASSETS_DIR", "")
    monkeypatch.setattr(config, "PACKAGE_DIR", package_dir)
    monkeypatch.setattr(config, "BASE_DIR", tmp_path)

    assert config.resolve_assets_dir() == tmp_path / "assets"
