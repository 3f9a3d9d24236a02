"""
Tests for configuration loading and directory bootstrapping.
"""
import pytest

from property_doc_filler.config import Config, ensure_directories


def test_defaults(config, tmp_path):
    assert config.PORT == 5000
    assert config.PUBLIC_BASE_URL == "http://localhost:5000"
    assert config.ALLOWED_ORIGINS == ["https://property-doc-frontend.vercel.app"]
    assert config.OVERLAY_MAPPING_PATH is None

    paths = config.paths()
    assert paths.template == tmp_path.resolve() / "document_template.pdf"
    assert paths.uploads_dir == tmp_path.resolve() / "uploads"
    assert paths.generated_dir == tmp_path.resolve() / "generated"


def test_environment_overrides(config, tmp_path, monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example.com, https://b.example.com")
    monkeypatch.setenv("GENERATED_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("OVERLAY_MAPPING_PATH", "mapping.json")

    overridden = Config()

    assert overridden.PUBLIC_BASE_URL == "http://localhost:8080"
    assert overridden.ALLOWED_ORIGINS == ["https://a.example.com", "https://b.example.com"]
    assert overridden.paths().generated_dir == (tmp_path / "out").resolve()
    assert overridden.OVERLAY_MAPPING_PATH == tmp_path.resolve() / "mapping.json"


def test_public_base_url_trailing_slash_is_dropped(config, monkeypatch):
    monkeypatch.setenv("PUBLIC_BASE_URL", "https://docs.example.com/")
    assert Config().PUBLIC_BASE_URL == "https://docs.example.com"


@pytest.mark.parametrize(
    "name, value",
    [("PORT", "0"), ("PORT", "70000"), ("PUBLIC_BASE_URL", "docs.example.com")],
)
def test_validate_rejects_bad_values(config, monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        Config().validate()


def test_ensure_directories_is_idempotent(config):
    paths = config.paths()

    ensure_directories(paths)
    ensure_directories(paths)

    assert paths.uploads_dir.is_dir()
    assert paths.generated_dir.is_dir()
