from pathlib import Path

import pytest

from contentgen.domain.errors import SettingsError
from contentgen.settings import load_settings, override_settings


def test_settings_file(tmp_path):
    cfg = tmp_path / "settings.toml"
    cfg.write_text(
        '[paths]\ncontent_dir = "site/content"\noutput_dir = "site/public/data"\n'
        '[site]\npublic_prefix = "/static"\norganization = "Acme"\n'
        "[build]\nworkers = 2\n",
        encoding="utf-8",
    )
    s = load_settings(cfg)
    assert s.paths.content_dir == Path("site/content").resolve()
    assert s.site.public_prefix == "/static"
    assert s.site.organization == "Acme"
    assert s.build.workers == 2


def test_missing_explicit_file(tmp_path):
    with pytest.raises(SettingsError):
        load_settings(tmp_path / "nope.toml")


def test_default_file_is_optional(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    s = load_settings()
    assert s.paths.content_dir.is_absolute()
    assert s.build.workers >= 1


def test_malformed_file(tmp_path):
    cfg = tmp_path / "settings.toml"
    cfg.write_text("[paths\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(cfg)


def test_bad_workers(tmp_path):
    cfg = tmp_path / "settings.toml"
    cfg.write_text("[build]\nworkers = 0\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(cfg)


def test_overrides(tmp_path):
    s = override_settings(load_settings(), output_dir=tmp_path, organization="Acme", public_prefix=None)
    assert s.paths.output_dir == tmp_path.resolve()
    assert s.site.organization == "Acme"


@pytest.mark.parametrize(
    "body",
    [
        'paths = "oops"\n',
        "site = 3\n",
        "[paths]\ncontent_dir = 5\n",
        "[site]\norganization = [\"Acme\"]\n",
        "[build]\nworkers = true\n",
    ],
)
def test_wrong_types_are_settings_errors(tmp_path, body):
    cfg = tmp_path / "settings.toml"
    cfg.write_text(body, encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(cfg)
