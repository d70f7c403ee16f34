from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

from contentgen import config
from contentgen.domain.errors import SettingsError

DEFAULT_SETTINGS_FILE = Path("settings.toml")


@dataclass(frozen=True)
class Paths:
    content_dir: Path
    output_dir: Path


@dataclass(frozen=True)
class Site:
    public_prefix: str
    organization: str


@dataclass(frozen=True)
class Build:
    workers: int


@dataclass(frozen=True)
class Settings:
    paths: Paths
    site: Site
    build: Build


def _expand(p: str | Path) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(str(p)))).resolve()


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    section = raw.get(name, {})
    if not isinstance(section, dict):
        raise SettingsError(f"[{name}] must be a table, got {section!r}")
    return section


def _string(section: dict[str, Any], name: str, key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise SettingsError(f"{name}.{key} must be a string, got {value!r}")
    return value


def _workers(value: Any) -> int:
    if isinstance(value, bool):
        raise SettingsError(f"build.workers must be an integer, got {value!r}")
    try:
        workers = int(value)
    except (TypeError, ValueError) as e:
        raise SettingsError(f"build.workers must be an integer, got {value!r}") from e
    if workers < 1:
        raise SettingsError(f"build.workers must be >= 1, got {workers}")
    return workers


def load_settings(path: str | Path | None = None) -> Settings:
    """
    Load settings.toml on top of environment defaults (see contentgen.config).

    An explicitly given file must exist; the default ./settings.toml is optional.
    """
    raw: dict[str, Any] = {}
    settings_path = Path(path) if path is not None else DEFAULT_SETTINGS_FILE

    if settings_path.exists():
        try:
            with settings_path.open("rb") as f:
                raw = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise SettingsError(f"Cannot read config file {settings_path}: {e}") from e
    elif path is not None:
        raise SettingsError(f"Missing config file: {settings_path}")

    paths = _section(raw, "paths")
    site = _section(raw, "site")
    build = _section(raw, "build")

    return Settings(
        paths=Paths(
            content_dir=_expand(_string(paths, "paths", "content_dir", config.CONTENT_DIR)),
            output_dir=_expand(_string(paths, "paths", "output_dir", config.OUTPUT_DIR)),
        ),
        site=Site(
            public_prefix=_string(site, "site", "public_prefix", config.PUBLIC_PREFIX),
            organization=_string(site, "site", "organization", config.ORGANIZATION),
        ),
        build=Build(
            workers=_workers(build.get("workers", config.BUILD_WORKERS)),
        ),
    )


def override_settings(
    settings: Settings,
    *,
    content_dir: Optional[str | Path] = None,
    output_dir: Optional[str | Path] = None,
    public_prefix: Optional[str] = None,
    organization: Optional[str] = None,
    workers: Optional[int] = None,
) -> Settings:
    """
    Apply CLI overrides on top of loaded settings. None means "keep".
    """
    paths = settings.paths
    if content_dir is not None:
        paths = replace(paths, content_dir=_expand(content_dir))
    if output_dir is not None:
        paths = replace(paths, output_dir=_expand(output_dir))

    site = settings.site
    if public_prefix is not None:
        site = replace(site, public_prefix=public_prefix)
    if organization is not None:
        site = replace(site, organization=organization)

    build = settings.build
    if workers is not None:
        build = replace(build, workers=_workers(workers))

    return Settings(paths=paths, site=site, build=build)
