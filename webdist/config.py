"""Publish settings read from the environment.

Settings use ``webdist.foo`` style names which map to ``WEBDIST__FOO``
environment variables.  Relative paths are resolved against the project root.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

DEFAULT_BUILD_COMMAND = "npm run build"
DEFAULT_ASSETS = "css=app.css,js=app.js"
DEFAULT_STATIC_PATHS = "assets,vendor/icons,app.conf.sample.js"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name.replace(".", "__").upper(), default)


def log_level() -> str:
    return (_env("webdist.log_level", "INFO") or "INFO").upper()


@dataclass(frozen=True)
class PublishConfig:
    root: Path
    build_command: list[str] = field(default_factory=list)
    compiled_dir: Path = Path("build")
    # logical name -> compiled file, relative to ``compiled_dir``
    assets: dict[str, str] = field(default_factory=dict)
    template: Path = Path("index.html")
    output_dir: Path = Path("dist")
    static_paths: tuple[str, ...] = ()

    def compiled_path(self, name: str) -> Path:
        return self.compiled_dir / self.assets[name]


def parse_assets(value: str) -> dict[str, str]:
    """Parse ``css=app.css,js=app.js`` into an ordered mapping."""
    assets: dict[str, str] = {}
    for entry in _split_list(value):
        name, sep, filename = entry.partition("=")
        name, filename = name.strip(), filename.strip()
        if not sep or not name or not filename:
            raise ConfigError(f"asset entry {entry!r} must look like name=file")
        if name in assets:
            raise ConfigError(f"asset {name!r} is configured more than once")
        assets[name] = filename
    if not assets:
        raise ConfigError("no assets configured")
    return assets


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _resolve(root: Path, value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else root / path


def load_config(root: str | os.PathLike | None = None) -> PublishConfig:
    """Build a :class:`PublishConfig` from the current environment."""
    if root is None:
        root = _env("webdist.root") or os.getcwd()
    root = Path(root).resolve()

    try:
        build_command = shlex.split(_env("webdist.build_command", DEFAULT_BUILD_COMMAND) or "")
    except ValueError as exc:
        raise ConfigError(f"cannot parse build command: {exc}") from exc

    return PublishConfig(
        root=root,
        build_command=build_command,
        compiled_dir=_resolve(root, _env("webdist.compiled_dir", "build") or "build"),
        assets=parse_assets(_env("webdist.assets", DEFAULT_ASSETS) or ""),
        template=_resolve(root, _env("webdist.template", "index.html") or "index.html"),
        output_dir=_resolve(root, _env("webdist.output_dir", "dist") or "dist"),
        static_paths=tuple(_split_list(_env("webdist.static_paths", DEFAULT_STATIC_PATHS) or "")),
    )
