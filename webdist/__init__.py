"""Fingerprint compiled web assets and publish them with their entry page."""

from .errors import (BuildError, ConfigError, MissingAssetError, PublishError,
                     RenderError)
from .fingerprint import fingerprint, fingerprint_file, publish_name
from .render import render

__all__ = [
    "BuildError",
    "ConfigError",
    "MissingAssetError",
    "PublishError",
    "RenderError",
    "fingerprint",
    "fingerprint_file",
    "publish_name",
    "render",
]
