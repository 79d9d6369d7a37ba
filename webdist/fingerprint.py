"""Content hashing for cache-busting filenames."""

from __future__ import annotations

import hashlib
import os

from .errors import MissingAssetError

# Read files in 64 KiB chunks so large bundles are never loaded whole.
CHUNK_SIZE = 64 * 1024


def fingerprint(data: bytes) -> str:
    """Return the lowercase SHA-256 hex digest of ``data``."""
    return hashlib.sha256(data).hexdigest()


def fingerprint_file(path: str | os.PathLike) -> str:
    """Hash the file at ``path``.

    The result is identical to ``fingerprint(Path(path).read_bytes())``.
    Missing or unreadable files raise :class:`MissingAssetError`.
    """
    digest = hashlib.sha256()
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
                digest.update(chunk)
    except OSError as exc:
        raise MissingAssetError(path, exc.strerror or str(exc)) from exc
    return digest.hexdigest()


def publish_name(base: str, ext: str, digest: str) -> str:
    return f"{base}-{digest}{ext}"


def split_name(filename: str) -> tuple[str, str]:
    """Split ``filename`` into base name and extension at the first dot.

    ``os.path.splitext`` splits at the last dot which would turn
    ``app.bundle.js`` into ``app.bundle-<digest>.js``; keeping everything after
    the first dot as the extension yields ``app-<digest>.bundle.js`` instead.
    """
    name = os.path.basename(filename)
    base, dot, rest = name.partition(".")
    if not dot or not base:
        return os.path.splitext(name)
    return base, f".{rest}"
