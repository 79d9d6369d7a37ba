"""Publish compiled assets under fingerprinted names.

The pipeline runs top to bottom and stops at the first failure:

1. check the output directory does not overlap any input
2. run the external build
3. clear the output directory
4. fingerprint each tracked asset and copy it (and its source map)
5. render ``index.html`` with the published filenames
6. write ``manifest.json``
7. copy the remaining static files verbatim
"""

from __future__ import annotations

import json
import logging
import os
import shutil
from pathlib import Path
from typing import Iterable

from .build_step import run_build
from .config import PublishConfig
from .errors import MissingAssetError, PublishError
from .fingerprint import fingerprint_file, publish_name, split_name
from .render import render_file

logger = logging.getLogger(__name__)

ENTRY_PAGE = "index.html"
MANIFEST_NAME = "manifest.json"
SOURCE_MAP_SUFFIX = ".map"


def clear_output(output_dir: Path, root: Path) -> None:
    """Remove ``output_dir`` and recreate it empty."""
    output_dir = output_dir.resolve()
    root = root.resolve()
    if output_dir == root or output_dir in root.parents:
        raise PublishError(f"refusing to clear {output_dir}: it contains the project root")
    if output_dir.exists():
        logger.info("Clearing %s", output_dir)
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True)


def _overlaps(a: Path, b: Path) -> bool:
    return a == b or a in b.parents or b in a.parents


def check_output_dir(config: PublishConfig) -> None:
    """Refuse an output directory that overlaps any input of the pipeline.

    The output is deleted on every run, so it must not equal, contain or sit
    inside the compiled assets or a static path, and must not contain the
    template.
    """
    output_dir = config.output_dir.resolve()
    inputs = [("compiled dir", config.compiled_dir)]
    for entry in config.static_paths:
        path = Path(entry)
        inputs.append(("static path", path if path.is_absolute() else config.root / path))

    for label, path in inputs:
        path = path.resolve()
        if _overlaps(output_dir, path):
            raise PublishError(f"output dir {output_dir} overlaps {label} {path}")

    template = config.template.resolve()
    if output_dir in template.parents:
        raise PublishError(f"output dir {output_dir} contains the template {template}")


def _copy(src: Path, dest: Path) -> None:
    try:
        shutil.copyfile(src, dest)
    except FileNotFoundError as exc:
        raise MissingAssetError(src, "no such file") from exc
    except IsADirectoryError as exc:
        raise MissingAssetError(src, "is a directory") from exc


def publish_asset(name: str, source: Path, output_dir: Path) -> str:
    """Copy ``source`` and its source map into ``output_dir`` under a hashed name.

    The source map is copied unmodified and shares the artifact's digest.
    Returns the published filename.
    """
    digest = fingerprint_file(source)
    base, ext = split_name(source.name)
    published = publish_name(base, ext, digest)
    logger.debug("%s: sha256 %s", name, digest)

    source_map = source.with_name(source.name + SOURCE_MAP_SUFFIX)
    if not source_map.is_file():
        raise MissingAssetError(source_map, "source map not found")

    _copy(source, output_dir / published)
    _copy(source_map, output_dir / (published + SOURCE_MAP_SUFFIX))
    logger.info("Published %s as %s", name, published)
    return published


def copy_static(paths: Iterable[str], root: Path, output_dir: Path) -> None:
    """Copy static files and directories into ``output_dir``.

    Paths are relative to ``root`` and keep that relative layout in the
    output.  Absolute paths are copied using their final component.
    """
    for entry in paths:
        src = Path(entry)
        if src.is_absolute():
            dest = output_dir / src.name
        else:
            dest = output_dir / src
            src = root / src
        if src.is_dir():
            shutil.copytree(src, dest, dirs_exist_ok=True)
        elif src.is_file():
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dest)
        else:
            raise MissingAssetError(src, "static path not found")
        logger.info("Copied %s", entry)


def write_manifest(mapping: dict[str, str], output_dir: Path) -> Path:
    path = output_dir / MANIFEST_NAME
    with open(path, "w", encoding="utf-8") as f:
        json.dump(mapping, f, indent=2, sort_keys=True)
        f.write("\n")
    return path


def publish(config: PublishConfig) -> dict[str, str]:
    """Run the full publish pipeline described by ``config``.

    Returns the mapping of logical asset name to published filename.  Any
    failure raises and leaves the output directory as far as it got.
    """
    check_output_dir(config)
    run_build(config.build_command, cwd=os.fspath(config.root))
    clear_output(config.output_dir, config.root)

    mapping: dict[str, str] = {}
    for name in config.assets:
        mapping[name] = publish_asset(name, config.compiled_path(name), config.output_dir)

    render_file(config.template, mapping, config.output_dir / ENTRY_PAGE)
    write_manifest(mapping, config.output_dir)
    copy_static(config.static_paths, config.root, config.output_dir)

    logger.info("Published %d assets to %s", len(mapping), config.output_dir)
    return mapping
