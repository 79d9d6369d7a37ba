import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from webdist.config import PublishConfig

TEMPLATE = """<!doctype html>
<html>
  <head><link rel="stylesheet" href="/{{ css }}"></head>
  <body><script src="/{{ js }}"></script></body>
</html>
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("WEBDIST__"):
            monkeypatch.delenv(name)


@pytest.fixture
def project(tmp_path):
    """A project tree with compiled assets, a template and static files."""
    build = tmp_path / "build"
    build.mkdir()
    (build / "app.css").write_bytes(b"body{}")
    (build / "app.css.map").write_text('{"version":3,"sources":["app.scss"]}')
    (build / "app.js").write_bytes(b"console.log(1);")
    (build / "app.js.map").write_text('{"version":3,"sources":["app.ts"]}')

    (tmp_path / "index.html").write_text(TEMPLATE)

    assets = tmp_path / "assets"
    (assets / "images").mkdir(parents=True)
    (assets / "images" / "logo.svg").write_text("<svg/>")
    (assets / "fonts").mkdir()
    (assets / "fonts" / "body.woff2").write_bytes(b"\x00woff")

    icons = tmp_path / "vendor" / "icons"
    icons.mkdir(parents=True)
    (icons / "sprite.svg").write_text("<svg id='sprite'/>")

    (tmp_path / "app.conf.sample.js").write_text("window.APP_CONFIG = {};\n")
    return tmp_path


@pytest.fixture
def config(project):
    return PublishConfig(
        root=project,
        build_command=[],
        compiled_dir=project / "build",
        assets={"css": "app.css", "js": "app.js"},
        template=project / "index.html",
        output_dir=project / "dist",
        static_paths=("assets", "vendor/icons", "app.conf.sample.js"),
    )
