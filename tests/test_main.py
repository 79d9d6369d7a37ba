import hashlib
import json

from webdist.__main__ import main


def test_main_publishes(monkeypatch, project):
    monkeypatch.setenv("WEBDIST__ROOT", str(project))
    monkeypatch.setenv("WEBDIST__BUILD_COMMAND", "")

    assert main() == 0

    manifest = json.loads((project / "dist" / "manifest.json").read_text())
    digest = hashlib.sha256(b"body{}").hexdigest()
    assert manifest["css"] == f"app-{digest}.css"


def test_main_returns_nonzero_on_failure(monkeypatch, project, caplog):
    monkeypatch.setenv("WEBDIST__ROOT", str(project))
    monkeypatch.setenv("WEBDIST__BUILD_COMMAND", "")
    (project / "build" / "app.css").unlink()

    assert main() == 1
    assert "Publish failed" in caplog.text


def test_main_rejects_bad_config(monkeypatch, project):
    monkeypatch.setenv("WEBDIST__ROOT", str(project))
    monkeypatch.setenv("WEBDIST__ASSETS", "css")
    assert main() == 1


def test_main_returns_nonzero_on_write_failure(monkeypatch, project, caplog):
    monkeypatch.setenv("WEBDIST__ROOT", str(project))
    monkeypatch.setenv("WEBDIST__BUILD_COMMAND", "")
    (project / "dist").write_text("not a directory")

    assert main() == 1
    assert "Publish failed" in caplog.text


def test_log_level_from_env(monkeypatch):
    from webdist.config import log_level

    assert log_level() == "INFO"
    monkeypatch.setenv("WEBDIST__LOG_LEVEL", "debug")
    assert log_level() == "DEBUG"
