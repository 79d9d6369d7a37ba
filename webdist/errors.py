"""Exceptions raised while publishing the web bundle.

Every failure aborts the pipeline. Callers only need to catch
:class:`PublishError` (plus ``OSError`` for write failures) to turn a failed
run into a non-zero exit status.
"""


class PublishError(Exception):
    """Base class for all publish failures."""


class ConfigError(PublishError):
    """Raised when a configuration value cannot be parsed."""


class BuildError(PublishError):
    """Raised when the external build command fails or cannot be started."""

    def __init__(self, command, returncode: int | None = None, reason: str | None = None):
        self.command = list(command)
        self.returncode = returncode
        if reason is None:
            reason = f"exited with status {returncode}"
        super().__init__(f"build command {' '.join(self.command)!r} {reason}")


class MissingAssetError(PublishError):
    """Raised when an input file is missing or unreadable."""

    def __init__(self, path, reason: str | None = None):
        self.path = path
        message = f"cannot read {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class RenderError(PublishError):
    """Raised when a template cannot be resolved against the asset mapping."""
