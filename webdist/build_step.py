import logging
import subprocess

from .errors import BuildError

logger = logging.getLogger(__name__)


def run_build(command: list[str], cwd: str) -> None:
    """Run the bundler that produces the compiled CSS and JS.

    The command's output is passed straight through to the terminal. An empty
    command skips the step.
    """
    if not command:
        logger.info("No build command configured, using existing compiled assets")
        return

    logger.info("Running build: %s", " ".join(command))
    try:
        subprocess.run(command, cwd=cwd, check=True)
    except subprocess.CalledProcessError as exc:
        raise BuildError(command, exc.returncode) from exc
    except OSError as exc:
        raise BuildError(command, reason=f"could not be started: {exc}") from exc
