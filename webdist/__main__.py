"""Build and publish the web bundle.

Usage::

    python -m webdist

Settings come from ``WEBDIST__*`` environment variables, see
:mod:`webdist.config`.  Exits non-zero on the first failing step.
"""

import logging
import sys

from .config import load_config, log_level
from .errors import PublishError
from .publish import publish

logger = logging.getLogger("webdist")


def main() -> int:
    logging.basicConfig(
        level=log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = load_config()
        publish(config)
    except (PublishError, OSError) as exc:
        logger.error("Publish failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
