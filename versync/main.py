"""versync - sync a year/update config file with the triggering branch."""

import logging
import os
import sys

from versync.config import get_settings
from versync.services.config_store import ConfigStore
from versync.services.errors import MissingRefError
from versync.services.outputs import StepOutputs
from versync.services.sync import BranchConfigSync

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

_log_handler = logging.StreamHandler()
_log_handler.setFormatter(
    logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
)
logging.getLogger("versync").setLevel(LOG_LEVEL)
logging.getLogger("versync").addHandler(_log_handler)

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the sync step. Returns the process exit code."""
    settings = get_settings()
    outputs = StepOutputs(settings.github_output)

    logger.info("versync %s", settings.app_version)

    try:
        ref = settings.get_branch_ref()
        if ref is None:
            raise MissingRefError()

        if settings.input_path is None:
            logger.info("No config path provided")
            outputs.set_output("updated", False)
            return 0

        sync = BranchConfigSync(
            store=ConfigStore(settings.input_path),
            outputs=outputs,
            ref=ref,
            sha=settings.github_sha,
        )
        result = sync.run()
        logger.info("Config %s", "updated" if result.updated else "not updated")
    except MissingRefError as e:
        outputs.set_failed(str(e))
    except Exception as e:
        logger.exception("Unexpected error")
        outputs.set_failed(str(e))

    return 1 if outputs.failed else 0


if __name__ == "__main__":
    sys.exit(main())
