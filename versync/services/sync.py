"""Branch-to-config sync for a single workflow run."""

import logging

from versync.models import SyncResult
from versync.services.branch_parser import parse_branch
from versync.services.config_store import ConfigStore
from versync.services.errors import MissingRefError
from versync.services.outputs import StepOutputs
from versync.services.reconciler import has_usable_baseline, reconcile

logger = logging.getLogger(__name__)


class BranchConfigSync:
    """Updates the stored config to match the year/update of the triggering branch."""

    def __init__(
        self,
        store: ConfigStore,
        outputs: StepOutputs,
        ref: str | None,
        sha: str | None = None,
        dry_run: bool = False,
    ):
        self.store = store
        self.outputs = outputs
        self.ref = ref
        self.sha = sha
        self.dry_run = dry_run

    def run(self) -> SyncResult:
        """Reconcile the config against the branch ref and persist any change.

        Returns:
            SyncResult with ``updated`` True only when a changed config was written

        Raises:
            MissingRefError: If no ref was provided (nothing is read or written)
        """
        if not self.ref:
            raise MissingRefError()

        logger.info("Starting update for %s (sha=%s)", self.ref, self.sha or "unknown")

        result = self._sync()

        self.outputs.set_output("updated", result.updated)
        if result.config is not None and has_usable_baseline(result.config):
            self.outputs.set_output("year", result.config.get("year"))
            self.outputs.set_output("update", result.config.get("update"))

        return result

    def _sync(self) -> SyncResult:
        config = self.store.read_config()
        if config is None:
            logger.info("No config to update")
            return SyncResult(updated=False)

        branch = parse_branch(self.ref)
        logger.info("Parsed branch: year=%s, update=%s", branch.year, branch.update)

        new_config = reconcile(config, branch)
        if new_config is None:
            return SyncResult(updated=False, config=config, branch=branch)

        if self.dry_run:
            logger.info("Dry run, not writing config")
            return SyncResult(updated=False, changed=True, config=new_config, branch=branch)

        if not self.store.write_config(new_config):
            return SyncResult(updated=False, changed=True, config=config, branch=branch)

        return SyncResult(updated=True, changed=True, config=new_config, branch=branch)
