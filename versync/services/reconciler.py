"""Reconcile a stored year/update config with the version a branch carries."""

import logging
from typing import Any

from versync.models import ParsedBranch
from versync.services.branch_parser import format_version_tag, parse_version_tag

logger = logging.getLogger(__name__)


def has_usable_baseline(config: dict[str, Any]) -> bool:
    """Return True when the stored year is an int and the stored update parses."""
    year = config.get("year")
    if not isinstance(year, int) or isinstance(year, bool):
        return False
    return parse_version_tag(config.get("update")) is not None


def reconcile(config: dict[str, Any], branch: ParsedBranch) -> dict[str, Any] | None:
    """Return an updated copy of config, or None when nothing should change.

    A None field on the branch means it has no opinion on that field. Keys
    other than ``year`` and ``update`` are carried over untouched.

    Args:
        config: Stored config with ``year`` (int) and ``update`` (``up<M>.<N>``)
        branch: Result of parse_branch for the triggering ref

    Returns:
        Shallow copy with differing fields overwritten, or None if both fields
        already match or the stored config cannot be compared against
    """
    current_year = config.get("year")
    current_update = parse_version_tag(config.get("update"))

    if not isinstance(current_year, int) or isinstance(current_year, bool):
        logger.warning("Config has no usable year: %r", current_year)
        return None
    if current_update is None:
        logger.warning("Config has no usable update: %r", config.get("update"))
        return None

    same_year = branch.year is None or branch.year == current_year
    same_update = branch.update is None or (
        branch.update.major == current_update.major
        and branch.update.minor == current_update.minor
    )

    if same_year and same_update:
        logger.info("Config is up to date (year=%s, update=%s)", current_year, config["update"])
        return None

    updated = dict(config)
    if not same_year:
        logger.info("Updating year: %s -> %s", current_year, branch.year)
        updated["year"] = branch.year
    if not same_update:
        new_update = format_version_tag(branch.update)
        logger.info("Updating update: %s -> %s", config["update"], new_update)
        updated["update"] = new_update

    return updated
