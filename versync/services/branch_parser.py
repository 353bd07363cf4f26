"""Branch name grammar for year/update versioned branches.

Recognized branch names (under ``heads/``, optionally ``refs/heads/``):

- ``2024-up3.1-feature`` -> year 2024, update up3.1
- ``2024-up3``           -> year 2024, update up3.0
- ``2024-hotfix``        -> year 2024, no update
- ``2024``               -> year 2024, no update

Anything else, or a year outside 2000-9999, parses as unknown.
"""

import logging
import re

from versync.models import ParsedBranch, VersionTag

logger = logging.getLogger(__name__)

MIN_YEAR = 2000
MAX_YEAR = 9999

# Pattern: refs/heads/<name> or heads/<name>
HEADS_PREFIX_PATTERN = re.compile(r"^(?:refs/)?heads/")

# Pattern: YYYY-up<M>[.<N>][-suffix]
UPDATE_BRANCH_PATTERN = re.compile(r"^(\d{4})-up(\d)(?:\.(\d))?(?:-.*)?$", re.ASCII | re.DOTALL)

# Pattern: YYYY[-suffix]
YEAR_BRANCH_PATTERN = re.compile(r"^(\d{4})(?:-.*)?$", re.ASCII | re.DOTALL)

VERSION_TAG_PATTERN = re.compile(r"^up(\d)(?:\.(\d))?$", re.ASCII)


def parse_version_tag(text: str | None) -> VersionTag | None:
    """Parse ``up<d>`` or ``up<d>.<d>`` into a VersionTag.

    Only single-digit components are accepted. Returns None for anything else.
    """
    if not isinstance(text, str):
        return None

    match = VERSION_TAG_PATTERN.fullmatch(text)
    if not match:
        return None

    major, minor = match.groups()
    return VersionTag(major=int(major), minor=int(minor or 0))


def format_version_tag(tag: VersionTag) -> str:
    """Render a VersionTag in canonical ``up<major>.<minor>`` form."""
    return f"up{tag.major}.{tag.minor}"


def _strip_heads_prefix(ref: str) -> str | None:
    match = HEADS_PREFIX_PATTERN.match(ref)
    if not match:
        return None
    return ref[match.end():]


def parse_branch(ref: str | None) -> ParsedBranch:
    """Parse a branch ref into its year and update.

    Args:
        ref: Branch ref such as ``refs/heads/2024-up3.1-feature``

    Returns:
        ParsedBranch; both fields None when the ref is empty, is not a branch
        head, does not match the grammar, or carries an out-of-range year
    """
    if not ref:
        logger.info("Branch ref is undefined or empty")
        return ParsedBranch.unknown()

    name = _strip_heads_prefix(ref)
    if name is None:
        logger.info("Not a branch ref: %s", ref)
        return ParsedBranch.unknown()

    update: VersionTag | None = None
    match = UPDATE_BRANCH_PATTERN.fullmatch(name)
    if match:
        year_text, major, minor = match.groups()
        update = VersionTag(major=int(major), minor=int(minor or 0))
    else:
        match = YEAR_BRANCH_PATTERN.fullmatch(name)
        if not match:
            logger.info("Branch name does not match a versioned branch: %s", name)
            return ParsedBranch.unknown()
        year_text = match.group(1)

    year = int(year_text)
    if year < MIN_YEAR or year > MAX_YEAR:
        logger.info("Incorrect year: %s", year)
        return ParsedBranch.unknown()

    return ParsedBranch(year=year, update=update)
