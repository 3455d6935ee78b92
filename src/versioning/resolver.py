"""Spring Boot version resolution against the release catalog."""

import logging
from typing import Optional

from semantic_version import Version

from common.logging_utils import extra_context, is_debug_enabled
from errors import InvalidVersionFormat, NoCurrentRelease, NoMatchingVersion
from .constraints import parse_constraint
from .models import ReleaseCatalog
from .semver import is_greater, parse_version

logger = logging.getLogger(__name__)


def resolve(selector: Optional[str], catalog: ReleaseCatalog) -> str:
    """Pick the release version best matching selector.

    An empty selector stands for the release flagged current. Otherwise the
    selector is an exact version or a range expression, and the highest
    matching catalog version wins; among versions of equal precedence (build
    metadata aside) the first listed wins.

    Args:
        selector: Version selector; empty or None for the current release.
        catalog: Releases published by the metadata server.

    Returns:
        The winning version exactly as the catalog spells it.

    Raises:
        NoCurrentRelease: selector is empty and no release is current.
        InvalidConstraint: selector cannot be parsed.
        InvalidVersionFormat: a catalog entry is not a semantic version.
        NoMatchingVersion: nothing satisfies the selector.
    """
    target = (selector or "").strip()
    if not target:
        current = catalog.current()
        if current is None:
            raise NoCurrentRelease()
        target = current.version
        logger.info("No spring-boot version requested, using current release %s", target)

    constraint = parse_constraint(target)
    candidates = catalog.versions()

    selected: Optional[str] = None
    selected_version: Optional[Version] = None
    for candidate in candidates:
        try:
            parsed = parse_version(candidate)
        except ValueError as exc:
            raise InvalidVersionFormat(candidate, str(exc)) from exc
        if constraint.matches(parsed) and is_greater(parsed, selected_version):
            selected, selected_version = candidate, parsed

    if is_debug_enabled(logger):
        logger.debug(
            "Version resolution finished",
            extra=extra_context(
                event="decision",
                component="resolver",
                action="resolve",
                outcome="match" if selected is not None else "no_match",
                constraint=str(constraint),
                candidate_count=len(candidates),
            ),
        )
    if selected is None:
        raise NoMatchingVersion(str(constraint), candidates)
    logger.info("Final selected spring-boot version: %s", selected)
    return selected
