"""
Logging utilities.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mediaembed.exceptions import EmbedIssue

logger = logging.getLogger("mediaembed")


def report_issue(issue: EmbedIssue, issues: list[EmbedIssue] | None = None) -> None:
    """Report a non-fatal resolution issue.

    Logs a warning on the ``mediaembed`` logger and, when given, appends the
    issue to the caller's collector so it can decide whether to skip the embed.

    Args:
        issue: The issue to report
        issues: Optional list collecting issues for the current render
    """
    logger.warning(
        f"[{issue.category}] {issue.message}",
        extra={"embed_issue": issue.to_dict()},
    )
    if issues is not None:
        issues.append(issue)
