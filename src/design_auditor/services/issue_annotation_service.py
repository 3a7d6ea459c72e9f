# src/design_auditor/services/issue_annotation_service.py
import logging
from typing import Iterable, List, Optional

from design_auditor.model import Issue
from design_auditor.tree.core import DocumentNode
from design_auditor.tree.identifiers import parse_node_identifier
from design_auditor.tree.paths import resolve_hierarchy_path

logger = logging.getLogger(__name__)


def annotate_issue(issue: Issue, root: DocumentNode) -> Issue:
    """
    Validates the issue's node id and attaches its ownership path.

    - No node id: returned unchanged.
    - Invalid node id: a copy without ``node_id`` is returned.
    - Valid id not present in the tree: returned unchanged (warning logged).
    - Valid id found: a copy with ``node_hierarchy`` set is returned.
    """
    if issue.node_id is None:
        return issue

    parsed = parse_node_identifier(issue.node_id)
    if not parsed.is_valid:
        logger.warning("Invalid node id %r (%s). Removing node id.", issue.node_id, parsed.reason)
        return issue.model_copy(update={"node_id": None, "node_hierarchy": None})

    hierarchy: Optional[List[str]] = resolve_hierarchy_path(root, issue.node_id)
    if hierarchy is None:
        logger.warning("Could not find hierarchy path for node id: %s", issue.node_id)
        return issue

    return issue.model_copy(update={"node_hierarchy": hierarchy})


def annotate_issues(issues: Iterable[Issue], root: DocumentNode) -> List[Issue]:
    """Applies annotate_issue to every issue, preserving order."""
    return [annotate_issue(issue, root) for issue in issues]
