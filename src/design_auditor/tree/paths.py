# src/design_auditor/tree/paths.py
import logging
from typing import List, Optional

from .core import DocumentNode
from .visitor import Ancestors, SafeTreeVisitor, VisitAction

logger = logging.getLogger(__name__)


def resolve_hierarchy_path(
        root: DocumentNode,
        target_id: str,
        max_depth: Optional[int] = None
) -> Optional[List[str]]:
    """
    Returns the ids from ``root`` down to the node whose id equals ``target_id``.

    The search is pre-order in paint order, so with duplicate ids the first
    match in that order wins. Cycle protection comes from SafeTreeVisitor.
    Unlike report building the lookup is not depth-capped by default.

    Args:
        root (DocumentNode): Root of the tree to search.
        target_id (str): The identifier to look for.
        max_depth (Optional[int]): Optional depth cap for the search.

    Returns:
        Optional[List[str]]: The root-to-target id path, or None if not found.
    """
    found: List[List[str]] = []

    def on_node(node: DocumentNode, ancestors: Ancestors) -> Optional[VisitAction]:
        if node.id == target_id:
            found.append([ancestor.id for ancestor in ancestors] + [node.id])
            return VisitAction.STOP
        return None

    SafeTreeVisitor(max_depth=max_depth).visit(root, on_node)

    if not found:
        logger.debug("No node with id %s under %s", target_id, root.id)
        return None
    return found[0]
