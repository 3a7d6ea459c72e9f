# src/design_auditor/tree/visitor.py
import logging
from enum import Enum
from typing import Callable, List, Optional, Set, Tuple

from pydantic import BaseModel, Field

from design_auditor.errors import ConfigurationError
from .core import DocumentNode

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10

Ancestors = Tuple[DocumentNode, ...]


class VisitAction(Enum):
    """Optional return value of a visit callback."""
    CONTINUE = "continue"
    STOP = "stop"


NodeCallback = Callable[[DocumentNode, Ancestors], Optional[VisitAction]]


class VisitSummary(BaseModel):
    """Bookkeeping produced by a single traversal."""
    nodes_visited: int = 0
    cycles_skipped: int = 0
    depth_truncated: List[str] = Field(default_factory=list)
    stopped: bool = False


def validate_max_depth(max_depth: Optional[int]) -> Optional[int]:
    """
    Ensures max_depth is None (no cap) or a positive integer.

    Raises:
        ConfigurationError: On any other value.
    """
    if max_depth is None:
        return None
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
        raise ConfigurationError(f"max_depth must be a positive integer, got {max_depth!r}")
    return max_depth


class SafeTreeVisitor:
    """
    Pre-order depth-first walker that never trusts the shape of the tree.

    Each node *object* is visited at most once (identity visited-set), so a
    node listed among its own descendants is silently skipped instead of
    looping. Nodes deeper than ``max_depth`` (the root has depth 0) are
    recorded as depth-truncated and neither reported to the callback nor
    descended into. An explicit stack keeps very deep inputs away from the
    interpreter's recursion limit.
    """

    def __init__(self, max_depth: Optional[int] = DEFAULT_MAX_DEPTH):
        self.max_depth = validate_max_depth(max_depth)

    def visit(self, root: DocumentNode, on_node: NodeCallback) -> VisitSummary:
        """
        Walks the tree starting at ``root``.

        Args:
            root (DocumentNode): The node to start from.
            on_node (NodeCallback): Called as ``on_node(node, ancestors)`` where
                ancestors runs from the root to the node's parent. Returning
                ``VisitAction.STOP`` ends the walk.

        Returns:
            VisitSummary: Counts of visited nodes, skipped cycles and truncated ids.
        """
        summary = VisitSummary()
        visited: Set[int] = set()
        stack: List[Tuple[DocumentNode, Ancestors]] = [(root, ())]

        while stack:
            node, ancestors = stack.pop()

            if id(node) in visited:
                summary.cycles_skipped += 1
                logger.debug("Skipping already visited node %s (%s)", node.id, node.name)
                continue

            if self.max_depth is not None and len(ancestors) > self.max_depth:
                visited.add(id(node))
                summary.depth_truncated.append(node.id)
                logger.debug("Depth cap %d reached at node %s", self.max_depth, node.id)
                continue

            visited.add(id(node))
            summary.nodes_visited += 1

            if on_node(node, ancestors) is VisitAction.STOP:
                summary.stopped = True
                break

            # Reversed push keeps children in paint order when popped.
            child_ancestors = ancestors + (node,)
            for child in reversed(node.iter_children()):
                stack.append((child, child_ancestors))

        return summary


def visit(
        root: DocumentNode,
        on_node: NodeCallback,
        max_depth: Optional[int] = DEFAULT_MAX_DEPTH
) -> VisitSummary:
    """Convenience wrapper around SafeTreeVisitor.visit."""
    return SafeTreeVisitor(max_depth=max_depth).visit(root, on_node)
