# src/design_auditor/contrast/background.py
import logging
from typing import Callable, Optional, Sequence, Set

from design_auditor.tree.core import WHITE, BoundingBox, Color, DocumentNode

logger = logging.getLogger(__name__)

OverlapPredicate = Callable[[Optional[BoundingBox], Optional[BoundingBox]], bool]


def rects_intersect(a: Optional[BoundingBox], b: Optional[BoundingBox]) -> bool:
    """Axis-aligned intersection. A missing box never overlaps anything."""
    if a is None or b is None:
        return False
    return a.intersects(b)


def _index_of(node: DocumentNode, siblings: Sequence[DocumentNode]) -> int:
    # Identity lookup; a node listed twice counts at its first position.
    for index, sibling in enumerate(siblings):
        if sibling is node:
            return index
    return len(siblings)


class BackgroundResolver:
    """
    Decides which color a text node is actually painted on.

    Policy, applied level by level from the text node up to the root:

    1. Siblings painted *below* the node of interest that carry a SOLID fill
       and geometrically overlap it are candidates; the nearest one beneath
       (last in paint order) wins. Overlap rather than size is what keeps a
       narrow accent bar beside the text out while admitting the panel the
       text sits in.
    2. Otherwise the parent's own SOLID fill is used.
    3. Otherwise the parent becomes the node of interest and the next level
       is tried.

    If nothing is found the canvas default (white) is returned.
    """

    def __init__(self, overlaps: OverlapPredicate = rects_intersect, default: Color = WHITE):
        self.overlaps = overlaps
        self.default = default

    def nearest_sibling_fill(self, node: DocumentNode, parent: DocumentNode) -> Optional[Color]:
        """Color of the closest overlapping filled sibling beneath ``node``, if any."""
        siblings = parent.iter_children()
        position = _index_of(node, siblings)

        for sibling in reversed(siblings[:position]):
            if sibling is node or sibling.is_text:
                continue
            color = sibling.solid_color()
            if color is None:
                continue
            if self.overlaps(sibling.bounding_box, node.bounding_box):
                logger.debug("Node %s sits on sibling %s (%s)", node.id, sibling.id, color.hex)
                return color
        return None

    def resolve(self, text_node: DocumentNode, ancestors: Sequence[DocumentNode]) -> Color:
        """
        Args:
            text_node (DocumentNode): The text node being checked.
            ancestors (Sequence[DocumentNode]): Root-to-parent chain as given
                by SafeTreeVisitor.

        Returns:
            Color: The effective background color.
        """
        current = text_node
        seen: Set[int] = {id(text_node)}

        for parent in reversed(ancestors):
            if id(parent) in seen:
                logger.debug("Cyclic ancestor chain at %s; stopping climb", parent.id)
                break
            seen.add(id(parent))

            color = self.nearest_sibling_fill(current, parent)
            if color is not None:
                return color

            color = parent.solid_color()
            if color is not None:
                logger.debug("Node %s inherits fill of %s (%s)", text_node.id, parent.id, color.hex)
                return color

            current = parent

        return self.default


_default_resolver = BackgroundResolver()


def resolve_background(text_node: DocumentNode, ancestors: Sequence[DocumentNode]) -> Color:
    """Resolves the background with the default overlap policy."""
    return _default_resolver.resolve(text_node, ancestors)
