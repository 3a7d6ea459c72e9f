from .core import BoundingBox, Color, DocumentNode, Paint, WHITE
from .identifiers import (
    InvalidNodeIdentifier,
    NodeIdentifier,
    is_valid_node_identifier,
    parse_node_identifier,
)
from .paths import resolve_hierarchy_path
from .visitor import SafeTreeVisitor, VisitAction, VisitSummary, visit
