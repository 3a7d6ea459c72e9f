"""
design_auditor: accessibility resolution for visual design trees.

Walks an in-memory document tree, resolves the background every text node
is painted on and scores the pair against WCAG contrast levels.
"""
import logging

from .config import ReportConfig
from .contrast import ContrastFinding, ContrastReport, build_contrast_report, contrast
from .errors import ConfigurationError, DesignAuditorError, InvalidColorError
from .model import Issue
from .services.issue_annotation_service import annotate_issues
from .tree import (
    Color,
    DocumentNode,
    InvalidNodeIdentifier,
    NodeIdentifier,
    parse_node_identifier,
    resolve_hierarchy_path,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Color",
    "ConfigurationError",
    "ContrastFinding",
    "ContrastReport",
    "DesignAuditorError",
    "DocumentNode",
    "InvalidColorError",
    "InvalidNodeIdentifier",
    "Issue",
    "NodeIdentifier",
    "ReportConfig",
    "annotate_issues",
    "build_contrast_report",
    "contrast",
    "parse_node_identifier",
    "resolve_hierarchy_path",
]
