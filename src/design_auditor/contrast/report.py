# src/design_auditor/contrast/report.py
import logging
from typing import Any, List, Mapping, Optional, Union

from design_auditor.config import ReportConfig, load_report_config
from design_auditor.tree.core import DocumentNode
from design_auditor.tree.visitor import Ancestors, SafeTreeVisitor, VisitAction
from .background import BackgroundResolver
from .colorimetry import contrast
from .models import ContrastFinding, ContrastReport

logger = logging.getLogger(__name__)


class ReportBuilder:
    """
    Collects a ContrastFinding for every text node of a document tree.

    It walks the tree with the SafeTreeVisitor, pairs each text color with
    the background resolved by the BackgroundResolver and scores the pair.
    Collection stops as soon as one finding more than ``max_findings`` is
    found; the report is then flagged as truncated.
    """

    def __init__(
            self,
            config: Optional[Union[ReportConfig, Mapping[str, Any]]] = None,
            resolver: Optional[BackgroundResolver] = None
    ):
        """
        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        self.config = load_report_config(config)
        self.resolver = resolver or BackgroundResolver()

    def build(self, root: DocumentNode) -> ContrastReport:
        """
        Runs the contrast analysis on a materialized tree.

        Args:
            root (DocumentNode): The root of the tree (not mutated).

        Returns:
            ContrastReport: Findings in pre-order, at most ``max_findings`` of them.
        """
        cap = self.config.max_findings
        findings: List[ContrastFinding] = []
        truncated = False

        def on_node(node: DocumentNode, ancestors: Ancestors) -> Optional[VisitAction]:
            nonlocal truncated
            if not node.is_text:
                return None

            foreground = node.solid_color()
            if foreground is None:
                return None

            if len(findings) >= cap:
                truncated = True
                return VisitAction.STOP

            background = self.resolver.resolve(node, ancestors)
            result = contrast(foreground, background)
            findings.append(ContrastFinding(
                node_id=node.id,
                node_name=node.name,
                foreground=foreground,
                background=background,
                contrast_ratio=result.contrast_ratio,
                wcag=result.wcag
            ))
            return None

        summary = SafeTreeVisitor(max_depth=self.config.max_depth).visit(root, on_node)

        if truncated:
            logger.info("Contrast report for %s limited to %d findings", root.id, cap)
        else:
            logger.info("Contrast report for %s: %d findings", root.id, len(findings))
        if summary.depth_truncated:
            logger.debug("%d nodes beyond depth %d were not analysed",
                         len(summary.depth_truncated), self.config.max_depth)

        return ContrastReport(
            findings=findings,
            truncated=truncated,
            cap=cap,
            nodes_visited=summary.nodes_visited,
            depth_truncated=summary.depth_truncated
        )


def build_contrast_report(
        root: DocumentNode,
        config: Optional[Union[ReportConfig, Mapping[str, Any]]] = None
) -> ContrastReport:
    """Single entry point: builds a ContrastReport for ``root``."""
    return ReportBuilder(config).build(root)
