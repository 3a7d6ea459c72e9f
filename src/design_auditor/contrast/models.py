# src/design_auditor/contrast/models.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from design_auditor.tree.core import Color


class LevelCompliance(BaseModel):
    """
    Pass/fail for one WCAG level. None means the level defines no
    contrast requirement (Level A).
    """
    model_config = ConfigDict(frozen=True)

    normal_text: Optional[bool] = None
    large_text: Optional[bool] = None


class WcagCompliance(BaseModel):
    model_config = ConfigDict(frozen=True)

    A: LevelCompliance
    AA: LevelCompliance
    AAA: LevelCompliance


class ColorSample(BaseModel):
    """A color as it entered the contrast calculation."""
    model_config = ConfigDict(frozen=True)

    hex: str
    luminance: float


class ContrastResult(BaseModel):
    """Outcome of comparing two colors."""
    model_config = ConfigDict(frozen=True)

    contrast_ratio: float
    color1: ColorSample
    color2: ColorSample
    wcag: WcagCompliance


class ContrastFinding(BaseModel):
    """
    One text node paired with the background it is painted on.
    Created once per qualifying text node per report run.
    """
    model_config = ConfigDict(frozen=True)

    node_id: str
    node_name: str
    foreground: Color
    background: Color
    contrast_ratio: float
    wcag: WcagCompliance


class ContrastReport(BaseModel):
    """
    Ordered findings of a single run.

    ``truncated`` is set when more findings existed than ``cap`` allows;
    an empty, non-truncated report means the tree had no text to check.
    """
    model_config = ConfigDict(frozen=True)

    findings: List[ContrastFinding] = Field(default_factory=list)
    truncated: bool = False
    cap: int
    nodes_visited: int = 0
    depth_truncated: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.findings and not self.truncated
