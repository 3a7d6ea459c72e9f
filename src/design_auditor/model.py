# src/design_auditor/model.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Issue(BaseModel):
    """
    A single finding produced by an external analysis of a document tree.

    ``node_id`` arrives from an untrusted source and is only kept after it
    has been validated; ``node_hierarchy`` is attached by the annotation
    service once the id has been located in the tree.
    """
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    severity: str  # 'high', 'medium', 'low'
    message: str
    node_id: Optional[str] = Field(default=None, alias="nodeId")
    auto_fixable: bool = Field(default=False, alias="autoFixable")
    suggestion: Optional[str] = None
    node_hierarchy: Optional[List[str]] = Field(default=None, alias="nodeHierarchy")
