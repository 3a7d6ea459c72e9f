# src/design_auditor/tree/core.py
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field

from design_auditor.utils.color_utils import hex_to_rgb, rgb_to_hex

TEXT_NODE_TYPE = "TEXT"
SOLID_PAINT = "SOLID"


class Color(BaseModel):
    """
    An sRGB color with channels in the [0, 1] range, as delivered by the
    host application's paint objects.
    """
    model_config = ConfigDict(frozen=True)

    r: float = Field(ge=0.0, le=1.0)
    g: float = Field(ge=0.0, le=1.0)
    b: float = Field(ge=0.0, le=1.0)

    @computed_field
    @property
    def hex(self) -> str:
        """Upper-case '#RRGGBB' representation."""
        return rgb_to_hex(self.r, self.g, self.b)

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        """Builds a Color from a '#RRGGBB' literal. Raises InvalidColorError."""
        r, g, b = hex_to_rgb(hex_color)
        return cls(r=r / 255, g=g / 255, b=b / 255)


WHITE = Color(r=1.0, g=1.0, b=1.0)


class BoundingBox(BaseModel):
    """Axis-aligned box in a single linear unit (absolute canvas coordinates)."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    def intersects(self, other: "BoundingBox") -> bool:
        """
        Strict axis-aligned rectangle intersection.
        Boxes that only touch along an edge do not intersect.
        """
        return (
            self.x < other.x + other.width
            and other.x < self.x + self.width
            and self.y < other.y + other.height
            and other.y < self.y + self.height
        )


class Paint(BaseModel):
    """
    A single fill entry. Only SOLID paints with a color take part in
    color resolution; gradients, images etc. are carried but skipped.
    """
    kind: str = Field(validation_alias=AliasChoices("kind", "type"))
    color: Optional[Color] = None
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)

    @property
    def is_solid(self) -> bool:
        return self.kind == SOLID_PAINT and self.color is not None


class DocumentNode(BaseModel):
    """
    A node of the visual document tree.

    Children and paints are both ordered back-to-front. The tree is treated
    as untrusted input: ids may repeat and, for programmatically built trees,
    a node may appear among its own descendants.
    """
    id: str
    type: str
    name: str = ""
    bounding_box: Optional[BoundingBox] = Field(
        default=None,
        validation_alias=AliasChoices("bounding_box", "boundingBox", "absoluteBoundingBox"),
    )
    paints: Optional[List[Paint]] = Field(
        default=None,
        validation_alias=AliasChoices("paints", "fills"),
    )
    children: Optional[List["DocumentNode"]] = None

    @property
    def is_text(self) -> bool:
        return self.type == TEXT_NODE_TYPE

    def iter_children(self) -> List["DocumentNode"]:
        """Returns the children list, treating 'unspecified' as empty."""
        return self.children or []

    def solid_color(self) -> Optional[Color]:
        """
        Returns the color of the first SOLID paint, or None.
        An explicitly empty paints list and a missing one are equivalent.
        """
        for paint in self.paints or []:
            if paint.is_solid:
                return paint.color
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocumentNode":
        """Materializes a tree from already-decoded JSON."""
        return cls.model_validate(data)
