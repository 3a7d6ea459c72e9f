# src/design_auditor/tree/identifiers.py
"""
Parsing of host-application node identifiers.

Accepted shapes:
    simple     "1809:1836"
    composite  "I1806:932;589:1207"  (one segment per component-instance boundary)

The parser is a linear split-and-check; each part is tested against a single
fixed character class. No pattern ever runs over the whole, possibly
attacker-influenced, string.
"""
import re
from typing import List, Tuple, Union

from pydantic import BaseModel, ConfigDict

MAX_IDENTIFIER_LENGTH = 1000
INSTANCE_PREFIX = "I"
SEGMENT_SEPARATOR = ";"
PART_SEPARATOR = ":"

_DIGITS = re.compile(r"[0-9]+")


class NodeIdentifier(BaseModel):
    """A structurally valid node identifier."""
    model_config = ConfigDict(frozen=True)

    raw: str
    instance: bool
    segments: List[Tuple[str, str]]

    @property
    def kind(self) -> str:
        if not self.instance and len(self.segments) == 1:
            return "simple"
        return "composite"

    @property
    def is_valid(self) -> bool:
        return True


class InvalidNodeIdentifier(BaseModel):
    """Sentinel returned for any input that does not follow the grammar."""
    model_config = ConfigDict(frozen=True)

    raw: str
    reason: str

    @property
    def is_valid(self) -> bool:
        return False


ParsedIdentifier = Union[NodeIdentifier, InvalidNodeIdentifier]


def _is_digits(part: str) -> bool:
    return _DIGITS.fullmatch(part) is not None


def parse_node_identifier(raw: str) -> ParsedIdentifier:
    """
    Validates and parses a node identifier without raising.

    Args:
        raw (str): The identifier as received from an external source.

    Returns:
        ParsedIdentifier: A NodeIdentifier, or an InvalidNodeIdentifier
        describing the first structural violation found.
    """
    if not isinstance(raw, str):
        return InvalidNodeIdentifier(raw=repr(raw), reason="not a string")

    if len(raw) > MAX_IDENTIFIER_LENGTH:
        return InvalidNodeIdentifier(
            raw=raw[:50] + "...",
            reason=f"longer than {MAX_IDENTIFIER_LENGTH} characters"
        )

    instance = raw.startswith(INSTANCE_PREFIX)
    body = raw[1:] if instance else raw

    segments = []
    for segment in body.split(SEGMENT_SEPARATOR):
        parts = segment.split(PART_SEPARATOR)
        if len(parts) != 2:
            return InvalidNodeIdentifier(raw=raw, reason=f"segment '{segment}' must have exactly two parts")
        first, second = parts
        if not _is_digits(first) or not _is_digits(second):
            return InvalidNodeIdentifier(raw=raw, reason=f"segment '{segment}' must be digits:digits")
        segments.append((first, second))

    return NodeIdentifier(raw=raw, instance=instance, segments=segments)


def is_valid_node_identifier(raw: str) -> bool:
    """Boolean form of parse_node_identifier."""
    return parse_node_identifier(raw).is_valid
