# tests/core/test_identifiers.py
import time

import pytest

from design_auditor.tree.identifiers import (
    MAX_IDENTIFIER_LENGTH,
    InvalidNodeIdentifier,
    NodeIdentifier,
    is_valid_node_identifier,
    parse_node_identifier,
)


def test_parse_simple_identifier():
    """Test een gewone node-id."""
    parsed = parse_node_identifier("1809:1836")
    assert isinstance(parsed, NodeIdentifier)
    assert parsed.kind == "simple"
    assert parsed.instance is False
    assert parsed.segments == [("1809", "1836")]


def test_parse_instance_identifier():
    """Test een instance-id met twee segmenten."""
    parsed = parse_node_identifier("I1806:932;589:1207")
    assert parsed.is_valid
    assert parsed.kind == "composite"
    assert parsed.instance is True
    assert parsed.segments == [("1806", "932"), ("589", "1207")]


def test_parse_nested_instance_identifier():
    """Test een geneste instance-id met drie segmenten."""
    parsed = parse_node_identifier("I1806:984;1809:902;105:1169")
    assert parsed.kind == "composite"
    assert len(parsed.segments) == 3


def test_parse_segments_without_instance_prefix():
    """Meerdere segmenten zonder 'I' zijn toegestaan en samengesteld."""
    parsed = parse_node_identifier("1:2;3:4")
    assert parsed.is_valid
    assert parsed.kind == "composite"
    assert parsed.instance is False


@pytest.mark.parametrize("raw", [
    "1809",
    "1809:1836:9999",
    "",
    "I",
    "II1:2",
    "12:ab",
    ":12",
    "12:",
    "1:2;",
    ";1:2",
    "1 :2",
    "-1:2",
    "١:٢",  # Arabic-Indic digits
    "Button (Primary)",
])
def test_reject_malformed_identifiers(raw):
    """Test dat ongeldige vormen een sentinel opleveren in plaats van een exceptie."""
    parsed = parse_node_identifier(raw)
    assert isinstance(parsed, InvalidNodeIdentifier)
    assert parsed.is_valid is False
    assert parsed.reason
    assert is_valid_node_identifier(raw) is False


def test_reject_non_string_input():
    parsed = parse_node_identifier(None)
    assert parsed.is_valid is False


def test_reject_overlong_identifier():
    """Invoer langer dan de limiet wordt direct geweigerd, ook als de vorm klopt."""
    raw = "I" + ";".join(["1:1"] * 300)
    assert len(raw) > MAX_IDENTIFIER_LENGTH
    parsed = parse_node_identifier(raw)
    assert parsed.is_valid is False
    assert "1000" in parsed.reason


def test_identifier_at_length_limit_is_accepted():
    segments = ["1:1"] * 250
    raw = ";".join(segments)
    raw = raw + "1" * (MAX_IDENTIFIER_LENGTH - len(raw))
    assert len(raw) == MAX_IDENTIFIER_LENGTH
    assert parse_node_identifier(raw).is_valid


def test_adversarial_input_is_fast():
    """Een klassieke backtracking-aanval mag geen merkbare tijd kosten."""
    raw = "I" + "1:1;" * 240 + "1:1!"
    start = time.perf_counter()
    for _ in range(100):
        assert parse_node_identifier(raw).is_valid is False
    assert time.perf_counter() - start < 1.0
