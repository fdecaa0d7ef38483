"""Tests for map resource lookup."""

import pytest

from tests.conftest import SQUARE_SVG

from vectormap import parse_map_file
from vectormap.errors import MalformedDocumentError, MapParseError, MissingResourceError
from vectormap.svg.loader import load_map, resolve_map_path


@pytest.fixture
def map_dir(tmp_path):
    (tmp_path / "tr.svg").write_text(SQUARE_SVG, encoding="utf-8")
    return tmp_path


def test_extension_appended(map_dir):
    assert resolve_map_path("tr", [map_dir]) == map_dir / "tr.svg"
    assert load_map("tr", [map_dir]) == SQUARE_SVG


def test_extension_already_present(map_dir):
    assert load_map("tr.svg", [map_dir]) == SQUARE_SVG


def test_search_order(map_dir, tmp_path_factory):
    empty = tmp_path_factory.mktemp("empty")
    assert resolve_map_path("tr", [empty, map_dir]) == map_dir / "tr.svg"


def test_missing_resource(map_dir):
    with pytest.raises(MissingResourceError) as exc_info:
        load_map("de", [map_dir])
    assert exc_info.value.name == "de"
    assert str(map_dir) in exc_info.value.searched


def test_missing_is_distinct_from_malformed(map_dir):
    (map_dir / "broken.svg").write_bytes(b"\xff\xfe<svg>")
    with pytest.raises(MalformedDocumentError):
        load_map("broken", [map_dir])
    assert not issubclass(MalformedDocumentError, MissingResourceError)
    assert issubclass(MissingResourceError, MapParseError)


def test_parse_map_file(map_dir, monkeypatch):
    monkeypatch.setattr("vectormap.config.settings.map_search_paths", [str(map_dir)])
    doc = parse_map_file("tr", (100, 100))
    assert doc.regions[0].id == "SQ"
