"""
Tests for chordbook/data/schema.py and chordbook/data/catalog.py

Run with: pytest tests/test_catalog.py -v
"""

import pytest
from pydantic import ValidationError

from chordbook.data.catalog import (
    CatalogError,
    ChordCatalog,
    get_chord_catalog,
    get_progression_styles,
    get_style,
    load_chord_catalog,
    load_progression_styles,
)
from chordbook.data.schema import ChordShape, ProgressionStyle


def make_shape(**overrides) -> dict:
    fields = dict(
        id="test",
        name="T",
        label="Test",
        strings=[0, 0, 0, 0, 0, 0],
        quality="major",
    )
    fields.update(overrides)
    return fields


class TestChordShapeSchema:
    """Validation of a single ChordShape record."""

    def test_valid_shape(self):
        shape = ChordShape(**make_shape(fingers=[None, 1, 2, 3, 4, 0], tags=["open"]))
        assert shape.strings == (0, 0, 0, 0, 0, 0)
        assert shape.fingers == (None, 1, 2, 3, 4, 0)
        assert shape.tags == ("open",)
        assert shape.start_fret is None

    def test_needs_six_strings(self):
        with pytest.raises(ValidationError):
            ChordShape(**make_shape(strings=[0, 0, 0, 0, 0]))
        with pytest.raises(ValidationError):
            ChordShape(**make_shape(strings=[0, 0, 0, 0, 0, 0, 0]))

    def test_rejects_frets_below_muted(self):
        with pytest.raises(ValidationError):
            ChordShape(**make_shape(strings=[-2, 0, 0, 0, 0, 0]))

    def test_fingers_must_be_parallel(self):
        with pytest.raises(ValidationError):
            ChordShape(**make_shape(fingers=[1, 2, 3]))

    def test_finger_number_range(self):
        with pytest.raises(ValidationError):
            ChordShape(**make_shape(fingers=[5, None, None, None, None, None]))

    def test_quality_is_closed_set(self):
        with pytest.raises(ValidationError):
            ChordShape(**make_shape(quality="sus4"))

    def test_start_fret_must_be_positive(self):
        with pytest.raises(ValidationError):
            ChordShape(**make_shape(start_fret=0))

    def test_shapes_are_frozen(self):
        shape = ChordShape(**make_shape())
        with pytest.raises(ValidationError):
            shape.name = "X"

    def test_finger_for_without_hints(self):
        assert ChordShape(**make_shape()).finger_for(2) is None


class TestProgressionStyleSchema:

    def test_valid_style(self):
        style = ProgressionStyle(id="x", label="X", patterns=[["I", "V"]])
        assert style.patterns == (("I", "V"),)

    def test_needs_a_pattern(self):
        with pytest.raises(ValidationError):
            ProgressionStyle(id="x", label="X", patterns=[])

    def test_rejects_empty_pattern(self):
        with pytest.raises(ValidationError):
            ProgressionStyle(id="x", label="X", patterns=[[]])

    def test_rejects_blank_token(self):
        with pytest.raises(ValidationError):
            ProgressionStyle(id="x", label="X", patterns=[["I", " "]])


class TestPackagedCatalog:
    """The chord library shipped in chords.yaml."""

    def test_catalog_size(self):
        assert len(get_chord_catalog()) == 20

    def test_catalog_is_cached(self):
        assert get_chord_catalog() is get_chord_catalog()

    def test_names_are_unique(self):
        names = get_chord_catalog().names
        assert len(names) == len(set(names))

    def test_find_by_name(self):
        catalog = get_chord_catalog()
        assert catalog.find("Am").label == "A minor"
        assert catalog.find("C#m").start_fret == 4
        assert catalog.find("Xyz") is None
        assert "G7" in catalog
        assert "Gmaj7" not in catalog

    def test_every_shape_has_six_strings(self):
        for shape in get_chord_catalog():
            assert len(shape.strings) == 6


class TestPackagedStyles:

    def test_style_ids(self):
        assert [s.id for s in get_progression_styles()] == ["jpop", "ballad", "upbeat"]

    def test_get_style(self):
        style = get_style("ballad")
        assert ("ii", "V", "I", "Imaj7") in style.patterns

    def test_unknown_style(self):
        with pytest.raises(ValueError, match="Unknown style"):
            get_style("metal")


class TestLoadingFromFile:
    """Loading catalogs from an explicit path."""

    def test_custom_chord_file(self, tmp_path):
        path = tmp_path / "chords.yaml"
        path.write_text(
            "chords:\n"
            "  - id: e5\n"
            "    name: E5\n"
            "    label: E power chord\n"
            "    strings: [0, 2, 2, -1, -1, -1]\n"
            "    quality: other\n",
            encoding="utf-8",
        )
        catalog = load_chord_catalog(path)
        assert isinstance(catalog, ChordCatalog)
        assert len(catalog) == 1
        assert catalog.find("E5").strings == (0, 2, 2, -1, -1, -1)

    def test_duplicate_ids_rejected(self, tmp_path):
        entry = (
            "  - id: dup\n"
            "    name: C\n"
            "    label: C\n"
            "    strings: [0, 0, 0, 0, 0, 0]\n"
            "    quality: major\n"
        )
        path = tmp_path / "chords.yaml"
        path.write_text("chords:\n" + entry + entry, encoding="utf-8")
        with pytest.raises(CatalogError):
            load_chord_catalog(path)

    def test_invalid_record_rejected(self, tmp_path):
        path = tmp_path / "chords.yaml"
        path.write_text(
            "chords:\n  - id: bad\n    name: B\n    label: B\n    strings: [1, 2]\n    quality: major\n",
            encoding="utf-8",
        )
        with pytest.raises(CatalogError):
            load_chord_catalog(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_chord_catalog(tmp_path / "nope.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "chords.yaml"
        path.write_text("chords: [unclosed", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_chord_catalog(path)

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "styles.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_progression_styles(path)

    def test_custom_styles_file(self, tmp_path):
        path = tmp_path / "styles.yaml"
        path.write_text(
            "styles:\n  - id: blues\n    label: Blues\n    patterns:\n      - [I7, IV7, I7, V7]\n",
            encoding="utf-8",
        )
        styles = load_progression_styles(path)
        assert get_style("blues", styles).patterns == (("I7", "IV7", "I7", "V7"),)
