"""
Tests for chordbook/app/render.py and chordbook/app/cli.py

Run with: pytest tests/test_app.py -v
"""

import json

import pytest

from chordbook.app.cli import main
from chordbook.app.render import MISSING_SHAPE_MESSAGE, format_progression_sheet, render_diagram
from chordbook.data.catalog import get_chord_catalog, get_style
from chordbook.rules.progression import resolve_pattern


def shape(name: str):
    return get_chord_catalog().find(name)


class TestRenderDiagram:
    """Text chord diagrams."""

    def test_a_minor(self):
        assert render_diagram(shape("Am")).splitlines() == [
            "A minor",
            "e o ‖---|---|---|",
            "B   ‖-1-|---|---|",
            "G   ‖---|-3-|---|",
            "D   ‖---|-2-|---|",
            "A o ‖---|---|---|",
            "E x ‖---|---|---|",
        ]

    def test_offset_window_has_label_and_no_nut(self):
        lines = render_diagram(shape("C#m")).splitlines()
        assert lines[0] == "C# minor"
        assert lines[1] == "    4fr"
        assert lines[2] == "e   |-1-|---|---|"
        assert lines[7] == "E x |---|---|---|"
        assert "‖" not in "\n".join(lines)

    def test_barre_line(self):
        text = render_diagram(shape("F"))
        assert "barre: finger 1 at fret 1 (E-e)" in text


class TestProgressionSheet:

    def test_sheet_lists_degrees_and_chords(self):
        progression = resolve_pattern(["I", "V", "vi", "IV"], "C")
        sheet = format_progression_sheet(get_style("jpop"), "C", progression)
        assert "PROGRESSION" in sheet
        assert "Key: C" in sheet
        assert "I — V — vi — IV" in sheet
        assert "C → G → Am → F" in sheet
        assert "[vi] Am" in sheet
        assert "A minor" in sheet
        assert "Diatonic: C Dm Em F G Am Bdim" in sheet

    def test_missing_shape_placeholder(self):
        progression = resolve_pattern(["I", "V", "vi", "IV"], "F")
        sheet = format_progression_sheet(get_style("jpop"), "F", progression)
        assert "[IV] A#" in sheet
        assert MISSING_SHAPE_MESSAGE in sheet

    def test_unknown_key_has_no_diatonic_line(self):
        progression = resolve_pattern(["I", "V"], "Bb")
        sheet = format_progression_sheet(get_style("jpop"), "Bb", progression)
        assert "Diatonic" not in sheet
        assert "I → V" in sheet


class TestCli:
    """The chordbook command."""

    def test_no_command_shows_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_lookup(self, capsys):
        assert main(["lookup", "Am"]) == 0
        out = capsys.readouterr().out
        assert "A minor" in out
        assert "tags: ballad, open" in out

    def test_lookup_unknown(self, capsys):
        assert main(["lookup", "Xyz"]) == 1
        assert "not in the chord library" in capsys.readouterr().out

    def test_generate_json(self, capsys):
        assert main(["generate", "--style", "jpop", "--key", "G", "--seed", "1", "--json"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["style"] == "jpop"
        assert result["key"] == "G"
        degrees = tuple(chord["degree"] for chord in result["chords"])
        assert degrees in get_style("jpop").patterns

    def test_generate_sheet(self, capsys):
        assert main(["generate", "--style", "ballad", "--key", "C"]) == 0
        assert "Ballad / Lofi" in capsys.readouterr().out

    def test_generate_unknown_style(self, capsys):
        assert main(["generate", "--style", "metal"]) == 1
        assert "Unknown style" in capsys.readouterr().out

    def test_generate_rejects_flat_key(self):
        with pytest.raises(SystemExit):
            main(["generate", "--key", "Bb"])

    def test_generate_wav(self, tmp_path, capsys):
        path = tmp_path / "prog.wav"
        assert main(["generate", "--key", "D", "--seed", "2", "--wav", str(path)]) == 0
        assert path.exists()
        assert path.stat().st_size > 44

    def test_lookup_wav(self, tmp_path):
        path = tmp_path / "g.wav"
        assert main(["lookup", "G", "--wav", str(path)]) == 0
        assert path.exists()

    def test_styles(self, capsys):
        assert main(["styles"]) == 0
        out = capsys.readouterr().out
        assert "jpop" in out
        assert "I – V – vi – IV" in out

    def test_chords(self, capsys):
        assert main(["chords"]) == 0
        out = capsys.readouterr().out
        assert "C#m" in out
        assert "x 4 6 6 5 4" in out
