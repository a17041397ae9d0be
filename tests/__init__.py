"""
Test Package

Contains unit tests for all modules.
Run with: pytest tests/ -v

Test files follow the pattern:
    test_<module_name>.py

Example:
    tests/test_harmony.py     - Tests for chordbook/rules/harmony.py
    tests/test_layout.py      - Tests for chordbook/diagram/layout.py
    tests/test_pitch.py       - Tests for chordbook/audio/pitch.py and synth.py
"""
