"""
App Subpackage

This package contains the user-facing surface:
    - render.py: text chord diagrams and progression sheets
    - cli.py: the `chordbook` command

Usage options:
    - CLI: chordbook generate --style jpop --key G
    - Module: python -m chordbook.app.cli lookup Am
"""
