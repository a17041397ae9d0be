"""
Command Line Interface for chordbook
====================================

Look up chord diagrams and generate progressions from the terminal.

Usage Examples:
    # Generate a progression in G with the J-POP style
    chordbook generate --style jpop --key G

    # Pin the random pick and save the audio preview
    chordbook generate --style ballad --key C --seed 3 --wav ballad.wav

    # Look up a single chord
    chordbook lookup Am

    # List what is available
    chordbook styles
    chordbook chords
"""

import argparse
import json
import logging
import random
import sys
from typing import List, Optional

from chordbook import __version__
from chordbook.app.render import format_progression_sheet, render_diagram
from chordbook.audio.pitch import schedule_progression, to_playback_events
from chordbook.audio.synth import render_events, write_wav
from chordbook.data.catalog import CatalogError, get_chord_catalog, get_progression_styles, get_style
from chordbook.rules.harmony import CHROMATIC_SCALE, FEATURED_KEYS
from chordbook.rules.progression import generate_progression
from chordbook.rules.shapes import find_chord_shape


logger = logging.getLogger(__name__)


# =============================================================================
# PART 1: ARGUMENT PARSER SETUP
# =============================================================================

def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser object
    """
    parser = argparse.ArgumentParser(
        prog="chordbook",
        description="""
🎸 chordbook - Guitar chord diagrams and progression generator.

Examples:
  chordbook generate --style jpop --key G
  chordbook lookup C#m
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed processing information"
    )

    subparsers = parser.add_subparsers(dest="command")

    # ─────────────────────────────────────────────────────────────────────────
    # generate
    # ─────────────────────────────────────────────────────────────────────────
    gen = subparsers.add_parser("generate", help="Generate a chord progression")
    gen.add_argument("--style", default="jpop", help="Progression style id (see 'styles')")
    gen.add_argument(
        "--key",
        default="C",
        choices=CHROMATIC_SCALE,
        help=f"Key root, sharps only (featured: {', '.join(FEATURED_KEYS)})"
    )
    gen.add_argument("--seed", type=int, default=None, help="Seed for a repeatable pick")
    gen.add_argument("--wav", default=None, help="Write an audio preview to this WAV file")
    gen.add_argument("--json", action="store_true", help="Output result as JSON")

    # ─────────────────────────────────────────────────────────────────────────
    # lookup
    # ─────────────────────────────────────────────────────────────────────────
    look = subparsers.add_parser("lookup", help="Show the diagram for a chord symbol")
    look.add_argument("name", help="Chord symbol, e.g. C, F#m, G7")
    look.add_argument("--wav", default=None, help="Write an audio preview to this WAV file")

    subparsers.add_parser("styles", help="List progression styles")
    subparsers.add_parser("chords", help="List the chord library")

    return parser


# =============================================================================
# PART 2: COMMANDS
# =============================================================================

def run_generate(args: argparse.Namespace) -> int:
    try:
        style = get_style(args.style)
    except ValueError as e:
        print(f"⚠️  {e}")
        return 1

    logger.debug("Generating %s in %s (seed=%s)", style.id, args.key, args.seed)
    rng = random.Random(args.seed) if args.seed is not None else None
    progression = generate_progression(style, args.key, rng=rng)

    if args.json:
        output = {
            "style": style.id,
            "key": args.key,
            "chords": [chord.to_dict() for chord in progression],
        }
        print(json.dumps(output, indent=2))
    else:
        print(format_progression_sheet(style, args.key, progression))

    if args.wav:
        write_wav(render_events(schedule_progression(progression)), args.wav)
        if not args.json:
            print(f"\n🔊 Saved preview to {args.wav}")
    return 0


def run_lookup(args: argparse.Namespace) -> int:
    shape = find_chord_shape(args.name)
    if shape is None:
        known = ", ".join(get_chord_catalog().names)
        print(f"⚠️  '{args.name}' is not in the chord library. Known chords: {known}")
        return 1

    print(render_diagram(shape))
    if shape.tags:
        print("tags: " + ", ".join(shape.tags))

    if args.wav:
        write_wav(render_events(to_playback_events(shape)), args.wav)
        print(f"\n🔊 Saved preview to {args.wav}")
    return 0


def run_styles(args: argparse.Namespace) -> int:
    for style in get_progression_styles():
        print(f"{style.id:10} {style.label}")
        print(f"{'':10} {style.description}")
        for pattern in style.patterns:
            print(f"{'':10}   {' – '.join(pattern)}")
    return 0


def run_chords(args: argparse.Namespace) -> int:
    for shape in get_chord_catalog():
        frets = " ".join("x" if fret < 0 else str(fret) for fret in shape.strings)
        print(f"{shape.name:6} {shape.label:12} {frets:14} {shape.quality}")
    return 0


COMMANDS = {
    "generate": run_generate,
    "lookup": run_lookup,
    "styles": run_styles,
    "chords": run_chords,
}


# =============================================================================
# PART 3: MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Parses arguments and dispatches to the chosen command.

    Returns:
        Process exit code
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        return COMMANDS[args.command](args)
    except CatalogError as e:
        print(f"\n❌ Catalog Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
