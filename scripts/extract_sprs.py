#!/usr/bin/env python3
"""
Extract sprites from SPR file(s).

Usage:
    python scripts/extract_sprs.py <spr_file>                    # Single SPR file
    python scripts/extract_sprs.py <spr1> <spr2> <spr3>          # Multiple SPR files
    python scripts/extract_sprs.py path/to/sprs                   # All SPRs in folder
    python scripts/extract_sprs.py <spr_file> -b                 # Textures with sprite bounds
    python scripts/extract_sprs.py <spr_file> -o out_dir         # Custom output directory
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from generators import spr_extract_process_single, spr_extract_process_multiple
from spr_files import TranslationMode
from data import CURRENT_VERSION


def positive_int(value: str) -> int:
    """argparse type for worker counts."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main():
    parser = argparse.ArgumentParser(
        description="Extract sprites as separate images from Persona 3/4 SPR files"
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="SPR file(s) or folder containing SPR files",
    )
    parser.add_argument(
        "-b",
        "--bounds",
        action="store_true",
        help="Extract base textures and sprite bounds instead of single sprites",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Directory to extract to (default: folder named after each SPR file)",
    )
    parser.add_argument(
        "-t",
        "--translation",
        choices=TranslationMode.ALL,
        default=TranslationMode.SKIP,
        help="Whether sprite translate offsets are added to sprite rectangles",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=positive_int,
        default=None,
        help="Worker threads used for extraction",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {CURRENT_VERSION}"
    )

    args = parser.parse_args()

    failed = 0

    for path_str in args.paths:
        input_path = Path(path_str).resolve()

        if not input_path.exists():
            print(f"[ERROR] Path does not exist: {input_path}")
            failed += 1
            continue

        if input_path.is_file():
            output_dir = args.output
            if output_dir is not None and len(args.paths) > 1:
                output_dir = output_dir / input_path.stem
            ok = spr_extract_process_single(
                input_path,
                output_dir=output_dir,
                bounds=args.bounds,
                translation_mode=args.translation,
                max_workers=args.jobs,
            )
            failed += 0 if ok else 1
        else:
            results = spr_extract_process_multiple(
                input_path,
                output_dir=args.output,
                bounds=args.bounds,
                translation_mode=args.translation,
                max_workers=args.jobs,
            )
            failed += sum(1 for ok in results.values() if not ok)

    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    main()
