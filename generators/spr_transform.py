from pathlib import Path
from typing import Optional, Union

from spr_files import (
    CursorReader,
    SprFile,
    TranslationMode,
    decode,
    extract_all,
    annotate_all,
    texture_pixel_buffers,
)
from external_files import write_sprite_files, write_bounds_files
from data import (
    DEBUG,
    DEFAULT_MAX_WORKERS,
    SEPARATOR_LINE_LENGTH,
    read_file_to_bytes,
    validate_path_exists_and_is_dir,
)


def load_spr(
    spr_input: Union[Path, bytes], translation_mode: str = TranslationMode.SKIP
) -> SprFile:
    """
    Decode an SPR container from file path or raw bytes.

    Args:
        spr_input: Either Path to .spr file or raw SPR bytes
        translation_mode: Whether sprite translate offsets are applied to rectangles

    Returns:
        SprFile object
    """
    if isinstance(spr_input, bytes):
        rawdata = spr_input
    else:
        rawdata = read_file_to_bytes(spr_input)

    return decode(CursorReader(rawdata), translation_mode=translation_mode)


def extract_spr_sprites(
    spr: SprFile, output_dir: Path, max_workers: Optional[int] = DEFAULT_MAX_WORKERS
) -> dict:
    """Extract every sprite to its own PNG, or a dummy marker file.

    Returns:
        dict with keys: written, dummies, invalid
    """
    # Expand textures once up front, not per sprite
    buffers = texture_pixel_buffers(spr)
    results = extract_all(spr, buffers, max_workers=max_workers)

    write_sprite_files(spr, results, output_dir)

    invalid = [r for r in results if r.error is not None]
    for result in invalid:
        print(f"[WARNING] Sprite {result.index} written as dummy: {result.error}")

    summary = {
        "written": sum(1 for r in results if r.pixels is not None),
        "dummies": sum(1 for r in results if r.pixels is None and r.error is None),
        "invalid": len(invalid),
    }
    print(
        f"[OK] {summary['written']} sprite image(s), {summary['dummies']} dummy "
        f"sprite(s) saved to: {output_dir}"
    )
    return summary


def extract_spr_bounds(
    spr: SprFile, output_dir: Path, max_workers: Optional[int] = DEFAULT_MAX_WORKERS
) -> dict:
    """Write every texture together with an outline of each sprite it holds."""
    annotated = annotate_all(spr, max_workers=max_workers)
    names = write_bounds_files(spr, annotated, output_dir)

    print(f"[OK] {len(names)} texture(s) and bounds image(s) saved to: {output_dir}")
    return {"textures": len(names)}


def spr_extract_main(
    path: Path,
    output_dir: Optional[Path] = None,
    bounds: bool = False,
    translation_mode: str = TranslationMode.SKIP,
    max_workers: Optional[int] = DEFAULT_MAX_WORKERS,
) -> Path:
    """Extract a single SPR file.

    Args:
        path: Path to the .spr file
        output_dir: Output directory; defaults to a folder named after the file
        bounds: Write textures with sprite outlines instead of single sprites
        translation_mode: Whether sprite translate offsets are applied to rectangles
        max_workers: Worker threads for extraction
    """
    if output_dir is None:
        output_dir = path.parent / path.stem

    spr = load_spr(path, translation_mode=translation_mode)

    print(
        f"[INFO] {len(spr.textures)} texture(s), {len(spr.sprites)} sprite(s), "
        f"{len(spr.used_sprites())} in use"
    )
    if DEBUG:
        print(f"[DEBUG] Container data ends at 0x{spr.end_offset:X}")

    if bounds:
        print("[START] Extracting sprite bounds...")
        extract_spr_bounds(spr, output_dir, max_workers=max_workers)
    else:
        print("[START] Extracting sprites...")
        extract_spr_sprites(spr, output_dir, max_workers=max_workers)

    print(f"\n[OK] SPR file extracted successfully to: {output_dir}")
    return output_dir


def spr_extract_process_single(
    path: Path,
    output_dir: Optional[Path] = None,
    bounds: bool = False,
    translation_mode: str = TranslationMode.SKIP,
    max_workers: Optional[int] = DEFAULT_MAX_WORKERS,
) -> bool:
    """Process a single SPR file.

    Returns:
        True if successful, False otherwise
    """
    if not path.exists():
        print(f"[ERROR] Path does not exist: {path}")
        return False

    if not path.is_file() or path.suffix.lower() != ".spr":
        print(f"[ERROR] Path must be a .spr file: {path}")
        return False

    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[INFO] Processing SPR file: {path}")
    print(f"[INFO] Operation: {'Extract bounds' if bounds else 'Extract sprites'}")
    print(f"[INFO] Translation mode: {translation_mode}")
    print("=" * SEPARATOR_LINE_LENGTH)
    print()

    try:
        spr_extract_main(
            path,
            output_dir=output_dir,
            bounds=bounds,
            translation_mode=translation_mode,
            max_workers=max_workers,
        )
        return True

    except Exception as e:
        print(f"[ERROR] Error during processing: {str(e)}")
        return False


def spr_extract_process_multiple(
    parent_folder: Path,
    output_dir: Optional[Path] = None,
    bounds: bool = False,
    translation_mode: str = TranslationMode.SKIP,
    max_workers: Optional[int] = DEFAULT_MAX_WORKERS,
) -> dict:
    """Process every SPR file in a folder.

    Each file goes to its own subfolder of ``output_dir`` when given,
    otherwise next to the file.

    Returns:
        dict mapping file name to success flag
    """
    if not validate_path_exists_and_is_dir(parent_folder, "Parent folder"):
        return {}

    items = sorted(
        f for f in parent_folder.iterdir() if f.is_file() and f.suffix.lower() == ".spr"
    )

    if not items:
        print(f"[ERROR] No SPR files found in: {parent_folder}")
        return {}

    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[INFO] Found {len(items)} SPR file(s) to process")
    print("=" * SEPARATOR_LINE_LENGTH)
    print()

    results = {}

    for idx, item_path in enumerate(items):
        if idx > 0:
            print()

        item_output = output_dir / item_path.stem if output_dir is not None else None
        results[item_path.name] = spr_extract_process_single(
            item_path,
            output_dir=item_output,
            bounds=bounds,
            translation_mode=translation_mode,
            max_workers=max_workers,
        )

    failed_items = [name for name, ok in results.items() if not ok]

    print()
    print("=" * SEPARATOR_LINE_LENGTH)
    print("[SUMMARY] PROCESSING SUMMARY")
    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[INFO] Total: {len(items)}")
    print(f"[INFO] Successful: {len(items) - len(failed_items)}")
    print(f"[INFO] Failed: {len(failed_items)}")

    if failed_items:
        print("\n[ERROR] Failed items:")
        for item in failed_items:
            print(f"   - {item}")

    print("=" * SEPARATOR_LINE_LENGTH)

    return results
