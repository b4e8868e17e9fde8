"""Command line: apply one effect to an image file and save the result."""
from __future__ import annotations

import argparse
import sys

from pixelfx import channels, geometry, masks, patterns, warp
from pixelfx.pixels import load_image, save_image

EFFECTS = {
    effect.__name__: effect
    for effect in (
        geometry.flip_vertical,
        geometry.flip_horizontal,
        geometry.swap_halves_vertical,
        geometry.swap_halves_horizontal,
        channels.split_bands,
        channels.quadrant_channels,
        channels.fold_intensity,
        channels.invert_fold,
        channels.horizontal_brighten,
        channels.stepped_brighten,
        masks.grey_outside_diamond,
        masks.grey_corners,
        masks.grey_outside_circle,
        masks.fade_to_grey,
        patterns.mosaic,
        patterns.checkerboard,
        patterns.diamond_tiles,
        patterns.oval_tiles,
        patterns.circular_rings,
        patterns.diamond_rings,
        patterns.vertical_waves,
        patterns.horizontal_waves,
        warp.sine_shift_rows,
        warp.sine_shift_columns,
        warp.stepped_column_wave,
    )
}

_PARAMETERS = {
    "mosaic": "blocks",
    "checkerboard": "cells",
    "stepped_column_wave": "steps",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelfx", description="Apply a pixel effect to an image."
    )
    parser.add_argument("effect", nargs="?", choices=sorted(EFFECTS))
    parser.add_argument("input", nargs="?", help="image file to read")
    parser.add_argument("output", nargs="?", help="image file to write")
    parser.add_argument("--list", action="store_true", help="list the effects")
    parser.add_argument("--blocks", type=int, help="block count for mosaic")
    parser.add_argument("--cells", type=int, help="cell count for checkerboard")
    parser.add_argument(
        "--steps", type=int, help="strip count for stepped_column_wave"
    )
    return parser


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in sorted(EFFECTS):
            print(name)
        return 0

    if args.effect is None or args.input is None or args.output is None:
        parser.error("an effect, an input file and an output file are required")

    kwargs = {}
    for option in set(_PARAMETERS.values()):
        value = getattr(args, option)
        if value is None:
            continue
        if _PARAMETERS.get(args.effect) != option:
            parser.error(f"--{option} does not apply to {args.effect}")
        kwargs[option] = value

    try:
        image = load_image(args.input)
        result = EFFECTS[args.effect](image, **kwargs)
        save_image(result, args.output)
    except (OSError, ValueError) as exc:
        print(f"pixelfx: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())