from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..logging_config import get_logger, setup_logging
from ..protocol import DecodeError, Image
from ..rendering.converters import load_image, to_pil
from ..settings import DecodeSettings
from ..transport import FileSource

logger = get_logger("app.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rfarbfeld",
        description="rfarbfeld: decode, inspect and convert farbfeld images.",
    )
    parser.add_argument("path", help="Farbfeld file to read, or '-' for stdin")
    parser.add_argument("--pixel", nargs=2, type=int, metavar=("X", "Y"), help="Print the channels of one pixel")
    parser.add_argument("--to-png", metavar="OUT", help="Write the decoded image as PNG")
    parser.add_argument(
        "--from-image",
        metavar="IN",
        help="Read IN (.png/.jpg/.ff/...) and write it as farbfeld to PATH ('-' for stdout)",
    )
    parser.add_argument("--max-prealloc", type=int, metavar="N", help="Cap on pixels allocated up front")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _resolve_settings(args: argparse.Namespace) -> DecodeSettings:
    settings = DecodeSettings.from_env()
    if args.max_prealloc is not None:
        settings = DecodeSettings(max_preallocated_pixels=args.max_prealloc)
    return settings


def describe(image: Image) -> str:
    return f"{image.width}x{image.height} ({len(image)} pixels)"


def show_pixel(image: Image, x: int, y: int) -> int:
    pixel = image.get_at(x, y)
    if pixel is None:
        print(f"Pixel ({x}, {y}) is outside the {image.width}x{image.height} image", file=sys.stderr)
        return 2
    print(f"red={pixel.red} green={pixel.green} blue={pixel.blue} alpha={pixel.alpha}")
    return 0


def convert_to_png(image: Image, out_path: str) -> int:
    to_pil(image).save(out_path, format="PNG")
    logger.info("Wrote %s", out_path)
    return 0


def convert_from_image(in_path: str, out_path: str, settings: DecodeSettings) -> int:
    image = load_image(in_path, settings)
    written = FileSource(out_path).save(image)
    logger.info("Wrote %d bytes of farbfeld data", written)
    return 0


def run(args: argparse.Namespace) -> int:
    settings = _resolve_settings(args)
    if args.from_image:
        return convert_from_image(args.from_image, args.path, settings)
    image = FileSource(args.path, settings).decode()
    if args.pixel:
        return show_pixel(image, args.pixel[0], args.pixel[1])
    if args.to_png:
        return convert_to_png(image, args.to_png)
    print(describe(image))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    if args.from_image and (args.pixel or args.to_png):
        print("--from-image cannot be combined with --pixel or --to-png. Use --help for usage.", file=sys.stderr)
        return 2
    try:
        return run(args)
    except DecodeError as exc:
        print(f"{exc.kind.value}: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
