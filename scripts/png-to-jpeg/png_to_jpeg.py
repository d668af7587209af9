#!/usr/bin/env python3
"""
png_to_jpeg.py

Convert every .png file under a directory to .jpg and delete the originals.

Requirements:
    • Pillow
    • pandas and openpyxl (only for --report)

Run:
    python3 png_to_jpeg.py ~/Downloads
    python3 png_to_jpeg.py static/images --quality 90 --report conversions.xlsx

Only files ending in exactly ".png" are converted. Each JPEG is written next
to its source. Files that fail to convert are logged and left in place. If a
directory cannot be read, the script stops.
"""

import argparse
import logging
import os
import sys

from doc_tools.config import ConfigError, load_config, resolve, validate_quality
from doc_tools.images import TraversalError, convert_png_directory, write_report
from doc_tools.logging_setup import setup_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Convert PNG images to JPEG in place, recursively"
    )
    parser.add_argument("root", help="Directory to search for .png files")
    parser.add_argument(
        "--quality",
        type=int,
        help="JPEG quality 1-95 (default: the encoder's default)"
    )
    parser.add_argument("--report", help="Write a CSV or .xlsx report of every file")
    parser.add_argument("--config", help="YAML settings file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if not os.path.isdir(args.root):
        print(f"Error: {args.root} is not a directory", file=sys.stderr)
        sys.exit(1)

    try:
        settings = load_config(args.config)
        quality = validate_quality(resolve(args.quality, settings, "jpeg_quality"))
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging("png_to_jpeg", settings["log_dir"], settings["log_file"])
    logging.info(f"Converting PNG files under {args.root}")

    try:
        results = convert_png_directory(args.root, quality)
    except TraversalError as e:
        logging.critical(f"Error processing directory: {e}")
        sys.exit(1)

    if args.report:
        try:
            write_report(results, args.report)
        except (OSError, ImportError, ValueError) as e:
            logging.error(f"Error writing report {args.report}: {e}")
            sys.exit(1)

    converted = sum(1 for r in results if r.status == "converted")
    failed = len(results) - converted
    logging.info(f"Done. Converted: {converted}. Failed: {failed}.")


if __name__ == "__main__":
    main()
