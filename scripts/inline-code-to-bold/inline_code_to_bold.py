#!/usr/bin/env python3
"""
inline_code_to_bold.py

Turn Markdown inline code into bold text.

What it does
- Reads a Markdown file (the bundled samples/concurrency-in-go.md when no
  file is given).
- Replaces `inline code` with **inline code**.
- Leaves the contents of fenced code blocks alone. Opening fences are
  written with two backticks, closing fences with three.
- Writes the result to output.md (or -o) and echoes it to the console.

With --in-place DIR it rewrites every .md file under DIR instead and prints
"Updated: <path>" for each file that changed.

Run:
    python3 inline_code_to_bold.py article.md -o article-bold.md
    python3 inline_code_to_bold.py --in-place content/
"""

import argparse
import logging
import os
import sys

from doc_tools.config import ConfigError, load_config, resolve
from doc_tools.logging_setup import setup_logging
from doc_tools.markers import replace_inline_code_with_bold, rewrite_directory

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
SAMPLE_INPUT = os.path.join(SCRIPT_DIR, "samples", "concurrency-in-go.md")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Replace Markdown inline code with bold markers"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=SAMPLE_INPUT,
        help="Markdown file to transform (default: the bundled sample article)"
    )
    parser.add_argument("-o", "--output", help="Output file (default: output.md)")
    parser.add_argument(
        "--in-place",
        metavar="DIR",
        help="Rewrite every .md file under DIR in place instead"
    )
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not echo the transformed text to the console"
    )
    return parser.parse_args(argv)


def run_in_place(root):
    if not os.path.isdir(root):
        print(f"Error: {root} is not a directory", file=sys.stderr)
        sys.exit(1)

    results = rewrite_directory(root)
    updated = [r for r in results if r.changed]
    for result in updated:
        print(f"Updated: {result.path}")
    logging.info(f"Scanned {len(results)} Markdown files, updated {len(updated)}.")


def main(argv=None):
    args = parse_args(argv)

    try:
        settings = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging("inline_code_to_bold", settings["log_dir"], settings["log_file"])

    if args.in_place:
        run_in_place(args.in_place)
        return

    try:
        with open(args.input, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        print(f"Error: file not found: {args.input}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        sys.exit(1)

    output = replace_inline_code_with_bold(text)

    output_file = resolve(args.output, settings, "output")
    try:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(output)
    except OSError as e:
        logging.error(f"Error writing output file: {e}")
        sys.exit(1)

    logging.info(f"Wrote {output_file}")
    if not args.quiet:
        print(output)


if __name__ == "__main__":
    main()
