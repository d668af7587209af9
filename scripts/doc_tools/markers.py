"""
Rewrite Markdown inline-code markers as bold markers.

Inline code such as `go` becomes **go**. Text inside fenced code blocks is
left alone, and only the fence lines themselves change: an opening fence is
written as two backticks, and a closing fence keeps three.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

BACKTICK = "`"
FENCE = "```"
OPENING_FENCE = "``"
CLOSING_FENCE = "```"
BOLD = "**"


@dataclass
class RewriteResult:
    path: str
    changed: bool


def replace_inline_code_with_bold(text: str) -> str:
    """
    Returns text with inline-code backticks turned into bold markers.

    The scan is a single left-to-right pass that looks only at neighbors in
    the input, never at what was already written:
      - Three backticks in a row are a fence. They toggle code-block mode
        and are consumed together.
      - A backtick next to another backtick (checking the one before it
        first) is the edge of a double-backtick span. Outside a code block
        it is dropped; inside one it is kept.
      - Any other backtick becomes ** outside a code block and is kept
        inside one.
    Malformed input is not an error. An unclosed fence just leaves the rest
    of the text in code-block mode.
    """
    result = []
    in_code_block = False
    length = len(text)
    i = 0

    while i < length:
        char = text[i]
        if char != BACKTICK:
            result.append(char)
            i += 1
            continue

        if text.startswith(FENCE, i):
            if in_code_block:
                result.append(CLOSING_FENCE)
            else:
                result.append(OPENING_FENCE)
            in_code_block = not in_code_block
            i += len(FENCE)
            continue

        prev_backtick = i > 0 and text[i - 1] == BACKTICK
        next_backtick = i < length - 1 and text[i + 1] == BACKTICK

        if prev_backtick or next_backtick:
            if in_code_block:
                result.append(char)
        elif in_code_block:
            result.append(char)
        else:
            result.append(BOLD)
        i += 1

    return "".join(result)


def rewrite_file(path) -> bool:
    """
    Rewrites a Markdown file in place. Returns True if the content changed.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    new_content = replace_inline_code_with_bold(content)
    if new_content == content:
        return False

    with open(path, "w", encoding="utf-8") as f:
        f.write(new_content)
    return True


def rewrite_directory(root):
    """
    Applies rewrite_file to every .md file under root.

    Files that cannot be read or written are logged and skipped.
    """
    results = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            if not name.lower().endswith(".md"):
                continue
            path = os.path.join(dirpath, name)
            try:
                changed = rewrite_file(path)
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to rewrite {path}: {e}")
                continue
            if changed:
                logger.info(f"Rewrote {path}")
            results.append(RewriteResult(path, changed))
    return results
