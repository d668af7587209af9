"""
Shared helpers for the documentation maintenance scripts under scripts/.
"""

from doc_tools.images import ConversionResult, TraversalError, convert_png_directory, to_jpeg
from doc_tools.markers import RewriteResult, replace_inline_code_with_bold, rewrite_directory, rewrite_file

__all__ = [
    "ConversionResult",
    "RewriteResult",
    "TraversalError",
    "convert_png_directory",
    "replace_inline_code_with_bold",
    "rewrite_directory",
    "rewrite_file",
    "to_jpeg",
]
