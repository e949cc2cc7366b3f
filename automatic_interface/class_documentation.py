"""Logic for picking the class-level documentation comment."""

from collections.abc import Sequence

DOC_COMMENT_PREFIXES = ("///", "/**")


def class_documentation(leading_trivia: Sequence[str]) -> str:
    """Return the first non-blank documentation comment block, stripped.

    Only the class's own leading trivia is searched. Plain comments such as
    ``// note`` are not documentation and are skipped.
    """
    for block in leading_trivia:
        text = block.strip()
        if text and text.startswith(DOC_COMMENT_PREFIXES):
            return text
    return ""
