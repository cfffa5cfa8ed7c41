from collections.abc import Iterable

ELLIPSIS = "..."
DEFAULT_SNIPPET_LENGTH = 500

# Most transcripts open with sponsor reads
_INTRO_LENGTH = 2000
# How far into a snippet to look for a line break to start on
_LINE_START_SEARCH_LENGTH = 100


def find_first_match(content: str, search_terms: Iterable[str]) -> int | None:
    """Find the earliest position at which any of the terms occurs (case-insensitive)."""
    lower_content = content.lower()

    best_position = None
    for term in search_terms:
        position = lower_content.find(term.lower())
        if position != -1 and (best_position is None or position < best_position):
            best_position = position

    return best_position


def extract_snippet(
    content: str, search_terms: Iterable[str], snippet_length: int = DEFAULT_SNIPPET_LENGTH
) -> str:
    """Extract an excerpt of the content centered on the earliest matching term.

    When no term matches, the excerpt is taken from just after the intro instead.

    Args:
        content: The full text to search.
        search_terms: The terms to look for. Each is matched on its own.
        snippet_length: The maximum number of characters taken from the content.

    Returns:
        str: The excerpt, with "..." marking the sides where content was cut.
    """
    position = find_first_match(content, search_terms)

    if position is None:
        start = min(_INTRO_LENGTH, len(content))
        return content[start : start + snippet_length] + ELLIPSIS

    half_length = snippet_length // 2
    start = max(0, position - half_length)
    end = min(len(content), position + half_length)

    snippet = content[start:end]

    if start > 0:
        newline_position = snippet.find("\n")
        if newline_position != -1 and newline_position < _LINE_START_SEARCH_LENGTH:
            snippet = snippet[newline_position + 1 :]
        snippet = ELLIPSIS + snippet

    if end < len(content):
        snippet += ELLIPSIS

    return snippet.strip()
