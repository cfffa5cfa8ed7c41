from collections.abc import Iterable

from lenny_corpus.models.episode import Episode, SearchResult
from lenny_corpus.parsers.snippets import DEFAULT_SNIPPET_LENGTH, extract_snippet, find_first_match
from lenny_corpus.parsers.transcript import extract_last_timestamp, extract_timestamp


def search_corpus(
    episodes: Iterable[Episode], search_terms: Iterable[str], snippet_length: int = DEFAULT_SNIPPET_LENGTH
) -> list[SearchResult]:
    """Find the episodes that mention any of the search terms.

    Results keep the order of the corpus.
    """
    terms = [term for term in search_terms if term.strip()]
    if not terms:
        return []

    results: list[SearchResult] = []
    for episode in episodes:
        position = find_first_match(episode.content, terms)
        if position is None:
            continue

        snippet = extract_snippet(episode.content, terms, snippet_length)
        timestamp = extract_timestamp(snippet) or extract_last_timestamp(episode.content[:position])

        results.append(SearchResult(guest=episode.guest, path=episode.path, snippet=snippet, timestamp=timestamp))

    return results
