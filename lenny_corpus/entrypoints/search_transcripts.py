"""Search the transcripts for one or more terms.

Usage: python -m lenny_corpus.entrypoints.search_transcripts <term> [<term> ...]
"""

import sys

from loguru import logger

from lenny_corpus.handlers.corpus_bootstrap import ensure_corpus
from lenny_corpus.handlers.corpus_loader import load_corpus
from lenny_corpus.handlers.corpus_search import search_corpus
from lenny_corpus.utils.config import config, get_transcripts_path
from lenny_corpus.utils.global_http_client import http_client
from lenny_corpus.utils.helpers import init_logging, run_main_safely


def main(search_terms: list[str]) -> None:
    """Log every episode that mentions any of the search terms."""
    init_logging(config)
    config.validators.validate_all()

    if not search_terms:
        raise ValueError("At least one search term is required.")

    transcripts_path = get_transcripts_path(config)
    if config.mode == "hosted":
        ensure_corpus(transcripts_path, http_client)

    episodes = load_corpus(transcripts_path)
    results = search_corpus(episodes, search_terms)

    logger.info(f"Found {len(results)} matching episodes.")
    for result in results:
        logger.info(f"{result.guest} ({result.timestamp or '??:??:??'})\n{result.snippet}\n")


if __name__ == "__main__":
    _, *_search_terms = sys.argv
    run_main_safely(main, _search_terms)
