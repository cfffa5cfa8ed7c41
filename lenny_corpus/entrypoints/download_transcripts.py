"""Download the transcript corpus into the hosted transcripts folder."""

from loguru import logger

from lenny_corpus.handlers.corpus_bootstrap import ensure_corpus
from lenny_corpus.utils.config import HOSTED_TRANSCRIPTS_PATH, config
from lenny_corpus.utils.global_http_client import http_client
from lenny_corpus.utils.helpers import init_logging, run_main_safely


def main() -> None:
    """Download the transcripts, unless they are already present."""
    init_logging(config)

    logger.info("Validating config...")
    config.validators.validate_all()

    ensure_corpus(HOSTED_TRANSCRIPTS_PATH, http_client)


if __name__ == "__main__":
    run_main_safely(main)
