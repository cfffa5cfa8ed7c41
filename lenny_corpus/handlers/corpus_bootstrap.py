"""Download the transcript corpus when no local copy is available.

The archive is a GitHub zip of the transcripts repository. Its episode folders are
copied into the target folder, after which the corpus can be read by `load_corpus`.
"""

import shutil
from pathlib import Path

from loguru import logger
from requests import Session

from lenny_corpus.utils.archive import extract_archive
from lenny_corpus.utils.config import (
    ARCHIVE_EPISODES_FOLDER,
    ARCHIVE_ROOT_NAME,
    ARCHIVE_URL,
    EXISTING_EPISODE_THRESHOLD,
    MINIMUM_EPISODE_COUNT,
    TEMP_ARCHIVE_PATH,
    TEMP_EXTRACT_PATH,
)
from lenny_corpus.utils.exceptions import ArchiveExtractionError, CorpusValidationError, TranscriptDownloadError
from lenny_corpus.utils.helpers import count_subdirectories

_BYTES_PER_MB = 1024 * 1024
_CHUNK_SIZE = 64 * 1024


def corpus_is_present(target_dir: Path) -> bool:
    """Check whether the folder already holds a downloaded corpus."""
    if not target_dir.is_dir():
        return False

    episode_count = count_subdirectories(target_dir)
    if episode_count > EXISTING_EPISODE_THRESHOLD:
        logger.info(f"Transcripts already exist at {target_dir} ({episode_count} episodes)")
        return True

    if episode_count:
        logger.warning(f"Only {episode_count} episodes at {target_dir}, treating the corpus as incomplete")

    return False


def ensure_corpus(target_dir: Path, client: Session) -> None:
    """Make sure the target folder holds the transcript corpus, downloading it if needed.

    Running this again after a success does nothing. After a failure the whole
    download is repeated.

    Raises:
        TranscriptDownloadError: If the archive could not be downloaded.
        ArchiveExtractionError: If the archive is not a zip or lacks the episodes folder.
        CorpusValidationError: If too few episodes were copied.
    """
    if corpus_is_present(target_dir):
        return

    logger.info("Downloading transcripts from GitHub...")

    try:
        target_dir.mkdir(parents=True, exist_ok=True)

        try:
            download_archive(client, ARCHIVE_URL, TEMP_ARCHIVE_PATH)

            logger.info("Extracting transcripts...")
            extract_archive(TEMP_ARCHIVE_PATH, TEMP_EXTRACT_PATH)

            copy_episodes(TEMP_EXTRACT_PATH / ARCHIVE_ROOT_NAME / ARCHIVE_EPISODES_FOLDER, target_dir)
        finally:
            remove_temp_files()

        episode_count = count_subdirectories(target_dir)
        if episode_count < MINIMUM_EPISODE_COUNT:
            raise CorpusValidationError(f"Only found {episode_count} episodes, expected 300+")

        logger.info(f"Extracted {episode_count} episode transcripts")
    except Exception:
        logger.exception("Error downloading transcripts")
        raise


def download_archive(client: Session, url: str, archive_path: Path) -> int:
    """Stream a file to disk, logging progress for each whole megabyte.

    Returns:
        int: The number of bytes written.
    """
    response = client.get(url, raise_for_status=False, stream=True, allow_redirects=True)

    try:
        if not response.ok:
            raise TranscriptDownloadError(response.status_code, response.reason)

        received_bytes = 0
        with archive_path.open("wb") as archive_file:
            for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                if not chunk:
                    continue

                archive_file.write(chunk)
                previous_mb = received_bytes // _BYTES_PER_MB
                received_bytes += len(chunk)

                if received_bytes // _BYTES_PER_MB > previous_mb:
                    logger.info(f"Downloaded {received_bytes // _BYTES_PER_MB}MB...")
    finally:
        response.close()

    logger.info(f"Download complete ({round(received_bytes / _BYTES_PER_MB)}MB)")
    return received_bytes


def copy_episodes(episodes_dir: Path, target_dir: Path) -> None:
    """Copy the contents of the extracted episodes folder into the target folder."""
    if not episodes_dir.is_dir():
        raise ArchiveExtractionError(f"Archive does not contain {ARCHIVE_ROOT_NAME}/{ARCHIVE_EPISODES_FOLDER}")

    for child in episodes_dir.iterdir():
        if child.name.startswith("."):
            continue

        destination = target_dir / child.name
        if child.is_dir():
            shutil.copytree(child, destination, dirs_exist_ok=True)
        else:
            shutil.copy2(child, destination)


def remove_temp_files() -> None:
    """Remove the downloaded archive and the extraction folder, if they exist."""
    shutil.rmtree(TEMP_EXTRACT_PATH, ignore_errors=True)
    TEMP_ARCHIVE_PATH.unlink(missing_ok=True)
