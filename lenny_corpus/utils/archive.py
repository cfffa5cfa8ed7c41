import shutil
import zipfile
from pathlib import Path

from loguru import logger

from lenny_corpus.utils.exceptions import ArchiveExtractionError


def extract_archive(archive_path: Path, dest_dir: Path) -> Path:
    """Extract a zip archive into a fresh destination folder.

    Any stale folder left at `dest_dir` by an earlier attempt is removed first.

    Args:
        archive_path: The zip file to extract.
        dest_dir: The folder to extract into.

    Returns:
        Path: The destination folder.

    Raises:
        ArchiveExtractionError: If the file is not a readable zip archive.
    """
    shutil.rmtree(dest_dir, ignore_errors=True)
    dest_dir.mkdir(parents=True)

    try:
        with zipfile.ZipFile(archive_path) as archive:
            archive.extractall(dest_dir)
    except zipfile.BadZipFile as e:
        raise ArchiveExtractionError(f"{archive_path} is not a valid zip archive: {e}") from e

    logger.debug(f"Extracted {archive_path} to {dest_dir}")
    return dest_dir
