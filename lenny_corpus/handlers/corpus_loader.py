from pathlib import Path

from loguru import logger

from lenny_corpus.models.episode import Episode
from lenny_corpus.parsers.transcript import extract_guest_from_frontmatter, folder_to_guest, strip_frontmatter
from lenny_corpus.utils.config import TRANSCRIPT_FILENAME

# Folders like .git or scripts have no transcript, these errors just mean "not an episode"
_SKIPPABLE_READ_ERRORS = (
    FileNotFoundError,
    NotADirectoryError,
    IsADirectoryError,
    PermissionError,
)


def load_corpus(corpus_path: Path | str) -> list[Episode]:
    """Load every episode transcript found in the corpus folder.

    Each immediate subfolder holding a transcript file becomes one episode.
    Subfolders without a readable transcript are skipped.

    Raises:
        OSError: If the corpus folder itself cannot be listed.
    """
    corpus_path = Path(corpus_path)

    try:
        folders = sorted(entry for entry in corpus_path.iterdir() if entry.is_dir())
    except OSError as e:
        logger.error(f"Error loading transcripts from {corpus_path}: {e}")
        raise

    logger.info(f"Loading transcripts from {len(folders)} episode folders in {corpus_path}...")

    episodes: list[Episode] = []
    for folder in folders:
        episode = load_episode(folder)
        if episode is not None:
            episodes.append(episode)

    logger.info(f"Loaded {len(episodes)} episodes successfully.")
    return episodes


def load_episode(folder: Path) -> Episode | None:
    """Load the episode in a folder, or None if the folder has no readable transcript."""
    transcript_path = folder / TRANSCRIPT_FILENAME

    try:
        raw_content = transcript_path.read_text(encoding="utf-8", errors="replace")
    except _SKIPPABLE_READ_ERRORS as e:
        logger.debug(f"Skipping {folder.name}: {type(e).__name__}")
        return None

    guest = extract_guest_from_frontmatter(raw_content) or folder_to_guest(folder.name)

    return Episode(guest=guest, content=strip_frontmatter(raw_content), path=str(transcript_path.resolve()))
