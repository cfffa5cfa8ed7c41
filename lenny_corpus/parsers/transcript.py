"""Parsers for transcript markdown files.

Transcripts may start with a metadata block:

    ---
    guest: Elena Verna
    title: ...
    ---
    Lenny (00:00:00): ...
"""

import re

_DELIMITER = "---"
_GUEST_PATTERN = re.compile(r"^guest:\s*(.+)$", re.MULTILINE)
_FOLDER_SUFFIX_PATTERN = re.compile(r"[-_]\d+$", re.ASCII)
_TIMESTAMP_PATTERN = re.compile(r"\((\d{2}:\d{2}:\d{2})\)", re.ASCII)


def _find_frontmatter_end(content: str) -> int | None:
    if not content.startswith(_DELIMITER):
        return None

    end_index = content.find(_DELIMITER, len(_DELIMITER))
    if end_index == -1:
        return None

    return end_index


def extract_guest_from_frontmatter(content: str) -> str | None:
    """Get the guest name from the metadata block, if there is one."""
    end_index = _find_frontmatter_end(content)
    if end_index is None:
        return None

    match = _GUEST_PATTERN.search(content[:end_index])
    if not match:
        return None

    return match.group(1).strip()


def strip_frontmatter(content: str) -> str:
    """Remove the metadata block from a transcript.

    Content without a complete metadata block is returned unchanged.
    """
    end_index = _find_frontmatter_end(content)
    if end_index is None:
        return content

    return content[end_index + len(_DELIMITER) :].strip()


def folder_to_guest(folder_name: str) -> str:
    """Convert an episode folder name into a guest name.

    Ex. "elena-verna-20" -> "Elena Verna"
    """
    name = _FOLDER_SUFFIX_PATTERN.sub("", folder_name)

    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))


def extract_timestamp(text: str) -> str | None:
    """Get the first "(HH:MM:SS)" timestamp in a line of dialogue.

    Ex. "Lenny (00:03:42): ..." -> "00:03:42"
    """
    match = _TIMESTAMP_PATTERN.search(text)
    return match.group(1) if match else None


def extract_last_timestamp(text: str) -> str | None:
    """Get the last "(HH:MM:SS)" timestamp in a block of text."""
    timestamps = _TIMESTAMP_PATTERN.findall(text)
    return timestamps[-1] if timestamps else None
