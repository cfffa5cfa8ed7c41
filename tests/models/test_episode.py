import dataclasses

import pytest

from lenny_corpus.models.episode import Episode, SearchResult


def test_episode_is_immutable(episode: Episode):
    with pytest.raises(dataclasses.FrozenInstanceError):
        episode.guest = "Someone Else"  # type: ignore[misc]


def test_search_result_timestamp_is_optional():
    result = SearchResult(guest="Jane Doe", path="/fake", snippet="Hello world")

    assert result.timestamp is None
