from lenny_corpus.handlers.corpus_search import search_corpus
from lenny_corpus.models.episode import Episode, SearchResult


def test_search_corpus(episode: Episode):
    # Act
    results = search_corpus([episode], ["growth LOOPS"])

    # Assert
    assert results == [
        SearchResult(
            guest="Elena Verna",
            path="/fake/elena-verna/transcript.md",
            snippet=episode.content,
            timestamp="00:00:05",
        )
    ]


def test_search_corpus_keeps_corpus_order(episode: Episode):
    other = Episode(guest="Shreyas Doshi", content="Shreyas (00:02:00): Funnels and growth.", path="/fake/shreyas")

    results = search_corpus([other, episode], ["growth"])

    assert [result.guest for result in results] == ["Shreyas Doshi", "Elena Verna"]


def test_search_corpus_skips_non_matching_episodes(episode: Episode):
    assert search_corpus([episode], ["pricing"]) == []


def test_search_corpus_without_terms(episode: Episode):
    assert search_corpus([episode], []) == []
    assert search_corpus([episode], ["", "   "]) == []


def test_search_corpus_timestamp_before_snippet():
    # Arrange
    content = "Lenny (00:10:00): " + "talking " * 200 + "about pricing " + "and more " * 200
    episode = Episode(guest="Madhavan Ramanujam", content=content, path="/fake/madhavan")

    # Act
    results = search_corpus([episode], ["pricing"], snippet_length=100)

    # Assert
    assert "(00:10:00)" not in results[0].snippet
    assert results[0].timestamp == "00:10:00"


def test_search_corpus_without_timestamps():
    episode = Episode(guest="Jane Doe", content="Hello world", path="/fake/jane-doe")

    results = search_corpus([episode], ["world"])

    assert results[0].timestamp is None


def test_search_corpus_keeps_surrounding_whitespace_in_terms():
    # Arrange
    episode = Episode(guest="Jane Doe", content="Email is brAIn food", path="/fake/jane-doe")
    other = Episode(guest="Shreyas Doshi", content="We use AI daily", path="/fake/shreyas")

    # Act
    results = search_corpus([episode, other], [" AI "])

    # Assert
    assert [result.guest for result in results] == ["Shreyas Doshi"]
