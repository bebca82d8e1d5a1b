"""
Tests for transcript aggregation.
"""

from youtube_transcript_api import TranscriptsDisabled

from conftest import snippets
from style_scripter.models import VideoRef
from style_scripter.transcript_extractor import TranscriptExtractor, normalize_transcript


def test_normalize_collapses_whitespace():
    text = normalize_transcript(snippets("  Hello\nthere ", "", "general\t\tKenobi  "))
    assert text == "Hello there general Kenobi"


def test_normalize_tolerates_missing_text():
    assert normalize_transcript(snippets(None, "   ")) == ""


def test_collects_all_samples_in_order(mock_transcript_api, videos):
    transcripts = {
        "vid1": snippets("one", "two"),
        "vid2": snippets("three"),
        "vid3": snippets("four  five"),
    }
    mock_transcript_api.fetch.side_effect = lambda video_id, languages: transcripts[video_id]

    samples = TranscriptExtractor().collect_samples(videos)

    assert [sample.video_id for sample in samples] == ["vid1", "vid2", "vid3"]
    assert samples[0].transcript_for_model == "one two"
    assert samples[0].title == "First"
    assert samples[2].snippet_excerpt == "four five"


def test_requests_configured_language(mock_transcript_api):
    mock_transcript_api.fetch.return_value = snippets("hola")

    TranscriptExtractor(language="es").collect_samples([VideoRef(video_id="v", title="t")])

    mock_transcript_api.fetch.assert_called_once_with("v", languages=["es"])


def test_failures_and_empty_transcripts_are_dropped(mock_transcript_api, videos):
    def fetch(video_id, languages):
        if video_id == "vid1":
            raise TranscriptsDisabled(video_id)
        if video_id == "vid2":
            return snippets("   ", "\n")
        return snippets("survivor")

    mock_transcript_api.fetch.side_effect = fetch

    samples = TranscriptExtractor().collect_samples(videos)

    assert [sample.video_id for sample in samples] == ["vid3"]


def test_preserves_relative_order_of_survivors(mock_transcript_api):
    videos = [VideoRef(video_id=f"v{i}", title=f"Video {i}") for i in range(6)]

    def fetch(video_id, languages):
        if video_id in ("v1", "v4"):
            return []
        return snippets(f"text for {video_id}")

    mock_transcript_api.fetch.side_effect = fetch

    samples = TranscriptExtractor(max_workers=3).collect_samples(videos)

    assert [sample.video_id for sample in samples] == ["v0", "v2", "v3", "v5"]


def test_all_failing_returns_empty_list(mock_transcript_api, videos):
    mock_transcript_api.fetch.side_effect = RuntimeError("network down")

    assert TranscriptExtractor().collect_samples(videos) == []


def test_no_videos_returns_empty_list(mock_transcript_api):
    assert TranscriptExtractor().collect_samples([]) == []
    mock_transcript_api.fetch.assert_not_called()


def test_truncates_for_model_and_excerpt(mock_transcript_api):
    long_text = "word " * 2000
    mock_transcript_api.fetch.return_value = snippets(long_text)

    samples = TranscriptExtractor().collect_samples([VideoRef(video_id="v", title="t")])

    assert len(samples[0].transcript_for_model) == 3000
    assert len(samples[0].snippet_excerpt) == 320
    assert samples[0].transcript_for_model.startswith(samples[0].snippet_excerpt)
