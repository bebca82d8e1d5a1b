"""
Configuration for pytest tests.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from style_scripter.models import TranscriptSample, VideoRef


def chat_completion(content):
    """Build an object shaped like an OpenAI chat completion response."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


def snippets(*texts):
    """Build transcript snippets shaped like youtube_transcript_api's."""
    return [SimpleNamespace(text=text, start=0.0, duration=1.0) for text in texts]


@pytest.fixture
def mock_youtube():
    """Patch googleapiclient's build and return the fake YouTube resource."""
    with patch("style_scripter.youtube_client.build") as mock_build:
        youtube = MagicMock()
        mock_build.return_value = youtube
        yield youtube


@pytest.fixture
def mock_transcript_api():
    """Patch YouTubeTranscriptApi and return the fake instance."""
    with patch("style_scripter.transcript_extractor.YouTubeTranscriptApi") as mock_api_class:
        yield mock_api_class.return_value


@pytest.fixture
def mock_openai():
    """Patch the OpenAI client class and return the fake client."""
    with patch("style_scripter.generator.OpenAI") as mock_client_class:
        yield mock_client_class.return_value


@pytest.fixture
def videos():
    return [
        VideoRef(video_id="vid1", title="First"),
        VideoRef(video_id="vid2", title="Second"),
        VideoRef(video_id="vid3", title="Third"),
    ]


@pytest.fixture
def samples():
    return [
        TranscriptSample(
            video_id="vid1",
            title="First",
            transcript_for_model="So here's the thing about money.",
            snippet_excerpt="So here's the thing about money.",
        ),
        TranscriptSample(
            video_id="vid2",
            title="Second",
            transcript_for_model="Nobody expected the market to turn.",
            snippet_excerpt="Nobody expected the market to turn.",
        ),
    ]
