"""Collect YouTube transcripts for a set of videos"""

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from youtube_transcript_api import YouTubeTranscriptApi

from .config import config
from .models import TranscriptSample, VideoRef

logger = logging.getLogger(__name__)


def normalize_transcript(segments) -> str:
    """Join segment texts with spaces and collapse whitespace runs"""
    combined = " ".join(getattr(segment, "text", None) or "" for segment in segments)
    return re.sub(r"\s+", " ", combined).strip()


class TranscriptExtractor:
    """Fetch and normalize transcripts, tolerating per-video failures"""

    def __init__(
        self,
        language: Optional[str] = None,
        max_workers: Optional[int] = None,
    ):
        self.language = language or config.transcript_language
        self.max_workers = max_workers or config.max_concurrent_transcripts
        self.model_chars = config.model_transcript_chars
        self.excerpt_chars = config.excerpt_chars
        self.api = YouTubeTranscriptApi()

    def collect_samples(self, videos: list[VideoRef]) -> list[TranscriptSample]:
        """
        Fetch transcripts for all videos concurrently

        Args:
            videos: Videos to sample, in display order

        Returns:
            Samples for the videos that produced a usable transcript, in the
            same relative order as the input. May be empty.
        """
        if not videos:
            return []

        workers = max(1, min(self.max_workers, len(videos)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(self.get_sample, videos))

        samples = [sample for sample in results if sample is not None]
        logger.info(f"Collected {len(samples)}/{len(videos)} transcripts")
        return samples

    def get_sample(self, video: VideoRef) -> Optional[TranscriptSample]:
        """
        Build a transcript sample for one video

        Returns:
            TranscriptSample or None if the transcript is missing, empty or
            could not be fetched
        """
        try:
            transcript = self.api.fetch(video.video_id, languages=[self.language])
        except Exception as e:
            logger.warning(f"Could not fetch transcript for {video.video_id}: {e}")
            return None

        if not transcript:
            logger.info(f"Empty transcript for video {video.video_id}")
            return None

        text = normalize_transcript(transcript)
        if not text:
            logger.info(f"Blank transcript for video {video.video_id}")
            return None

        return TranscriptSample(
            video_id=video.video_id,
            title=video.title,
            transcript_for_model=text[: self.model_chars],
            snippet_excerpt=text[: self.excerpt_chars],
        )
