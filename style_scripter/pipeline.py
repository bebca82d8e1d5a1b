"""End-to-end channel style analysis and script generation"""

import logging

from .channel_parser import extract_channel_identifier
from .errors import ChannelNotFoundError, NoTranscriptsError, UnsupportedChannelUrlError
from .generator import ScriptSynthesizer, StyleExtractor
from .models import (
    AnalysisRequest,
    AnalysisResponse,
    ResolvedChannel,
    SampledTranscript,
    StyleProfile,
    StyleSummary,
    TranscriptSample,
)
from .transcript_extractor import TranscriptExtractor
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


def assemble_response(
    channel: ResolvedChannel,
    profile: StyleProfile,
    script: str,
    samples: list[TranscriptSample],
) -> AnalysisResponse:
    return AnalysisResponse(
        channel_title=channel.channel_title,
        style_summary=StyleSummary(
            voice_tone=profile.voice_tone,
            narrative_structure=profile.narrative_structure,
            recurring_devices=profile.recurring_devices,
            pacing=profile.pacing,
            audience_engagement=profile.audience_engagement,
        ),
        writing_guidelines=list(profile.writing_guidelines),
        generated_script=script,
        sampled_transcripts=[
            SampledTranscript(
                video_id=sample.video_id,
                title=sample.title,
                excerpt=sample.snippet_excerpt,
            )
            for sample in samples
        ],
    )


class StyleScriptPipeline:
    """
    One request's worth of work: resolve, sample, analyze, write

    All collaborators are built from the request's own credentials and
    discarded afterwards.
    """

    def __init__(self, request: AnalysisRequest):
        self.request = request

    def run(self) -> AnalysisResponse:
        """
        Execute the pipeline

        Raises:
            UnsupportedChannelUrlError: channel URL not recognized
            ChannelNotFoundError: channel could not be resolved
            NoTranscriptsError: none of the recent uploads had a transcript
            StyleScriptError: any upstream failure
        """
        request = self.request

        identifier = extract_channel_identifier(request.channel_url)
        if identifier is None:
            raise UnsupportedChannelUrlError()

        logger.info(f"Resolving {identifier.kind} channel reference {identifier.value}")
        youtube = YouTubeClient(request.youtube_api_key)
        channel = youtube.resolve_channel(identifier, request.video_count)
        if channel is None:
            raise ChannelNotFoundError()

        samples = TranscriptExtractor().collect_samples(channel.videos)
        if not samples:
            raise NoTranscriptsError()

        profile = StyleExtractor(request.open_ai_key).extract_style(
            channel.channel_title, samples
        )
        logger.info(
            f"Extracted style for {channel.channel_title} "
            f"({len(profile.writing_guidelines)} guidelines)"
        )

        script = ScriptSynthesizer(request.open_ai_key).write_script(
            channel.channel_title, request.topic, profile
        )
        logger.info(f"Generated script of {len(script)} characters on '{request.topic}'")

        return assemble_response(channel, profile, script, samples)


def run_pipeline(request: AnalysisRequest) -> AnalysisResponse:
    return StyleScriptPipeline(request).run()
