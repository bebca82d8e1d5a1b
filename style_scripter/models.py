"""Data models for channel style analysis"""

import re
from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

MAX_VIDEO_COUNT = 8


class ChannelIdRef(BaseModel):
    """/channel/<id> reference"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["id"] = "id"
    value: str


class ChannelHandle(BaseModel):
    """/@handle reference"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["handle"] = "handle"
    value: str


class ChannelCustomName(BaseModel):
    """Legacy /c/<name> or /user/<name> reference"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["custom"] = "custom"
    value: str


ChannelIdentifier = Annotated[
    Union[ChannelIdRef, ChannelHandle, ChannelCustomName],
    Field(discriminator="kind"),
]


class VideoRef(BaseModel):
    """A recent upload returned by the channel video search"""

    video_id: str = Field(min_length=1)
    title: str = "Untitled video"
    published_at: Optional[datetime] = None


class ResolvedChannel(BaseModel):
    """Channel id, title and newest uploads"""

    channel_id: str
    channel_title: str
    videos: list[VideoRef] = Field(default_factory=list, max_length=MAX_VIDEO_COUNT)


class TranscriptSample(BaseModel):
    """Normalized transcript of one video"""

    video_id: str
    title: str
    transcript_for_model: str
    snippet_excerpt: str


class StyleProfile(BaseModel):
    """Writing style distilled from a channel's transcripts"""

    voice_tone: str = ""
    narrative_structure: str = ""
    recurring_devices: str = ""
    pacing: str = ""
    audience_engagement: str = ""
    writing_guidelines: list[str] = Field(default_factory=list)


class CamelModel(BaseModel):
    """Base for wire models exchanged with the UI in camelCase"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisRequest(CamelModel):
    """Body of POST /api/analyze"""

    channel_url: str = Field(min_length=1, strict=True)
    topic: str = Field(min_length=4, strict=True)
    youtube_api_key: str = Field(min_length=10, strict=True)
    open_ai_key: str = Field(min_length=10, strict=True)
    video_count: int = Field(ge=1, le=MAX_VIDEO_COUNT)

    @field_validator("video_count", mode="before")
    @classmethod
    def reject_non_numeric_count(cls, value):
        # JSON 3.0 is the integer 3; "3" and true are not
        if isinstance(value, (str, bool)):
            raise ValueError("videoCount must be a number")
        return value


class StyleSummary(CamelModel):
    voice_tone: str
    narrative_structure: str
    recurring_devices: str
    pacing: str
    audience_engagement: str


class SampledTranscript(CamelModel):
    video_id: str
    title: str
    excerpt: str


class AnalysisResponse(CamelModel):
    """Final payload returned to the caller"""

    channel_title: str
    style_summary: StyleSummary
    writing_guidelines: list[str]
    generated_script: str
    sampled_transcripts: list[SampledTranscript]


def split_paragraphs(script: str) -> list[str]:
    """Split a script into display paragraphs on blank lines"""
    return [
        paragraph.strip()
        for paragraph in re.split(r"\n\s*\n", script)
        if paragraph.strip()
    ]
