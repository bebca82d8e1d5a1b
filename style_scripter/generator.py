"""Style extraction and script synthesis with a chat model"""

import json
import logging
from typing import Optional

from openai import OpenAI

from .config import config
from .errors import JSONExtractionError, ModelResponseError, ScriptGenerationError
from .models import StyleProfile, TranscriptSample

logger = logging.getLogger(__name__)

STYLE_SYSTEM_PROMPT = (
    "You are a narrative analyst who reverse-engineers the writing style of "
    "YouTube storytellers. You only speak JSON when instructed."
)

SCRIPT_SYSTEM_PROMPT = (
    "You are a senior scriptwriter hired to mimic the target channel's "
    "storytelling voice exactly."
)

# JSON keys requested from the model -> StyleProfile fields
STYLE_FIELDS = {
    "voiceTone": "voice_tone",
    "narrativeStructure": "narrative_structure",
    "recurringDevices": "recurring_devices",
    "pacing": "pacing",
    "audienceEngagement": "audience_engagement",
}


def parse_json_object(text: str) -> dict:
    """
    Parse the JSON object embedded in free-form model output

    Takes everything from the first "{" to the last "}" and parses it.

    Raises:
        JSONExtractionError: No object delimiters, or the slice is not valid JSON
    """
    start = text.find("{")
    end = text.rfind("}")

    if start == -1 or end == -1 or end <= start:
        raise JSONExtractionError("Model response missing JSON object.")

    try:
        parsed = json.loads(text[start : end + 1])
    except ValueError as e:
        raise JSONExtractionError("Model response was not valid JSON.") from e

    if not isinstance(parsed, dict):
        raise JSONExtractionError("Model response was not valid JSON.")
    return parsed


def descriptor_text(value) -> str:
    """Flatten a style descriptor the model may have returned as a list or object"""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "; ".join(descriptor_text(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def build_transcript_digest(samples: list[TranscriptSample]) -> str:
    return "\n\n".join(
        f"### {sample.title} ({sample.video_id})\n{sample.transcript_for_model}"
        for sample in samples
    )


class ChatStage:
    """Single chat-completion call against an OpenAI-compatible API"""

    stage = ""

    def __init__(self, api_key: str, provider: Optional[str] = None, model: Optional[str] = None):
        if not api_key:
            raise ValueError("OpenAI API key is required")

        self.provider = provider or config.ai_provider
        self.model = model or config.model_for(self.stage)

        if self.provider == "openai":
            self.client = OpenAI(api_key=api_key, max_retries=0)
        elif self.provider == "deepseek":
            # DeepSeek uses OpenAI-compatible API
            self.client = OpenAI(
                api_key=api_key,
                base_url="https://api.deepseek.com",
                max_retries=0,
            )
        else:
            raise ValueError(f"Unsupported AI provider: {self.provider}")

    def _complete(self, system_prompt: str, user_prompt: str, temperature: float) -> str:
        logger.info(f"Calling {self.provider} API with model {self.model} ({self.stage})...")
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=temperature,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


class StyleExtractor(ChatStage):
    """Reduce transcript samples to a StyleProfile"""

    stage = "style"

    def extract_style(self, channel_title: str, samples: list[TranscriptSample]) -> StyleProfile:
        """
        Ask the model for the channel's writing style

        Args:
            channel_title: Channel title, used as prompt context
            samples: Transcript samples to analyze

        Returns:
            StyleProfile with at most `config.max_guidelines` guidelines

        Raises:
            ModelResponseError: Empty output, no JSON object, or guidelines
                that are not a list
        """
        user_prompt = (
            f'Study these transcript excerpts from the YouTube channel "{channel_title}". '
            "Summarize the writing style as JSON using the keys: voiceTone (string), "
            "narrativeStructure (string), recurringDevices (string), pacing (string), "
            "audienceEngagement (string), writingGuidelines (array of 6 concise bullet "
            "strings). Keep each string under 80 words. Transcripts:\n\n"
            f"{build_transcript_digest(samples)}"
        )

        content = self._complete(STYLE_SYSTEM_PROMPT, user_prompt, config.style_temperature)
        if not content.strip():
            raise ModelResponseError("Failed to read analysis output.")

        logger.debug(f"Raw style payload preview: {content[:200]}...")
        payload = parse_json_object(content)

        guidelines = payload.get("writingGuidelines")
        if not isinstance(guidelines, list):
            raise ModelResponseError("Style payload missing writing guidelines.")

        return StyleProfile(
            writing_guidelines=[
                item if isinstance(item, str) else json.dumps(item)
                for item in guidelines[: config.max_guidelines]
            ],
            **{
                field: descriptor_text(payload[key])
                for key, field in STYLE_FIELDS.items()
                if payload.get(key) is not None
            },
        )


class ScriptSynthesizer(ChatStage):
    """Write a new script in a channel's style"""

    stage = "script"

    def write_script(self, channel_title: str, topic: str, profile: StyleProfile) -> str:
        """
        Generate a script on `topic` that follows `profile`

        Returns:
            Trimmed script text; paragraphs are separated by blank lines

        Raises:
            ScriptGenerationError: The model returned nothing usable
        """
        user_prompt = (
            f"Channel: {channel_title}\n"
            f"Topic: {topic}\n"
            f"Voice Tone: {profile.voice_tone}\n"
            f"Narrative Structure: {profile.narrative_structure}\n"
            f"Recurring Devices: {profile.recurring_devices}\n"
            f"Pacing: {profile.pacing}\n"
            f"Audience Engagement: {profile.audience_engagement}\n"
            f"Guidelines: {'; '.join(profile.writing_guidelines)}\n\n"
            "Write a 5-7 paragraph YouTube script that follows this structure:\n"
            "1. Hook (1 short paragraph)\n"
            "2. Narrative build with vivid storytelling and data callouts (3-4 paragraphs)\n"
            "3. Engaging takeaway and CTA (1-2 paragraphs).\n"
            "Keep total word count under 600.\n"
            "Return plain text with blank lines between paragraphs."
        )

        script = self._complete(SCRIPT_SYSTEM_PROMPT, user_prompt, config.script_temperature).strip()
        if not script:
            raise ScriptGenerationError("Script generation failed.")
        return script
