"""Channel Style Scripter MCP Server - FastMCP Implementation

Exposes the style analysis pipeline as an MCP tool.
Supports both stdio and Streamable HTTP transports.
"""

import json
import logging
from typing import Optional

from fastmcp import FastMCP
from pydantic import ValidationError

from .config import config
from .errors import status_for_error
from .models import AnalysisRequest, split_paragraphs
from .pipeline import run_pipeline

# Configure logging
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastMCP server
mcp = FastMCP(name=config.mcp_server_name)


@mcp.tool()
def generate_style_script(
    channel_url: str,
    topic: str,
    video_count: int = 3,
    youtube_api_key: Optional[str] = None,
    openai_api_key: Optional[str] = None,
) -> str:
    """Write a new YouTube script in the style of an existing channel.

    Features:
    - Resolves @handle, /channel/, /c/ and /user/ channel links
    - Samples transcripts from the channel's most recent uploads
    - Distills voice, structure, pacing and writing guidelines
    - Writes a script on the requested topic in that style

    Args:
        channel_url: YouTube channel URL (e.g., 'https://www.youtube.com/@mkbhd')
        topic: Topic of the new script
        video_count: Number of recent uploads to sample (1-8, default: 3)
        youtube_api_key: YouTube Data API key (default: YOUTUBE_API_KEY)
        openai_api_key: OpenAI API key (default: OPENAI_API_KEY)

    Returns:
        JSON string with the style summary, guidelines and generated script
    """
    try:
        request = AnalysisRequest(
            channel_url=channel_url,
            topic=topic,
            youtube_api_key=youtube_api_key or config.youtube_api_key,
            open_ai_key=openai_api_key or config.openai_api_key,
            video_count=video_count,
        )
    except ValidationError:
        return json.dumps(
            {"error": "Please fill in every field with valid values.", "status": 400}
        )

    logger.info(f"Generating style script for {channel_url} on '{topic}'")

    try:
        result = run_pipeline(request)
    except Exception as e:
        status_code, message = status_for_error(e)
        logger.error(f"Error generating style script: {e}", exc_info=status_code >= 500)
        return json.dumps({"error": message, "status": status_code})

    response = result.model_dump(by_alias=True)
    response["scriptParagraphs"] = split_paragraphs(result.generated_script)
    return json.dumps(response, indent=2)


# Startup message
missing_keys = config.validate_keys()
if missing_keys:
    logger.warning(
        f"Missing {', '.join(missing_keys)}; callers must pass keys to generate_style_script"
    )
logger.info(f"Channel Style Scripter MCP Server initialized ({config.mcp_server_name})")
