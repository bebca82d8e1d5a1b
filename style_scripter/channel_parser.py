"""Parse YouTube channel URLs into channel identifiers"""

from typing import Optional
from urllib.parse import unquote, urlsplit

from .models import ChannelCustomName, ChannelHandle, ChannelIdentifier, ChannelIdRef


def extract_channel_identifier(url: str) -> Optional[ChannelIdentifier]:
    """
    Classify a channel URL by its first path segment

    Supported forms:
        https://www.youtube.com/@handle
        https://www.youtube.com/channel/UCxxxxxxxxxxxxxxxxxxxxxx
        https://www.youtube.com/c/CustomName
        https://www.youtube.com/user/LegacyUser

    Args:
        url: Raw channel URL

    Returns:
        ChannelIdRef, ChannelHandle or ChannelCustomName, or None if the URL
        cannot be parsed or does not point at a channel
    """
    try:
        parsed = urlsplit(url.strip())
    except (AttributeError, ValueError):
        return None

    if not parsed.scheme or not parsed.netloc:
        return None

    # Classify on the raw path; only the extracted values are decoded
    path = parsed.path
    segments = [segment.strip() for segment in path.split("/")]
    segments = [segment for segment in segments if segment]

    if not segments:
        return None

    first = segments[0]

    if first.startswith("@"):
        return ChannelHandle(value=unquote(first))

    if first == "channel" and len(segments) > 1:
        return ChannelIdRef(value=unquote(segments[1]))

    if first in ("c", "user") and len(segments) > 1:
        return ChannelCustomName(value=unquote(segments[1]))

    if path.startswith("/@"):
        return ChannelHandle(value=unquote(path[1:]))

    return None
