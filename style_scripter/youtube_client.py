"""YouTube Data API v3 client"""

import logging
from datetime import datetime
from typing import Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .errors import YouTubeAPIError
from .models import (
    MAX_VIDEO_COUNT,
    ChannelCustomName,
    ChannelHandle,
    ChannelIdentifier,
    ChannelIdRef,
    ResolvedChannel,
    VideoRef,
)

logger = logging.getLogger(__name__)


class YouTubeClient:
    """Client for YouTube Data API v3, scoped to one caller's API key"""

    def __init__(self, api_key: str):
        if not api_key:
            raise ValueError("YouTube API key is required")

        self.youtube = build("youtube", "v3", developerKey=api_key, cache_discovery=False)

    def resolve_channel(
        self, identifier: Optional[ChannelIdentifier], video_count: int
    ) -> Optional[ResolvedChannel]:
        """
        Resolve a channel identifier and list its most recent uploads

        Args:
            identifier: Parsed channel identifier
            video_count: Number of recent uploads requested (capped at 8)

        Returns:
            ResolvedChannel, or None if the channel could not be found

        Raises:
            YouTubeAPIError: Any API call failed
        """
        channel_id = self.resolve_channel_id(identifier)
        if not channel_id:
            return None

        channel_title = self.get_channel_title(channel_id)
        videos = self.get_latest_videos(channel_id, video_count)

        logger.info(
            f"Resolved channel {channel_id} ({channel_title}) with {len(videos)} recent videos"
        )
        return ResolvedChannel(
            channel_id=channel_id,
            channel_title=channel_title,
            videos=videos,
        )

    def resolve_channel_id(self, identifier: Optional[ChannelIdentifier]) -> Optional[str]:
        """
        Map a channel identifier to a channel ID

        Explicit IDs are trusted as-is. Handles go straight to channel search.
        Custom names try the legacy username lookup first and fall back to
        channel search only when that lookup succeeds with no items.

        Returns:
            Channel ID or None if not found
        """
        if identifier is None:
            return None

        if isinstance(identifier, ChannelIdRef):
            return identifier.value

        if isinstance(identifier, ChannelHandle):
            query = identifier.value[1:] if identifier.value.startswith("@") else identifier.value
            return self._search_channel_id(query, "Unable to resolve channel handle.")

        if isinstance(identifier, ChannelCustomName):
            response = self._execute(
                self.youtube.channels().list(
                    part="id", forUsername=identifier.value
                ),
                "Unable to resolve custom channel URL.",
            )
            items = response.get("items") or []
            if items:
                return items[0].get("id")

            logger.info(
                f"No legacy username match for {identifier.value}, falling back to search"
            )
            return self._search_channel_id(
                identifier.value, "Unable to resolve custom channel URL."
            )

        return None

    def get_channel_title(self, channel_id: str) -> str:
        """Fetch the channel title, defaulting to "Channel" when absent"""
        response = self._execute(
            self.youtube.channels().list(part="snippet", id=channel_id),
            "Failed to fetch channel metadata.",
        )
        items = response.get("items") or []
        if items:
            title = (items[0].get("snippet") or {}).get("title")
            if title:
                return title
        return "Channel"

    def get_latest_videos(self, channel_id: str, max_results: int = 3) -> list[VideoRef]:
        """
        Get the most recent uploads of a channel, newest first

        Args:
            channel_id: YouTube channel ID
            max_results: Requested number of videos (capped at 8)

        Returns:
            List of VideoRef objects; items without a video ID are dropped
        """
        response = self._execute(
            self.youtube.search().list(
                part="snippet",
                channelId=channel_id,
                order="date",
                type="video",
                maxResults=min(max_results, MAX_VIDEO_COUNT),
            ),
            "Failed to fetch recent videos. Check your API key quota.",
        )

        videos = []
        for item in response.get("items") or []:
            video_id = (item.get("id") or {}).get("videoId")
            if not video_id:
                continue
            snippet = item.get("snippet") or {}
            videos.append(
                VideoRef(
                    video_id=video_id,
                    title=snippet.get("title") or "Untitled video",
                    published_at=self._parse_timestamp(snippet.get("publishedAt")),
                )
            )

        return videos[: min(max_results, MAX_VIDEO_COUNT)]

    def _search_channel_id(self, query: str, failure_message: str) -> Optional[str]:
        """Channel-type search returning the first hit's channel ID"""
        response = self._execute(
            self.youtube.search().list(
                part="snippet", q=query, type="channel", maxResults=1
            ),
            failure_message,
        )
        items = response.get("items") or []
        if not items:
            return None
        return (items[0].get("id") or {}).get("channelId")

    @staticmethod
    def _execute(request, failure_message: str) -> dict:
        """
        Execute one API request

        Raises:
            YouTubeAPIError: With failure_message on a non-success status, or
                with the upstream message when the body carries an error
        """
        try:
            response = request.execute()
        except HttpError as e:
            logger.error(f"YouTube API request failed ({e.resp.status}): {e.reason}")
            raise YouTubeAPIError(failure_message) from e

        error_message = (response.get("error") or {}).get("message")
        if error_message:
            logger.error(f"YouTube API returned an error payload: {error_message}")
            raise YouTubeAPIError(error_message)

        return response

    @staticmethod
    def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
        if not value:
            return None
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
