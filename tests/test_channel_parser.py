"""
Tests for channel URL classification.
"""

import pytest

from style_scripter.channel_parser import extract_channel_identifier
from style_scripter.models import ChannelCustomName, ChannelHandle, ChannelIdRef


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://www.youtube.com/@mkbhd", ChannelHandle(value="@mkbhd")),
        ("https://www.youtube.com/@mkbhd/videos", ChannelHandle(value="@mkbhd")),
        ("https://youtube.com/@", ChannelHandle(value="@")),
        (
            "https://www.youtube.com/channel/UCBJycsmduvYEL83R_U4JriQ",
            ChannelIdRef(value="UCBJycsmduvYEL83R_U4JriQ"),
        ),
        ("https://www.youtube.com/c/LinusTechTips", ChannelCustomName(value="LinusTechTips")),
        ("https://www.youtube.com/user/marquesbrownlee", ChannelCustomName(value="marquesbrownlee")),
        ("https://m.youtube.com/@handle?si=abc", ChannelHandle(value="@handle")),
    ],
)
def test_recognized_urls(url, expected):
    assert extract_channel_identifier(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/",
        "https://www.youtube.com",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/channel",
        "https://www.youtube.com/c/",
        "https://www.youtube.com/user",
        "not a url",
        "www.youtube.com/@handle",
        "https://www.youtube.com/c%2Ffoo",
        "https://www.youtube.com/%40foo",
        "",
    ],
)
def test_unrecognized_urls(url):
    assert extract_channel_identifier(url) is None


def test_percent_encoded_handle_is_decoded():
    identifier = extract_channel_identifier("https://www.youtube.com/@caf%C3%A9")
    assert identifier == ChannelHandle(value="@café")


def test_identifier_kind_tags():
    assert extract_channel_identifier("https://youtube.com/@x").kind == "handle"
    assert extract_channel_identifier("https://youtube.com/channel/UC1").kind == "id"
    assert extract_channel_identifier("https://youtube.com/user/x").kind == "custom"


def test_encoded_values_are_decoded_after_classification():
    assert extract_channel_identifier("https://www.youtube.com/c/caf%C3%A9") == ChannelCustomName(
        value="café"
    )
    assert extract_channel_identifier("https://www.youtube.com/@a%2Fb") == ChannelHandle(value="@a/b")
