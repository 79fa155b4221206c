"""Shared fixtures for mpvyt tests."""

import pytest
from unittest.mock import Mock

from mpvyt.core.models import AudioStream, PlayerData, VideoStream


def make_format(itag, bitrate, mime, url=None):
    return {
        "itag": itag,
        "bitrate": bitrate,
        "mimeType": mime,
        "url": url or f"https://rr.googlevideo.com/videoplayback?itag={itag}&br={bitrate}",
    }


def video_format(itag, bitrate, url=None):
    return make_format(itag, bitrate, 'video/mp4; codecs="avc1.640028"', url)


def audio_format(itag, bitrate, url=None):
    return make_format(itag, bitrate, 'audio/webm; codecs="opus"', url)


def audio_track(track_id, language=None, name=None, default=False):
    track = {"audioTrackId": track_id, "audioIsDefault": default}
    if language is not None:
        track["languageCode"] = language
    if name is not None:
        track["displayName"] = name
    return track


def player_response(formats=None, tracks=None, status="OK", reason=None,
                    title="Test Video", live=False):
    body = {
        "playabilityStatus": {"status": status},
        "videoDetails": {"title": title, "isLiveContent": live},
        "streamingData": {"adaptiveFormats": formats if formats is not None else [
            video_format(137, 3000000),
            audio_format(140, 128000),
        ]},
    }
    if reason is not None:
        body["playabilityStatus"]["reason"] = reason
    if tracks is not None:
        body["captions"] = {"playerCaptionsTracklistRenderer": {"audioTracks": tracks}}
    return body


def http_response(status_code=200, body=None):
    resp = Mock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 400
    resp.json.return_value = body
    return resp


@pytest.fixture
def videos():
    return (
        VideoStream(url="https://v/1080", bitrate=3000000, quality="1080p"),
        VideoStream(url="https://v/720", bitrate=1500000, quality="720p"),
        VideoStream(url="https://v/360", bitrate=500000, quality="360p"),
    )


@pytest.fixture
def audios():
    return (
        AudioStream(url="https://a/de", bitrate=130000, language="de", name="Deutsch"),
        AudioStream(url="https://a/en", bitrate=128000, language="en-US", name="English (US)"),
        AudioStream(url="https://a/orig", bitrate=160000, language="und", name="Original"),
    )


@pytest.fixture
def player_data(videos, audios):
    return PlayerData(title="Test Video", thumbnail_url="https://img/max.jpg",
                      videos=videos, audios=audios)
