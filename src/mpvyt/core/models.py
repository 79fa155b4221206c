"""Data models for resolved streams and selections."""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class StreamDescriptor:
    """A playable stream URL and its bitrate."""
    url: str
    bitrate: int  # bits per second


@dataclass(frozen=True)
class VideoStream(StreamDescriptor):
    """A video-only adaptive stream."""
    quality: str  # e.g., "720p"


@dataclass(frozen=True)
class AudioStream(StreamDescriptor):
    """An audio-only adaptive stream tagged with its language."""
    language: str  # e.g., "en", "und"
    name: str
    is_default: bool = False


@dataclass(frozen=True)
class PlayerData:
    """Everything needed to launch playback for one video."""
    title: str
    thumbnail_url: Optional[str] = None
    videos: Tuple[VideoStream, ...] = field(default_factory=tuple)
    audios: Tuple[AudioStream, ...] = field(default_factory=tuple)

    def with_thumbnail(self, thumbnail_url: Optional[str]) -> "PlayerData":
        return replace(self, thumbnail_url=thumbnail_url)


@dataclass(frozen=True)
class VideoSelection:
    """A video stream played together with an external audio track."""
    video: VideoStream
    audio: AudioStream


@dataclass(frozen=True)
class AudioSelection:
    """Audio-only playback."""
    audio: AudioStream


StreamSelection = Union[VideoSelection, AudioSelection]
