"""Core functionality for mpvyt."""

from .models import (
    StreamDescriptor,
    VideoStream,
    AudioStream,
    PlayerData,
    VideoSelection,
    AudioSelection,
    StreamSelection,
)
from .errors import (
    MpvYtError,
    InvalidIdentifier,
    RemoteRequestFailed,
    Unplayable,
    IncompleteResponse,
    LiveStreamUnsupported,
    NoAudioAvailable,
    InvalidSelectionInput,
    MetadataFetchError,
)
from .identifier import extract_video_id
from .parser import parse_streams
from .youtube_client import ClientProfile, YouTubeClient, fetch_player_data
from .selection import Decision, DecisionReason, SelectionResult, select_stream

__all__ = [
    "StreamDescriptor",
    "VideoStream",
    "AudioStream",
    "PlayerData",
    "VideoSelection",
    "AudioSelection",
    "StreamSelection",
    "MpvYtError",
    "InvalidIdentifier",
    "RemoteRequestFailed",
    "Unplayable",
    "IncompleteResponse",
    "LiveStreamUnsupported",
    "NoAudioAvailable",
    "InvalidSelectionInput",
    "MetadataFetchError",
    "extract_video_id",
    "parse_streams",
    "ClientProfile",
    "YouTubeClient",
    "fetch_player_data",
    "Decision",
    "DecisionReason",
    "SelectionResult",
    "select_stream",
]
