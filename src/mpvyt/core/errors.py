"""Exceptions raised while resolving and selecting streams."""

from typing import Optional


class MpvYtError(Exception):
    """Base class for all user-visible errors."""


class InvalidIdentifier(MpvYtError):
    def __init__(self, identifier: str):
        super().__init__(f"Invalid YouTube URL or Video ID: '{identifier}'")
        self.identifier = identifier


class RemoteRequestFailed(MpvYtError):
    """Transport or HTTP level failure."""

    def __init__(self, status_code: Optional[int] = None, detail: Optional[str] = None):
        if status_code is not None:
            message = f"API request failed with status code: {status_code}"
        else:
            message = f"API request failed: {detail or 'network error'}"
        super().__init__(message)
        self.status_code = status_code


class Unplayable(MpvYtError):
    """The upstream service refused to play the video."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class IncompleteResponse(MpvYtError):
    def __init__(self, message: str = "Incomplete video data received from API."):
        super().__init__(message)


class LiveStreamUnsupported(MpvYtError):
    def __init__(self):
        super().__init__("Live streams are not supported.")


class NoAudioAvailable(MpvYtError):
    def __init__(self):
        super().__init__("No audio streams available for this video.")


class InvalidSelectionInput(MpvYtError):
    """Interactive input that does not name an offered option."""

    def __init__(self, raw_input: str):
        super().__init__(f"Invalid selection: '{raw_input}'")
        self.raw_input = raw_input


class MetadataFetchError(MpvYtError):
    """Final failure of a metadata fetch, after any profile retry."""

    def __init__(self, message: str, cause: Optional[MpvYtError] = None):
        super().__init__(message)
        self.cause = cause
