"""Video ID extraction from user-supplied identifiers."""

import re
from typing import Optional

_VIDEO_ID_RE = re.compile(r"^[a-zA-Z0-9_-]{11}$")
_VIDEO_URL_RE = re.compile(
    r"(?:v=|youtu\.be/|/shorts/|/embed/|/live/|/v/)([a-zA-Z0-9_-]{11})"
)


def extract_video_id(identifier: Optional[str]) -> Optional[str]:
    """Return the 11-character video ID in a bare ID or URL, else None."""
    if not identifier or not identifier.strip():
        return None
    identifier = identifier.strip()
    if _VIDEO_ID_RE.match(identifier):
        return identifier
    match = _VIDEO_URL_RE.search(identifier)
    return match.group(1) if match else None
