"""Playback handoff to mpv."""

import logging
import os
import shutil
import subprocess
from typing import List, Optional

from .errors import MpvYtError
from .models import PlayerData, StreamSelection, VideoSelection

logger = logging.getLogger(__name__)

DEFAULT_MPV = "mpv.exe" if os.name == 'nt' else "mpv"


class PlayerLaunchError(MpvYtError):
    """mpv could not be started."""


def is_available(executable: str = DEFAULT_MPV) -> bool:
    return shutil.which(executable) is not None


def build_command(data: PlayerData, selection: StreamSelection, executable: str = DEFAULT_MPV) -> List[str]:
    """Build the mpv argument list for a selection."""
    cmd = [
        executable,
        f"--title={data.title}",
        "--force-media-title= ",
        "--keep-open=yes",
    ]

    if isinstance(selection, VideoSelection):
        cmd += [selection.video.url, f"--audio-file={selection.audio.url}"]
    elif data.thumbnail_url:
        # Show the thumbnail as a still image for the length of the audio
        cmd += [
            data.thumbnail_url,
            f"--audio-file={selection.audio.url}",
            "--image-display-duration=inf",
            "--force-window=immediate",
            "--video-unscaled=yes",
            "--terminal=no",
        ]
    else:
        cmd += [selection.audio.url, "--force-window"]
    return cmd


def describe(data: PlayerData, selection: StreamSelection) -> str:
    if isinstance(selection, VideoSelection):
        return f"Playing: {data.title} [{selection.video.quality} / {selection.audio.name}]"
    return f"Playing: {data.title} [Audio only / {selection.audio.name}]"


def launch(data: PlayerData, selection: StreamSelection, executable: Optional[str] = None) -> subprocess.Popen:
    """Start mpv. Raises PlayerLaunchError if it cannot be started."""
    executable = executable or DEFAULT_MPV
    cmd = build_command(data, selection, executable)
    logger.debug(f"Launching: {cmd}")

    try:
        return subprocess.Popen(cmd)
    except FileNotFoundError:
        raise PlayerLaunchError(f"'{executable}' not found in your system's PATH.")
    except OSError as e:
        raise PlayerLaunchError(f"Error launching mpv: {e}")
