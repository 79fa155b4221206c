"""Stream selection from quality/language preferences or interactive input.

The engine never prints. Every choice it makes is recorded as a
``Decision`` so the caller can render it (warnings for fallbacks, info for
defaults) however it likes.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .errors import InvalidSelectionInput
from .models import AudioSelection, AudioStream, PlayerData, StreamSelection, VideoSelection, VideoStream
from .parser import ORIGINAL_TRACK_NAME, UNDETERMINED_LANGUAGE

logger = logging.getLogger(__name__)

# (prompt title, option labels, 1-based default) -> raw user input
Chooser = Callable[[str, Sequence[str], int], str]
LanguageNameLookup = Callable[[str], Optional[str]]

AUDIO_ONLY_OPTION = "Audio Only"


class DecisionReason(Enum):
    HIGHEST = "highest"
    LOWEST = "lowest"
    EXACT_MATCH = "exact-match"
    PREFIX_MATCH = "prefix-match"
    CLOSEST = "closest"
    FALLBACK = "fallback"
    DEFAULT = "default"
    ONLY_OPTION = "only-option"
    INTERACTIVE = "interactive"
    NO_VIDEO = "no-video"


@dataclass(frozen=True)
class Decision:
    """One step of the selection: what was picked for which stream kind and why."""
    kind: str  # "video" or "audio"
    reason: DecisionReason
    stream: Optional[object] = None
    requested: Optional[str] = None

    @property
    def is_warning(self) -> bool:
        return self.reason in (DecisionReason.FALLBACK, DecisionReason.CLOSEST)


@dataclass(frozen=True)
class SelectionResult:
    selection: Optional[StreamSelection]
    decisions: Tuple[Decision, ...] = ()
    error: Optional[InvalidSelectionInput] = None


def _accept_default(title: str, options: Sequence[str], default: int) -> str:
    return ""


def _digits(text: str) -> Optional[int]:
    digits = "".join(ch for ch in text if ch.isdigit())
    return int(digits) if digits else None


def _parse_choice(raw: Optional[str], count: int, default: int) -> int:
    """Turn raw chooser input into a 1-based index, or raise."""
    line = (raw or "").strip()
    if not line:
        return default
    try:
        choice = int(line)
    except ValueError:
        raise InvalidSelectionInput(line)
    if not 1 <= choice <= count:
        raise InvalidSelectionInput(line)
    return choice


def video_option_labels(videos: Sequence[VideoStream]) -> List[str]:
    labels = []
    for i, video in enumerate(videos):
        indicator = " (highest)" if i == 0 else ""
        labels.append(f"{video.quality}{indicator} ({video.bitrate // 1000} kbps)")
    return labels


def audio_option_labels(audios: Sequence[AudioStream], language_name: Optional[LanguageNameLookup] = None) -> List[str]:
    """Human-readable audio labels, disambiguating repeated language names."""
    names = []
    for audio in audios:
        if audio.language.lower() == UNDETERMINED_LANGUAGE:
            names.append(ORIGINAL_TRACK_NAME)
            continue
        name = None
        if language_name is not None:
            try:
                name = language_name(audio.language)
            except (LookupError, ValueError):
                name = None
        names.append(name or audio.language)

    labels = []
    for name, audio in zip(names, audios):
        if names.count(name) > 1:
            name = f"{name} ({audio.name})"
        labels.append(name)
    return labels


def default_audio_index(audios: Sequence[AudioStream]) -> int:
    """Flagged default track, else the first English one, else the first."""
    for i, audio in enumerate(audios):
        if audio.is_default:
            return i
    for i, audio in enumerate(audios):
        if audio.language.lower().startswith("en"):
            return i
    return 0


def select_video(
    videos: Sequence[VideoStream],
    quality: Optional[str],
    chooser: Chooser,
) -> Tuple[Optional[VideoStream], Decision]:
    """Pick a video stream. Returns (None, decision) if the user picked audio only.

    Raises ``InvalidSelectionInput`` on unusable interactive input.
    """
    if not quality:
        options = video_option_labels(videos) + [AUDIO_ONLY_OPTION]
        choice = _parse_choice(chooser("Select quality", options, 1), len(options), 1)
        if choice == len(options):
            return None, Decision("video", DecisionReason.INTERACTIVE)
        video = videos[choice - 1]
        return video, Decision("video", DecisionReason.INTERACTIVE, video)

    wanted = quality.strip().lower()
    if wanted == "highest":
        return videos[0], Decision("video", DecisionReason.HIGHEST, videos[0], quality)
    if wanted == "lowest":
        return videos[-1], Decision("video", DecisionReason.LOWEST, videos[-1], quality)

    for video in videos:
        if video.quality.lower() == wanted:
            return video, Decision("video", DecisionReason.EXACT_MATCH, video, quality)

    requested = _digits(wanted)
    if requested is None:
        return videos[0], Decision("video", DecisionReason.FALLBACK, videos[0], quality)

    # min() keeps the first of equally close candidates
    closest = min(videos, key=lambda v: abs((_digits(v.quality) or 0) - requested))
    return closest, Decision("video", DecisionReason.CLOSEST, closest, quality)


def select_audio(
    audios: Sequence[AudioStream],
    language: Optional[str],
    chooser: Chooser,
    language_name: Optional[LanguageNameLookup] = None,
) -> Tuple[AudioStream, Decision]:
    """Pick an audio stream. Raises ``InvalidSelectionInput`` on unusable interactive input."""
    if len(audios) == 1:
        return audios[0], Decision("audio", DecisionReason.ONLY_OPTION, audios[0], language)

    default_index = default_audio_index(audios)

    if language:
        wanted = language.strip().lower()
        for audio in audios:
            if audio.language.lower() == wanted:
                return audio, Decision("audio", DecisionReason.EXACT_MATCH, audio, language)
        for audio in audios:
            if audio.language.lower().startswith(wanted):
                return audio, Decision("audio", DecisionReason.PREFIX_MATCH, audio, language)
        fallback = audios[default_index]
        return fallback, Decision("audio", DecisionReason.FALLBACK, fallback, language)

    options = audio_option_labels(audios, language_name)
    choice = _parse_choice(chooser("Select audio track", options, default_index + 1),
                           len(options), default_index + 1)
    audio = audios[choice - 1]
    reason = DecisionReason.DEFAULT if choice == default_index + 1 else DecisionReason.INTERACTIVE
    return audio, Decision("audio", reason, audio)


def select_stream(
    data: PlayerData,
    quality: Optional[str] = None,
    language: Optional[str] = None,
    audio_only: bool = False,
    chooser: Optional[Chooser] = None,
    language_name: Optional[LanguageNameLookup] = None,
) -> SelectionResult:
    """Choose what to play from ``data``.

    Preferences always win over prompting and degrade to a deterministic
    fallback rather than failing. Only invalid interactive input yields an
    empty selection, reported through ``SelectionResult.error``.
    Without a ``chooser`` every prompt takes its default.
    """
    chooser = chooser or _accept_default
    quality = quality.strip() if quality else None
    language = language.strip() if language else None
    decisions: List[Decision] = []

    if not data.audios:
        return SelectionResult(None)

    video = None
    try:
        if not audio_only:
            if data.videos:
                video, decision = select_video(data.videos, quality, chooser)
                decisions.append(decision)
                audio_only = video is None
            else:
                decisions.append(Decision("video", DecisionReason.NO_VIDEO))
                audio_only = True

        audio, decision = select_audio(data.audios, language, chooser, language_name)
        decisions.append(decision)
    except InvalidSelectionInput as e:
        logger.debug(f"Selection aborted: {e}")
        return SelectionResult(None, tuple(decisions), e)

    if audio_only:
        return SelectionResult(AudioSelection(audio), tuple(decisions))
    return SelectionResult(VideoSelection(video, audio), tuple(decisions))
