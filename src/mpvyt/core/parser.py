"""Parsing of raw adaptive-format lists into playable streams."""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from .models import AudioStream, VideoStream

ITAG_QUALITY = {
    **dict.fromkeys((160, 278, 330, 394, 694), "144p"),
    **dict.fromkeys((133, 242, 331, 395, 695), "240p"),
    **dict.fromkeys((134, 243, 332, 396, 696), "360p"),
    **dict.fromkeys((135, 244, 333, 397, 697), "480p"),
    **dict.fromkeys((136, 247, 298, 302, 334, 398, 698), "720p"),
    **dict.fromkeys((137, 299, 248, 303, 335, 399, 699), "1080p"),
    **dict.fromkeys((264, 271, 304, 308, 336, 400, 700), "1440p"),
    **dict.fromkeys((266, 305, 313, 315, 337, 401, 701), "2160p"),
    **dict.fromkeys((138, 272, 402, 571), "4320p"),
}

UNDETERMINED_LANGUAGE = "und"
ORIGINAL_TRACK_NAME = "Original"


def _as_int(value: Any) -> Optional[int]:
    # Upstream sends some integers as strings ("bitrate": "128000")
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _audio_tracks(captions: Optional[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    if not isinstance(captions, Mapping):
        return []
    renderer = captions.get("playerCaptionsTracklistRenderer", captions)
    tracks = renderer.get("audioTracks") if isinstance(renderer, Mapping) else None
    if not isinstance(tracks, list):
        return []
    return [t for t in tracks if isinstance(t, Mapping)]


def _track_itag(track_id: Any) -> Optional[int]:
    if not isinstance(track_id, str) or not track_id:
        return None
    return _as_int(track_id.split(".")[-1])


def parse_streams(
    streaming_data: Optional[Mapping[str, Any]],
    captions: Optional[Mapping[str, Any]] = None,
) -> Tuple[List[VideoStream], List[AudioStream]]:
    """Split ``streamingData.adaptiveFormats`` into video and audio streams.

    Videos are deduplicated per quality label, keeping the highest bitrate
    (first one wins a tie), and sorted by descending bitrate.

    Audio candidates are keyed by itag with later entries replacing earlier
    ones. Candidates matched against ``captions`` audio tracks come first in
    track order, carrying the track's language and name; the rest follow by
    descending bitrate as ``und``/``Original``.
    """
    formats = streaming_data.get("adaptiveFormats") if isinstance(streaming_data, Mapping) else None
    if not isinstance(formats, list):
        return [], []

    videos: Dict[str, VideoStream] = {}
    audio_candidates: Dict[int, Tuple[str, int]] = {}

    for fmt in formats:
        if not isinstance(fmt, Mapping):
            continue
        url = fmt.get("url")
        bitrate = _as_int(fmt.get("bitrate"))
        itag = _as_int(fmt.get("itag"))
        if not isinstance(url, str) or not url or bitrate is None or itag is None:
            continue

        mime_type = fmt.get("mimeType") or ""
        if not isinstance(mime_type, str):
            continue

        if "video/" in mime_type:
            quality = ITAG_QUALITY.get(itag)
            if quality is None:
                continue
            existing = videos.get(quality)
            if existing is None or bitrate > existing.bitrate:
                videos[quality] = VideoStream(url=url, bitrate=bitrate, quality=quality)
        elif "audio/" in mime_type:
            audio_candidates[itag] = (url, bitrate)

    audios: List[AudioStream] = []
    for track in _audio_tracks(captions):
        itag = _track_itag(track.get("audioTrackId") or track.get("id"))
        if itag is None or itag not in audio_candidates:
            continue
        url, bitrate = audio_candidates.pop(itag)
        language = _optional_str(track.get("languageCode")) or UNDETERMINED_LANGUAGE
        audios.append(AudioStream(
            url=url,
            bitrate=bitrate,
            language=language,
            name=_optional_str(track.get("displayName")) or language,
            is_default=track.get("audioIsDefault") is True,
        ))

    unmatched = sorted(audio_candidates.values(), key=lambda c: c[1], reverse=True)
    audios.extend(
        AudioStream(
            url=url,
            bitrate=bitrate,
            language=UNDETERMINED_LANGUAGE,
            name=ORIGINAL_TRACK_NAME,
        )
        for url, bitrate in unmatched
    )

    sorted_videos = sorted(videos.values(), key=lambda v: v.bitrate, reverse=True)
    return sorted_videos, audios
