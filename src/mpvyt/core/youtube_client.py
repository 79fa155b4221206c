"""YouTube player metadata retrieval over the innertube API."""

import concurrent.futures
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .errors import (
    IncompleteResponse,
    LiveStreamUnsupported,
    MetadataFetchError,
    MpvYtError,
    NoAudioAvailable,
    RemoteRequestFailed,
    Unplayable,
)
from .models import PlayerData
from .parser import parse_streams

logger = logging.getLogger(__name__)

API_ENDPOINT = "https://www.youtube.com/youtubei/v1/player"
THUMBNAIL_BASE_URL = "https://img.youtube.com/vi/"
DEFAULT_TIMEOUT = 15


class ClientProfile(Enum):
    """Client applications the player request can impersonate."""

    ANDROID = ("ANDROID", "19.50.42", "3", None)
    IOS = ("IOS", "17.13.3", "5", "iPhone14,3")

    def __init__(self, client_name, client_version, client_id, device_model):
        self.client_name = client_name
        self.client_version = client_version
        self.client_id = client_id
        self.device_model = device_model

    def build_request(self, video_id: str) -> Tuple[Dict[str, Any], Dict[str, str]]:
        """Return the JSON payload and headers for a player request."""
        client = {
            "clientName": self.client_name,
            "clientVersion": self.client_version,
            "hl": "en",
            "gl": "US",
        }
        if self.device_model:
            client["deviceModel"] = self.device_model

        payload = {
            "context": {
                "client": client,
                "user": {"lockedSafetyMode": False},
            },
            "videoId": video_id,
            "contentCheckOk": True,
            "racyCheckOk": True,
        }
        headers = {
            "X-Youtube-Client-Name": self.client_id,
            "X-Youtube-Client-Version": self.client_version,
        }
        return payload, headers


@dataclass(frozen=True)
class PlayabilityStatus:
    status: Optional[str] = None
    reason: Optional[str] = None


@dataclass(frozen=True)
class VideoDetails:
    title: Optional[str] = None
    is_live_content: bool = False


@dataclass(frozen=True)
class ApiResponse:
    """Decoded player response. Every field may be missing upstream."""
    playability_status: Optional[PlayabilityStatus] = None
    video_details: Optional[VideoDetails] = None
    streaming_data: Optional[Mapping[str, Any]] = None
    captions: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_json(cls, body: Any) -> "ApiResponse":
        if not isinstance(body, Mapping):
            raise IncompleteResponse("Unexpected response format from API.")

        def section(key):
            value = body.get(key)
            return value if isinstance(value, Mapping) else None

        playability = section("playabilityStatus")
        details = section("videoDetails")

        status = None
        if playability is not None:
            status = PlayabilityStatus(
                status=_optional_str(playability.get("status")),
                reason=_optional_str(playability.get("reason")),
            )

        video_details = None
        if details is not None:
            video_details = VideoDetails(
                title=_optional_str(details.get("title")),
                is_live_content=details.get("isLiveContent") is True,
            )

        return cls(
            playability_status=status,
            video_details=video_details,
            streaming_data=section("streamingData"),
            captions=section("captions"),
        )


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def is_login_or_age_error(message: Optional[str]) -> bool:
    """Whether a failure message warrants a retry with another client."""
    if not message:
        return False
    lowered = message.lower()
    return "login_required" in lowered or "age" in lowered


class YouTubeClient:
    """Fetches player data for a video, falling back between client profiles."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, session: Optional[requests.Session] = None):
        self.timeout = timeout

        if session is None:
            session = requests.Session()
            # Only 5xx responses are retried; timeouts surface on the first attempt
            retries = Retry(total=3, connect=0, read=0, backoff_factor=0.5,
                            status_forcelist=[500, 502, 503, 504],
                            allowed_methods=None, raise_on_status=False)
            session.mount('https://', HTTPAdapter(max_retries=retries))
            session.mount('http://', HTTPAdapter(max_retries=retries))
        self.session = session

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.session.close()

    def get_player_data(self, video_id: str) -> PlayerData:
        """Resolve a video ID to its title, thumbnail and adaptive streams.

        The thumbnail probe and the first (Android) request run concurrently.
        A login or age failure is retried once with the iOS profile; other
        failures are raised as ``MetadataFetchError`` carrying the cause.
        """
        executor = concurrent.futures.ThreadPoolExecutor(max_workers=2)
        try:
            thumbnail_future = executor.submit(self.probe_thumbnail, video_id)
            extraction_future = executor.submit(self._attempt, video_id, ClientProfile.ANDROID)
            concurrent.futures.wait([thumbnail_future, extraction_future])
            thumbnail_url = thumbnail_future.result()
            data, error = extraction_future.result()
        except BaseException:
            executor.shutdown(wait=False, cancel_futures=True)
            self.close()
            raise
        executor.shutdown(wait=False)

        if data is None and is_login_or_age_error(str(error)):
            logger.info(f"Retrying {video_id} with {ClientProfile.IOS.client_name} client: {error}")
            data, error = self._attempt(video_id, ClientProfile.IOS)

        if data is None:
            raise MetadataFetchError(str(error), cause=error)
        return data.with_thumbnail(thumbnail_url)

    def probe_thumbnail(self, video_id: str) -> str:
        """Return the maxres thumbnail URL if it exists, else the hq one."""
        max_res_url = f"{THUMBNAIL_BASE_URL}{video_id}/maxresdefault.jpg"
        try:
            resp = self.session.head(max_res_url, allow_redirects=True, timeout=self.timeout)
            if resp.ok:
                return max_res_url
        except requests.RequestException as e:
            logger.debug(f"Thumbnail probe failed for {video_id}: {e}")
        return f"{THUMBNAIL_BASE_URL}{video_id}/hqdefault.jpg"

    def _attempt(self, video_id: str, profile: ClientProfile) -> Tuple[Optional[PlayerData], Optional[MpvYtError]]:
        try:
            return self._extract(video_id, profile), None
        except MpvYtError as e:
            logger.debug(f"{profile.client_name} extraction failed for {video_id}: {e}")
            return None, e

    def _extract(self, video_id: str, profile: ClientProfile) -> PlayerData:
        payload, headers = profile.build_request(video_id)
        try:
            resp = self.session.post(API_ENDPOINT, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise RemoteRequestFailed(detail=str(e))

        if not resp.ok:
            raise RemoteRequestFailed(resp.status_code)

        try:
            body = resp.json()
        except ValueError:
            raise IncompleteResponse("Invalid JSON received from API.")

        api_response = ApiResponse.from_json(body)

        playability = api_response.playability_status or PlayabilityStatus()
        if playability.status != "OK":
            raise Unplayable(playability.reason or playability.status or "Video is unplayable.")

        details = api_response.video_details
        if api_response.streaming_data is None or details is None or not (details.title or "").strip():
            raise IncompleteResponse()
        if details.is_live_content:
            raise LiveStreamUnsupported()

        videos, audios = parse_streams(api_response.streaming_data, api_response.captions)
        if not audios:
            raise NoAudioAvailable()

        logger.debug(f"Parsed {len(videos)} video and {len(audios)} audio streams for {video_id}")
        return PlayerData(
            title=details.title.strip(),
            videos=tuple(videos),
            audios=tuple(audios),
        )


def fetch_player_data(video_id: str, timeout: float = DEFAULT_TIMEOUT) -> PlayerData:
    """One-shot helper around ``YouTubeClient.get_player_data``."""
    with YouTubeClient(timeout=timeout) as client:
        return client.get_player_data(video_id)
