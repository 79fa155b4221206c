"""Tests for adaptive format parsing."""

from mpvyt.core.models import AudioSelection, AudioStream, PlayerData, VideoStream
from mpvyt.core.parser import parse_streams
from mpvyt.core.selection import select_stream

from tests.conftest import audio_format, audio_track, make_format, video_format


def captions(*tracks):
    return {"playerCaptionsTracklistRenderer": {"audioTracks": list(tracks)}}


class TestParseStreams:

    def test_missing_adaptive_formats(self):
        assert parse_streams({}) == ([], [])
        assert parse_streams({"adaptiveFormats": {"not": "a list"}}) == ([], [])
        assert parse_streams(None) == ([], [])

    def test_single_video_and_audio(self):
        videos, audios = parse_streams({"adaptiveFormats": [
            video_format(137, 3000000, url="https://v"),
            audio_format(140, 128000, url="https://a"),
        ]})

        assert videos == [VideoStream(url="https://v", bitrate=3000000, quality="1080p")]
        assert audios == [AudioStream(url="https://a", bitrate=128000, language="und",
                                      name="Original", is_default=False)]

    def test_incomplete_descriptors_are_skipped(self):
        formats = [
            {"itag": 137, "bitrate": 3000000, "mimeType": "video/mp4"},
            {"itag": 137, "bitrate": "fast", "mimeType": "video/mp4", "url": "https://v"},
            {"bitrate": 3000000, "mimeType": "video/mp4", "url": "https://v"},
            {"itag": 137, "bitrate": 3000000, "mimeType": "video/mp4", "url": ""},
            make_format(137, 3000000, "text/vtt"),
            video_format(9999, 3000000),
            "garbage",
        ]
        assert parse_streams({"adaptiveFormats": formats}) == ([], [])

    def test_numeric_strings_are_accepted(self):
        videos, _ = parse_streams({"adaptiveFormats": [
            make_format("136", "1500000", "video/mp4"),
        ]})
        assert videos[0].quality == "720p"
        assert videos[0].bitrate == 1500000

    def test_video_dedup_keeps_highest_bitrate(self):
        videos, _ = parse_streams({"adaptiveFormats": [
            video_format(137, 500000, url="https://low"),
            video_format(248, 900000, url="https://high"),
        ]})
        assert videos == [VideoStream(url="https://high", bitrate=900000, quality="1080p")]

    def test_video_dedup_tie_keeps_first(self):
        videos, _ = parse_streams({"adaptiveFormats": [
            video_format(137, 900000, url="https://first"),
            video_format(248, 900000, url="https://second"),
        ]})
        assert [v.url for v in videos] == ["https://first"]

    def test_videos_sorted_by_descending_bitrate(self):
        videos, _ = parse_streams({"adaptiveFormats": [
            video_format(134, 400000),
            video_format(137, 3000000),
            video_format(136, 1500000),
        ]})
        assert [v.quality for v in videos] == ["1080p", "720p", "360p"]

    def test_audio_dedup_is_last_write_wins(self):
        _, audios = parse_streams({"adaptiveFormats": [
            audio_format(251, 160000, url="https://a"),
            audio_format(251, 64000, url="https://b"),
        ]})
        assert [(a.url, a.bitrate) for a in audios] == [("https://b", 64000)]

    def test_caption_track_matches_on_trailing_itag(self):
        _, audios = parse_streams(
            {"adaptiveFormats": [
                audio_format(140, 128000, url="https://orig"),
                audio_format(251, 160000, url="https://dub"),
            ]},
            captions(audio_track("de-DE.251", language="de", name="German", default=True)),
        )

        assert audios == [
            AudioStream(url="https://dub", bitrate=160000, language="de",
                        name="German", is_default=True),
            AudioStream(url="https://orig", bitrate=128000, language="und",
                        name="Original", is_default=False),
        ]

    def test_caption_track_defaults(self):
        _, audios = parse_streams(
            {"adaptiveFormats": [audio_format(251, 160000)]},
            captions(audio_track("x.251"), audio_track("fr.4", language="fr")),
        )
        assert len(audios) == 1
        assert (audios[0].language, audios[0].name) == ("und", "und")

    def test_language_becomes_display_name_when_missing(self):
        _, audios = parse_streams(
            {"adaptiveFormats": [audio_format(251, 160000)]},
            captions(audio_track("es.251", language="es")),
        )
        assert (audios[0].language, audios[0].name) == ("es", "es")

    def test_matched_tracks_keep_caption_order_then_unmatched_by_bitrate(self):
        _, audios = parse_streams(
            {"adaptiveFormats": [
                audio_format(139, 48000, url="https://u-low"),
                audio_format(140, 128000, url="https://en"),
                audio_format(250, 70000, url="https://fr"),
                audio_format(251, 160000, url="https://u-high"),
            ]},
            captions(
                audio_track("fr.250", language="fr", name="French"),
                audio_track("en.140", language="en", name="English"),
            ),
        )
        assert [a.url for a in audios] == ["https://fr", "https://en", "https://u-high", "https://u-low"]

    def test_track_matches_only_once(self):
        _, audios = parse_streams(
            {"adaptiveFormats": [audio_format(251, 160000)]},
            captions(
                audio_track("en.251", language="en", name="English"),
                audio_track("en-GB.251", language="en-GB", name="English (UK)"),
            ),
        )
        assert [a.name for a in audios] == ["English"]

    def test_parsing_is_deterministic(self):
        data = {"adaptiveFormats": [
            video_format(137, 3000000),
            video_format(136, 1500000),
            audio_format(140, 128000),
            audio_format(251, 160000),
        ]}
        tracks = captions(audio_track("en.140", language="en", name="English"))
        assert parse_streams(data, tracks) == parse_streams(data, tracks)


class TestAudioTrackFieldTypes:

    def test_non_string_fields_fall_back(self):
        _, audios = parse_streams(
            {"adaptiveFormats": [audio_format(251, 160000)]},
            captions({"audioTrackId": "x.251", "languageCode": 7, "displayName": ["German"],
                      "audioIsDefault": "false"}),
        )
        assert (audios[0].language, audios[0].name, audios[0].is_default) == ("und", "und", False)

    def test_non_string_display_name_uses_language(self):
        _, audios = parse_streams(
            {"adaptiveFormats": [audio_format(251, 160000)]},
            captions({"audioTrackId": "de.251", "languageCode": "de", "displayName": 3}),
        )
        assert (audios[0].language, audios[0].name) == ("de", "de")

    def test_only_true_marks_default(self):
        _, audios = parse_streams(
            {"adaptiveFormats": [audio_format(140, 128000), audio_format(251, 160000)]},
            captions(
                audio_track("en.140", language="en", name="English", default=1),
                audio_track("de.251", language="de", name="German", default=True),
            ),
        )
        assert [a.is_default for a in audios] == [False, True]

    def test_malformed_tracks_still_select(self):
        videos, audios = parse_streams(
            {"adaptiveFormats": [audio_format(140, 128000), audio_format(251, 160000)]},
            captions({"audioTrackId": "x.251", "languageCode": 7, "audioIsDefault": "false"}),
        )
        data = PlayerData(title="Clip", videos=tuple(videos), audios=tuple(audios))

        result = select_stream(data, language="en")

        assert result.selection == AudioSelection(audios[0])
