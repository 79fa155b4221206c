"""Main entry point for mpvyt."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from .core import (
    InvalidIdentifier,
    MpvYtError,
    YouTubeClient,
    extract_video_id,
    select_stream,
)
from .core import player
from .ui import prompt_identifier, render_decisions, terminal_chooser
from .utils import Config, get_language_name, log_error
from .version import __version__

logger = logging.getLogger(__name__)


def _identifier(value: str) -> str:
    if extract_video_id(value) is None:
        raise argparse.ArgumentTypeError(str(InvalidIdentifier(value)))
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mpvyt", description="Play YouTube videos in mpv.")
    parser.add_argument("identifier", nargs="?", type=_identifier, help="YouTube URL or Video ID.")
    parser.add_argument("-q", "--quality", help="Stream quality (e.g., 720p, highest, lowest).")
    parser.add_argument("-l", "--language", help="Audio language code (e.g., en, de, pt-BR).")
    parser.add_argument("-a", "--audio", action="store_true", help="Play audio only.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging.")
    parser.add_argument("--config", help="Path to a JSON settings file.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace, config: Config) -> int:
    """Resolve, select and play. Returns the process exit status."""
    quality = args.quality or config.quality
    language = args.language or config.language

    if args.audio and args.quality:
        print("Info: --audio flag is present, --quality flag will be ignored.")

    identifier = args.identifier or prompt_identifier()
    if not identifier:
        print("Error: No identifier provided.", file=sys.stderr)
        return 1

    video_id = extract_video_id(identifier)
    if video_id is None:
        print(f"Error: {InvalidIdentifier(identifier)}", file=sys.stderr)
        return 1

    if not player.is_available(config.mpv_path):
        print(f"Error: '{config.mpv_path}' not found in your system's PATH.", file=sys.stderr)
        return 1

    print(f"Fetching video data for '{video_id}'...")
    with YouTubeClient(timeout=config.request_timeout) as client:
        data = client.get_player_data(video_id)

    print(f"Available streams for: {data.title}")
    result = select_stream(
        data,
        quality=quality,
        language=language,
        audio_only=args.audio,
        chooser=terminal_chooser,
        language_name=get_language_name,
    )
    render_decisions(result.decisions)

    if result.selection is None:
        if result.error is not None:
            logger.info(str(result.error))
        print("No stream selected.")
        return 0

    player.launch(data, result.selection, config.mpv_path)
    print(f"\n{player.describe(data, result.selection)}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    config = Config(args.config) if args.config else Config()
    try:
        logger.info(f"Starting mpvyt v{__version__}")
        return run(args, config)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except MpvYtError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error(f"Fatal error in main(): {e}", exc_info=True)
        log_error("Fatal error in main()", e, config.log_file)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
