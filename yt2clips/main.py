"""Command-line entry point for clip and topic extraction."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from yt2clips.analyzer import MODES, analyze
from yt2clips.client import CLIPS_MODE, ModelClient
from yt2clips.config import Config
from yt2clips.errors import ConfigurationError
from yt2clips.models import load_transcript
from yt2clips.writers.json_writer import write_json
from yt2clips.writers.txt_writer import write_txt

OUTPUT_NAMES = {
    "clips": "content_clips",
    "topics": "topic_sections",
}


def process_transcript(
    transcript_path: Path,
    mode: str = CLIPS_MODE,
    num_clips: int = Config.DEFAULT_CLIP_COUNT,
    output_dir: Optional[Path] = None,
    client: Optional[ModelClient] = None,
):
    """
    Load a transcript, run one extraction, and write the outputs.

    Args:
        transcript_path: JSON transcript file
        mode: "clips" or "topics"
        num_clips: Requested clip count (clips mode only)
        output_dir: Where to write results (defaults to Config.OUT_DIR)
        client: Model client; built from Config when omitted

    Returns:
        Tuple of (output_dir, result)
    """
    items = load_transcript(transcript_path)
    print(f"✓ Loaded {len(items)} transcript lines from {transcript_path.name}")

    if client is None:
        try:
            client = ModelClient.from_config(show_progress=True)
        except ConfigurationError as e:
            print(f"⚠ {e}")
            if mode == CLIPS_MODE:
                print("Continuing with heuristic clips...")

    result = analyze(items, mode=mode, num_clips=num_clips, client=client)
    if "error" in result:
        return None, result

    output_dir = output_dir or Config.OUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)
    base_name = OUTPUT_NAMES[mode]
    write_json(result, output_dir / f"{base_name}.json")
    write_txt(result, output_dir / f"{base_name}.txt")
    print(f"✓ Results saved to: {base_name}.json, {base_name}.txt")

    return output_dir, result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt2clips",
        description="Extract short-form content clips or topic sections from a timestamped transcript.",
    )
    parser.add_argument("transcript", nargs="?", help="Path to a transcript JSON file")
    parser.add_argument("--mode", choices=MODES, default=CLIPS_MODE, help="What to extract (default: clips)")
    parser.add_argument("--clips", type=int, default=Config.DEFAULT_CLIP_COUNT, help="Number of clips, 1-10 (default: 5)")
    parser.add_argument("--out", type=Path, default=None, help="Output directory (default: OUT_DIR)")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    return parser


def main(argv=None) -> int:
    """Parse arguments, run the extraction, and print the result."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    transcript = args.transcript
    if not transcript:
        transcript = input("Please enter the path of the transcript JSON file: ").strip()
        if not transcript:
            print("No transcript provided. Exiting...")
            return 1

    print("=" * 60)
    print("Extracting topic sections..." if args.mode != CLIPS_MODE else f"Extracting {args.clips} content clips...")
    print("=" * 60)

    try:
        output_dir, result = process_transcript(
            Path(transcript), mode=args.mode, num_clips=args.clips, output_dir=args.out,
        )
    except (OSError, ValueError) as e:
        print(f"✗ Could not read transcript: {e}", file=sys.stderr)
        return 1

    if "error" in result:
        print(f"✗ {result['error']}", file=sys.stderr)
        return 1

    entries = result.get("contentClips") or result.get("topicSections") or []
    print()
    for entry in entries:
        print(f"[{entry['startTimeFormatted']} - {entry['endTimeFormatted']}] {entry['title']}")
    print()
    print(f"Files saved to: {output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
