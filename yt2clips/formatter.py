"""Transcript formatting for inclusion in model prompts."""

from typing import Iterable

from yt2clips.models import TranscriptItem


def format_timestamp(milliseconds: int) -> str:
    """Format milliseconds as MM:SS (minutes are not wrapped into hours)."""
    total_seconds = int(milliseconds) // 1000
    minutes = total_seconds // 60
    seconds = total_seconds % 60
    return f"{minutes:02d}:{seconds:02d}"


def format_transcript_for_prompt(items: Iterable[TranscriptItem]) -> str:
    """
    Render transcript items as one timestamped line each.

    Format: [MM:SS] text

    Args:
        items: Transcript items in chronological order

    Returns:
        Lines joined with newlines
    """
    return "\n".join(
        f"[{format_timestamp(item.offset)}] {item.text}"
        for item in items
    )
