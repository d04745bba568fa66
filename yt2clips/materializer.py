"""Turn validated model records into transcript-backed clips and sections."""

import logging
from typing import Optional, Sequence

from yt2clips.formatter import format_timestamp
from yt2clips.models import MaterializedClip, MaterializedSection, TranscriptItem

logger = logging.getLogger(__name__)

DEFAULT_CLIP_LENGTH_MS = 30000

NO_TRANSCRIPT_PLACEHOLDER = "No transcript content available for this timestamp range"
DEFAULT_TITLE = "Untitled Clip"
DEFAULT_SUMMARY = "No summary provided"
DEFAULT_REASON = "This clip was selected based on engaging content potential"


def parse_timestamp(value) -> Optional[int]:
    """
    Convert an MM:SS timestamp to milliseconds.

    Square brackets are stripped first, so "[01:30]" parses like "01:30".

    Returns:
        Milliseconds, or None if the value cannot be parsed
    """
    if not isinstance(value, str):
        return None
    parts = value.replace("[", "").replace("]", "").strip().split(":")
    if len(parts) < 2:
        return None
    try:
        minutes = int(parts[0])
        seconds = int(parts[1])
    except ValueError:
        return None
    return (minutes * 60 + seconds) * 1000


def resolve_time_range(start_value, end_value) -> tuple[int, int]:
    """
    Parse start/end timestamps into a valid millisecond range.

    Each bound recovers independently: an unparseable start becomes 0, an
    unparseable end becomes start + 30s. The result always satisfies
    0 <= start < end.
    """
    start_ms = parse_timestamp(start_value)
    end_ms = parse_timestamp(end_value)

    if start_ms is None or start_ms < 0:
        logger.warning("Invalid start time, using default: %r", start_value)
        start_ms = 0

    if end_ms is None or end_ms <= start_ms:
        logger.warning("Invalid end time, using default: %r", end_value)
        end_ms = start_ms + DEFAULT_CLIP_LENGTH_MS

    return start_ms, end_ms


def slice_transcript(items: Sequence[TranscriptItem], start_ms: int, end_ms: int) -> str:
    """Join the text of items whose offset lies in [start_ms, end_ms]."""
    return " ".join(
        item.text for item in items
        if start_ms <= item.offset <= end_ms
    )


def _timestamp_field(record: dict, camel: str, snake: str):
    """Read a timestamp field, accepting the snake_case spelling too."""
    return record.get(camel) or record.get(snake)


def materialize_clip(record: dict, items: Sequence[TranscriptItem]) -> MaterializedClip:
    """Build one clip from a model record, filling defaults for missing fields."""
    start_ms, end_ms = resolve_time_range(
        _timestamp_field(record, "startTimestamp", "start_timestamp"),
        _timestamp_field(record, "endTimestamp", "end_timestamp"),
    )
    transcript = slice_transcript(items, start_ms, end_ms)

    return MaterializedClip(
        title=record.get("title") or DEFAULT_TITLE,
        summary=record.get("summary") or DEFAULT_SUMMARY,
        start_time=start_ms,
        end_time=end_ms,
        start_time_formatted=format_timestamp(start_ms),
        end_time_formatted=format_timestamp(end_ms),
        transcript=transcript or NO_TRANSCRIPT_PLACEHOLDER,
        reason=record.get("reason") or DEFAULT_REASON,
    )


def error_clip() -> MaterializedClip:
    """Clip returned in place of a record that could not be processed."""
    return MaterializedClip(
        title="Content Clip",
        summary="Unable to process this clip properly",
        start_time=0,
        end_time=DEFAULT_CLIP_LENGTH_MS,
        start_time_formatted=format_timestamp(0),
        end_time_formatted=format_timestamp(DEFAULT_CLIP_LENGTH_MS),
        transcript="Error processing transcript for this clip",
        reason="This is a fallback clip due to processing errors",
    )


def materialize_clips(records: list, items: Sequence[TranscriptItem]) -> list[MaterializedClip]:
    """
    Materialize every clip record.

    A record that fails to process is replaced by error_clip() so one bad
    record never loses the rest of the batch.
    """
    clips = []
    for record in records:
        try:
            clips.append(materialize_clip(record, items))
        except Exception:
            logger.exception("Error processing clip: %r", record)
            clips.append(error_clip())
    return clips


def materialize_section(record: dict, items: Sequence[TranscriptItem]) -> MaterializedSection:
    """Build one topic section from a validated record."""
    start_ms, end_ms = resolve_time_range(record["startTimestamp"], record["endTimestamp"])
    transcript = slice_transcript(items, start_ms, end_ms)

    return MaterializedSection(
        title=record["title"],
        summary=record["summary"],
        start_time=start_ms,
        end_time=end_ms,
        start_time_formatted=format_timestamp(start_ms),
        end_time_formatted=format_timestamp(end_ms),
        transcript=transcript or NO_TRANSCRIPT_PLACEHOLDER,
    )


def materialize_sections(records: list, items: Sequence[TranscriptItem]) -> list[MaterializedSection]:
    """Materialize every section record; any failure propagates."""
    return [materialize_section(record, items) for record in records]
