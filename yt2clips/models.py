"""Data models for transcripts, clips and topic sections."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class TranscriptItem:
    """A single caption line with timing information."""
    text: str
    offset: int    # Start time in milliseconds
    duration: int  # Duration in milliseconds


@dataclass
class MaterializedSection:
    """A timestamp-bounded chapter of the transcript."""
    title: str
    summary: str
    start_time: int  # Milliseconds
    end_time: int    # Milliseconds
    start_time_formatted: str
    end_time_formatted: str
    transcript: str

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys of the output contract."""
        return {
            'title': self.title,
            'summary': self.summary,
            'startTime': self.start_time,
            'endTime': self.end_time,
            'startTimeFormatted': self.start_time_formatted,
            'endTimeFormatted': self.end_time_formatted,
            'transcript': self.transcript,
        }


@dataclass
class MaterializedClip(MaterializedSection):
    """A short highlight, with a reason it would work as short-form video."""
    reason: Optional[str] = None

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['reason'] = self.reason
        return data


def transcript_from_dicts(rows: list) -> list[TranscriptItem]:
    """
    Build transcript items from decoded JSON rows.

    Rows without text are dropped. Numeric fields are coerced to int
    milliseconds.

    Raises:
        ValueError: If a row has a negative or non-numeric offset/duration
    """
    items = []
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise ValueError(f"Transcript entry {index} is not an object: {row!r}")
        text = row.get('text')
        if not text:
            continue
        try:
            offset = int(float(row.get('offset', 0)))
            duration = int(float(row.get('duration', 0)))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Transcript entry {index} has invalid timing: {row!r}") from e
        if offset < 0 or duration < 0:
            raise ValueError(f"Transcript entry {index} has negative timing: {row!r}")
        items.append(TranscriptItem(text=str(text), offset=offset, duration=duration))
    return items


def load_transcript(path: Path) -> list[TranscriptItem]:
    """
    Load a transcript JSON file.

    Accepts either a bare list of {text, offset, duration} objects or an
    object with a "transcript" list.

    Args:
        path: Path to the JSON file

    Returns:
        Transcript items in file order
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get('transcript')
    if not isinstance(data, list):
        raise ValueError(f"No transcript list found in {path}")

    return transcript_from_dicts(data)
