"""Heuristic clip generation used when the model cannot be reached or understood.

Everything here is deterministic except the top-up phase, which fills any
remaining slots with randomly placed windows drawn from the injected
``random.Random``.
"""

import logging
import random
import re
from collections import Counter
from typing import Optional, Sequence

from yt2clips.formatter import format_timestamp
from yt2clips.materializer import DEFAULT_CLIP_LENGTH_MS
from yt2clips.models import MaterializedClip, TranscriptItem
from yt2clips.prompts import clamp_clip_count

logger = logging.getLogger(__name__)

MAX_SEGMENTS = 5
MAX_CLIP_ITEMS = 15
DENSITY_WINDOW = 5
MIN_CLIP_WORDS = 5

STOP_WORDS = frozenset(['this', 'that', 'these', 'those', 'then', 'than', 'when', 'what', 'with'])

REASONS = (
    "This segment contains a concise explanation that would resonate with viewers looking for quick insights.",
    "The content in this clip delivers a focused point that would engage viewers interested in this topic.",
    "This clip captures a moment that effectively communicates a key concept in an accessible way.",
    "This segment has a natural flow and covers a complete thought, making it ideal for short-form content.",
    "This portion of the transcript contains a standalone insight that works well without additional context.",
)

TOP_UP_REASON = (
    "This segment contains meaningful content that provides value in a concise format, "
    "ideal for short-form platforms."
)


def empty_transcript_clip() -> MaterializedClip:
    """The single clip returned for an empty transcript."""
    return MaterializedClip(
        title="No Content Available",
        summary="Unable to generate content clips from the transcript.",
        start_time=0,
        end_time=DEFAULT_CLIP_LENGTH_MS,
        start_time_formatted=format_timestamp(0),
        end_time_formatted=format_timestamp(DEFAULT_CLIP_LENGTH_MS),
        transcript="No transcript content available",
        reason="This is a fallback clip due to processing errors",
    )


def _word_count(text: str) -> int:
    return len(text.split(" "))


def _sentences(text: str) -> list[str]:
    return [s for s in re.split(r"[.!?]", text) if s.strip()]


def _join_text(items: Sequence[TranscriptItem]) -> str:
    return " ".join(item.text for item in items)


def candidate_start_points(length: int, num_clips: int, segment_size: int) -> list[int]:
    """Up to 2N evenly spaced item indices; all 0 when segment_size is 0."""
    points = []
    for i in range(num_clips * 2):
        point = i * segment_size
        if point >= length:
            break
        points.append(point)
    return points


def select_start_points(items: Sequence[TranscriptItem], points: list[int], num_clips: int) -> list[int]:
    """
    Keep the N densest start points, in chronological order.

    Density is the word count of the first few items from each point.
    """
    ranked = sorted(
        points,
        key=lambda p: -_word_count(_join_text(items[p:p + DENSITY_WINDOW])),
    )
    return sorted(ranked[:num_clips])


def title_from_text(clip_text: str) -> str:
    """Title from the three most frequent meaningful words, or the first sentence."""
    words = re.sub(r"[^\w\s]", "", clip_text.lower(), flags=re.ASCII).split()
    words = [w for w in words if len(w) > 3 and w not in STOP_WORDS]

    if words:
        top_words = [word for word, _ in Counter(words).most_common(3)]
        return f'"{" ".join(top_words)}" - Key Insight'

    sentences = _sentences(clip_text)
    first_sentence = sentences[0] if sentences else ""
    if len(first_sentence) > 30:
        return f"{first_sentence[:30]}..."
    return first_sentence


def summary_from_text(clip_text: str) -> str:
    """Summary built from the first and last sentences where possible."""
    if _word_count(clip_text) > 20:
        sentences = _sentences(clip_text)
        if len(sentences) > 1:
            return (
                f"This clip covers {sentences[0].strip()} "
                f"and concludes with {sentences[-1].strip()}."
            )
        return f"This clip discusses {clip_text[:100]}..."
    return f"Brief point about {clip_text}"


def reason_for_position(start_index: int, length: int) -> str:
    """Pick a reason template by where the clip starts in the transcript."""
    index = min(int(start_index / length * len(REASONS)), len(REASONS) - 1)
    return REASONS[index]


def _time_range(items: Sequence[TranscriptItem], start_index: int, end_index: int) -> tuple[int, int]:
    start_time = items[start_index].offset
    end_time = items[end_index].offset + items[end_index].duration
    if end_time <= start_time:
        end_time = start_time + DEFAULT_CLIP_LENGTH_MS
    return start_time, end_time


def build_clip(items: Sequence[TranscriptItem], start_index: int, clip_length_items: int) -> Optional[MaterializedClip]:
    """Build the clip starting at start_index, or None if it is too short."""
    length = len(items)
    if start_index >= length:
        return None
    end_index = min(start_index + clip_length_items, length - 1)

    clip_text = _join_text(items[start_index:end_index + 1])
    if _word_count(clip_text) < MIN_CLIP_WORDS:
        return None

    start_time, end_time = _time_range(items, start_index, end_index)
    return MaterializedClip(
        title=title_from_text(clip_text),
        summary=summary_from_text(clip_text),
        start_time=start_time,
        end_time=end_time,
        start_time_formatted=format_timestamp(start_time),
        end_time_formatted=format_timestamp(end_time),
        transcript=clip_text,
        reason=reason_for_position(start_index, length),
    )


def random_clip(items: Sequence[TranscriptItem], clip_length_items: int, rng: random.Random) -> MaterializedClip:
    """A randomly placed window used to top up the clip count."""
    length = len(items)
    start_index = rng.randrange(max(1, length - clip_length_items))
    end_index = min(start_index + clip_length_items, length - 1)

    start_time, end_time = _time_range(items, start_index, end_index)
    clip_text = _join_text(items[start_index:end_index + 1])

    title_words = [word for word in clip_text.split(" ") if len(word) > 3]
    rng.shuffle(title_words)
    title_words = title_words[:3]
    if title_words:
        title = f'"{" ".join(title_words)}" - Interesting Moment'
    else:
        title = "Notable Segment"

    start_formatted = format_timestamp(start_time)
    end_formatted = format_timestamp(end_time)
    return MaterializedClip(
        title=title,
        summary=f"This clip presents an interesting perspective from {start_formatted} to {end_formatted}.",
        start_time=start_time,
        end_time=end_time,
        start_time_formatted=start_formatted,
        end_time_formatted=end_formatted,
        transcript=clip_text,
        reason=TOP_UP_REASON,
    )


def generate_fallback_clips(
    items: Sequence[TranscriptItem],
    num_clips: int = 5,
    rng: Optional[random.Random] = None,
) -> list[MaterializedClip]:
    """
    Segment a transcript into clips without calling the model.

    Args:
        items: Transcript items in chronological order
        num_clips: Desired number of clips (clamped to 1-10)
        rng: Randomness source for the top-up phase

    Returns:
        At most num_clips clips; exactly one placeholder clip for an empty transcript
    """
    if not items:
        return [empty_transcript_clip()]

    num_clips = clamp_clip_count(num_clips)
    rng = rng or random.Random()
    length = len(items)

    segment_size = length // min(num_clips, MAX_SEGMENTS)
    clip_length_items = min(MAX_CLIP_ITEMS, segment_size // 2)

    points = candidate_start_points(length, num_clips, segment_size)
    selected = select_start_points(items, points, num_clips)

    clips = []
    for start_index in selected:
        if len(clips) >= num_clips:
            break
        clip = build_clip(items, start_index, clip_length_items)
        if clip is not None:
            clips.append(clip)

    if len(clips) < num_clips:
        logger.info("Topping up %d heuristic clips with random windows", num_clips - len(clips))
    while len(clips) < num_clips:
        clips.append(random_clip(items, clip_length_items, rng))

    return clips[:num_clips]
