"""Clip and topic extraction: prompt the model, repair its output, fall back."""

import logging
import random
from typing import Optional, Sequence

from yt2clips.client import CLIPS_MODE, TOPICS_MODE, ModelClient
from yt2clips.errors import AnalysisError, ConfigurationError, PipelineError
from yt2clips.extractor import extract_records
from yt2clips.fallback import generate_fallback_clips
from yt2clips.formatter import format_transcript_for_prompt
from yt2clips.materializer import materialize_clips, materialize_sections
from yt2clips.models import MaterializedClip, MaterializedSection, TranscriptItem
from yt2clips.prompts import DEFAULT_CLIPS, build_clips_prompt, build_topics_prompt, clamp_clip_count
from yt2clips.validator import CLIP_FIELDS, SECTION_FIELDS

logger = logging.getLogger(__name__)

MODES = (CLIPS_MODE, TOPICS_MODE)


def extract_content_clips(
    items: Sequence[TranscriptItem],
    num_clips=DEFAULT_CLIPS,
    client: Optional[ModelClient] = None,
    rng: Optional[random.Random] = None,
) -> list[MaterializedClip]:
    """
    Extract short-form content clips from a transcript.

    Never fails: a missing credential, an upstream error, or a response that
    cannot be parsed or validated all produce heuristic clips instead.

    Args:
        items: Transcript items in chronological order
        num_clips: Requested number of clips (clamped to 1-10)
        client: Model client; built from Config when omitted
        rng: Randomness source for the fallback top-up phase

    Returns:
        Materialized clips
    """
    clip_count = clamp_clip_count(num_clips)

    try:
        if client is None:
            client = ModelClient.from_config()
    except ConfigurationError as e:
        logger.warning("%s, using fallback content clips", e)
        return generate_fallback_clips(items, clip_count, rng=rng)

    prompt = build_clips_prompt(format_transcript_for_prompt(items), clip_count)

    try:
        raw_text = client.complete(prompt, CLIPS_MODE)
        records = extract_records(raw_text, CLIP_FIELDS)
    except (ConfigurationError, PipelineError) as e:
        logger.error("Clip extraction failed, using fallback content clips: %s", e)
        return generate_fallback_clips(items, clip_count, rng=rng)

    return materialize_clips(records, items)


def extract_topic_sections(
    items: Sequence[TranscriptItem],
    client: Optional[ModelClient] = None,
) -> list[MaterializedSection]:
    """
    Split a transcript into titled, summarized sections.

    Raises:
        AnalysisError: If the model is not configured, fails, or returns
            output that cannot be turned into sections
    """
    try:
        if client is None:
            client = ModelClient.from_config()
        prompt = build_topics_prompt(format_transcript_for_prompt(items))
        raw_text = client.complete(prompt, TOPICS_MODE)
        records = extract_records(raw_text, SECTION_FIELDS)
        return materialize_sections(records, items)
    except (ConfigurationError, PipelineError) as e:
        logger.error("Topic extraction failed: %s", e)
        raise AnalysisError(f"Failed to analyze transcript: {e}") from e
    except (KeyError, TypeError, ValueError) as e:
        logger.exception("Error processing topic sections")
        raise AnalysisError(f"Failed to analyze transcript: {e}") from e


def analyze(
    items: Optional[Sequence[TranscriptItem]],
    mode: str = CLIPS_MODE,
    num_clips=DEFAULT_CLIPS,
    client: Optional[ModelClient] = None,
    rng: Optional[random.Random] = None,
) -> dict:
    """
    Run one extraction and shape the result for callers.

    Returns:
        {"contentClips": [...]}, {"topicSections": [...]}, or {"error": message}
    """
    if not items:
        return {"error": "Invalid transcript data"}

    if mode == CLIPS_MODE:
        clips = extract_content_clips(items, num_clips, client=client, rng=rng)
        return {"contentClips": [clip.to_dict() for clip in clips]}

    if mode == TOPICS_MODE:
        try:
            sections = extract_topic_sections(items, client=client)
        except AnalysisError as e:
            return {"error": str(e)}
        return {"topicSections": [section.to_dict() for section in sections]}

    return {"error": f"Unknown mode: {mode}. Expected one of: {', '.join(MODES)}"}
