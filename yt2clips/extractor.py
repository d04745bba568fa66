"""Recover a JSON array of records from free-form model output.

Model output is not guaranteed to be bare JSON: it may be wrapped in prose,
fenced in a markdown code block, or nested inside an object. Each strategy
below looks at the raw text one way and either returns a parsed value or
reports that it does not apply. The first parsed value that unwraps to a
valid batch wins.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from yt2clips.errors import UnparsableResponseError, ValidationError
from yt2clips.validator import CLIP_FIELDS, is_valid_batch

logger = logging.getLogger(__name__)

ARRAY_PATTERN = re.compile(r"\[[\s\S]*\]")
CODE_BLOCK_PATTERN = re.compile(r"```(?:json)?([\s\S]*?)```")

# Wrapper keys checked before falling back to the first array-valued property
WRAPPER_KEYS = ("clips", "contentClips", "results")


@dataclass(frozen=True)
class ParseAttempt:
    """A value parsed by one strategy."""
    strategy: str
    value: object


def _loads(text: str):
    """Strict JSON parse; returns None when the text is not JSON."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, ValueError, RecursionError):
        return None


def parse_bracket_substring(raw_text: str) -> Optional[ParseAttempt]:
    """Parse the greedy first-'[' to last-']' span."""
    match = ARRAY_PATTERN.search(raw_text)
    if not match:
        return None
    value = _loads(match.group(0))
    if value is None:
        logger.error("Failed to parse matched JSON array")
        return None
    return ParseAttempt("bracket_substring", value)


def parse_whole_text(raw_text: str) -> Optional[ParseAttempt]:
    """Parse the entire response as JSON."""
    value = _loads(raw_text.strip())
    if value is None:
        return None
    return ParseAttempt("whole_text", value)


def parse_code_block(raw_text: str) -> Optional[ParseAttempt]:
    """Parse the interior of the first fenced code block."""
    match = CODE_BLOCK_PATTERN.search(raw_text)
    if not match or not match.group(1).strip():
        return None
    value = _loads(match.group(1).strip())
    if value is None:
        return None
    return ParseAttempt("code_block", value)


STRATEGIES: tuple[Callable[[str], Optional[ParseAttempt]], ...] = (
    parse_bracket_substring,
    parse_whole_text,
    parse_code_block,
)


def unwrap_records(value):
    """
    Find the record array in a parsed value.

    Arrays are returned as-is. For objects, the well-known wrapper keys are
    tried in order, then the first array-valued property. Anything else
    yields None.
    """
    if isinstance(value, list):
        return value
    if not isinstance(value, dict):
        return None

    for key in WRAPPER_KEYS:
        if isinstance(value.get(key), list):
            return value[key]

    for item in value.values():
        if isinstance(item, list):
            return item
    return None


def extract(raw_text: str, required_fields: Sequence[str] = CLIP_FIELDS) -> ParseAttempt:
    """
    Run the strategy chain and return the first valid batch.

    Args:
        raw_text: Raw model output
        required_fields: Fields every record must carry

    Returns:
        The winning attempt, with the unwrapped record list as its value

    Raises:
        UnparsableResponseError: If no strategy could parse any JSON
        ValidationError: If JSON was found but never formed a valid batch
    """
    if not isinstance(raw_text, str) or not raw_text.strip():
        raise UnparsableResponseError("Empty model response")

    parsed_any = False
    for strategy in STRATEGIES:
        attempt = strategy(raw_text)
        if attempt is None:
            continue
        parsed_any = True

        records = unwrap_records(attempt.value)
        if records is not None and is_valid_batch(records, required_fields):
            logger.debug("Recovered %d records via %s", len(records), attempt.strategy)
            return ParseAttempt(attempt.strategy, records)
        logger.warning("Strategy %s produced an invalid batch", attempt.strategy)

    logger.error("All parsing attempts failed. Raw response: %s", raw_text)
    if parsed_any:
        raise ValidationError("Model response does not contain valid records")
    raise UnparsableResponseError("No valid JSON found in model response")


def extract_records(raw_text: str, required_fields: Sequence[str] = CLIP_FIELDS) -> list:
    """Return the record list recovered from raw model output."""
    return extract(raw_text, required_fields).value
