"""All-or-nothing validation of model record batches."""

import logging
import re
from typing import Sequence

logger = logging.getLogger(__name__)

SECTION_FIELDS = ("title", "summary", "startTimestamp", "endTimestamp")
CLIP_FIELDS = SECTION_FIELDS + ("reason",)

TIMESTAMP_PATTERN = re.compile(r"\d{1,2}:\d{2}", re.ASCII)


def is_valid_timestamp(value) -> bool:
    """Check for MM:SS (one or two minute digits, two second digits)."""
    return isinstance(value, str) and TIMESTAMP_PATTERN.fullmatch(value) is not None


def is_valid_batch(records, required_fields: Sequence[str] = CLIP_FIELDS) -> bool:
    """
    Check a candidate batch against the record contract.

    The batch must be a non-empty list whose every element carries each
    required field as a non-empty string, with MM:SS start/end timestamps.
    One bad record invalidates the whole batch.

    Args:
        records: Parsed model output
        required_fields: CLIP_FIELDS or SECTION_FIELDS

    Returns:
        True if every record is valid
    """
    if not isinstance(records, list):
        logger.error("Parsed data is not an array: %r", records)
        return False

    if not records:
        logger.error("Parsed data is an empty array")
        return False

    for record in records:
        if not isinstance(record, dict):
            logger.error("Record is not an object: %r", record)
            return False

        for field in required_fields:
            value = record.get(field)
            if not isinstance(value, str) or not value:
                logger.error("Record missing or has invalid %s: %r", field, record)
                return False

        if not is_valid_timestamp(record.get("startTimestamp")) or not is_valid_timestamp(record.get("endTimestamp")):
            logger.error("Invalid timestamp format in record: %r", record)
            return False

    return True
