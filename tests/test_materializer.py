"""Tests for turning validated records into clips and sections."""

import pytest

from yt2clips.materializer import (
    DEFAULT_REASON,
    DEFAULT_SUMMARY,
    DEFAULT_TITLE,
    NO_TRANSCRIPT_PLACEHOLDER,
    materialize_clip,
    materialize_clips,
    materialize_sections,
    parse_timestamp,
    resolve_time_range,
    slice_transcript,
)
from yt2clips.models import TranscriptItem

ITEMS = [
    TranscriptItem(text="a", offset=80000, duration=5000),
    TranscriptItem(text="b", offset=90000, duration=5000),
    TranscriptItem(text="c", offset=100000, duration=5000),
    TranscriptItem(text="d", offset=120000, duration=5000),
    TranscriptItem(text="e", offset=130000, duration=5000),
]

RECORD = {
    "title": "Pricing",
    "summary": "All about pricing",
    "startTimestamp": "01:30",
    "endTimestamp": "02:00",
    "reason": "Punchy",
}


class TestParseTimestamp:
    @pytest.mark.parametrize("value,expected", [
        ("01:30", 90000),
        ("[02:00]", 120000),
        ("0:05", 5000),
        ("75:00", 4500000),
    ])
    def test_parses(self, value, expected):
        assert parse_timestamp(value) == expected

    @pytest.mark.parametrize("value", ["abc", "5", "aa:bb", None, 90])
    def test_unparseable(self, value):
        assert parse_timestamp(value) is None


class TestResolveTimeRange:
    def test_valid(self):
        assert resolve_time_range("01:30", "02:00") == (90000, 120000)

    def test_end_before_start(self):
        assert resolve_time_range("02:00", "01:00") == (120000, 150000)

    def test_equal_bounds(self):
        assert resolve_time_range("01:00", "01:00") == (60000, 90000)

    def test_bad_start(self):
        assert resolve_time_range("soon", "01:00") == (0, 60000)

    def test_bad_end(self):
        assert resolve_time_range("01:00", "later") == (60000, 90000)

    def test_both_bad(self):
        assert resolve_time_range(None, None) == (0, 30000)

    def test_negative_start(self):
        assert resolve_time_range("-1:00", "00:10") == (0, 10000)


class TestSliceTranscript:
    def test_inclusive_bounds(self):
        assert slice_transcript(ITEMS, 90000, 120000) == "b c d"

    def test_empty_range(self):
        assert slice_transcript(ITEMS, 0, 1000) == ""


class TestMaterializeClip:
    def test_round_trip(self):
        clip = materialize_clip(RECORD, ITEMS)
        assert clip.start_time == 90000
        assert clip.end_time == 120000
        assert clip.start_time_formatted == "01:30"
        assert clip.end_time_formatted == "02:00"
        assert clip.transcript == "b c d"
        assert clip.reason == "Punchy"

    def test_defaults_for_missing_fields(self):
        clip = materialize_clip({"startTimestamp": "01:30", "endTimestamp": "02:00"}, ITEMS)
        assert clip.title == DEFAULT_TITLE
        assert clip.summary == DEFAULT_SUMMARY
        assert clip.reason == DEFAULT_REASON

    def test_snake_case_timestamps(self):
        clip = materialize_clip({"start_timestamp": "02:00", "end_timestamp": "02:10"}, ITEMS)
        assert (clip.start_time, clip.end_time) == (120000, 130000)
        assert clip.transcript == "d e"

    def test_placeholder_when_no_items_in_range(self):
        clip = materialize_clip(dict(RECORD, startTimestamp="10:00", endTimestamp="11:00"), ITEMS)
        assert clip.transcript == NO_TRANSCRIPT_PLACEHOLDER


class TestMaterializeClips:
    def test_bad_record_degrades_to_error_clip(self):
        clips = materialize_clips([RECORD, None, RECORD], ITEMS)
        assert len(clips) == 3
        assert clips[0].title == "Pricing"
        assert clips[1].title == "Content Clip"
        assert (clips[1].start_time, clips[1].end_time) == (0, 30000)
        assert clips[1].reason == "This is a fallback clip due to processing errors"
        assert clips[2].title == "Pricing"


class TestMaterializeSections:
    def test_sections(self):
        record = {k: v for k, v in RECORD.items() if k != "reason"}
        sections = materialize_sections([record], ITEMS)
        assert len(sections) == 1
        assert sections[0].transcript == "b c d"
        assert "reason" not in sections[0].to_dict()

    def test_failure_propagates(self):
        with pytest.raises(KeyError):
            materialize_sections([{"startTimestamp": "00:00", "endTimestamp": "00:10"}], ITEMS)
