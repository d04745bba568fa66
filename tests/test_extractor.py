"""Tests for recovering record arrays from model output."""

import json

import pytest

from yt2clips.errors import UnparsableResponseError, ValidationError
from yt2clips.extractor import extract, extract_records, unwrap_records
from yt2clips.validator import SECTION_FIELDS

CLIP = {
    "title": "A",
    "summary": "B",
    "startTimestamp": "00:05",
    "endTimestamp": "00:35",
    "reason": "C",
}
OTHER_CLIP = dict(CLIP, title="Other")


class TestExtract:
    def test_bare_array(self):
        attempt = extract(json.dumps([CLIP]))
        assert attempt.strategy == "bracket_substring"
        assert attempt.value == [CLIP]

    def test_array_wrapped_in_prose(self):
        raw = f"Here are your clips:\n{json.dumps([CLIP, OTHER_CLIP])}\nHope this helps!"
        assert extract_records(raw) == [CLIP, OTHER_CLIP]

    def test_fenced_response(self):
        raw = "Sure! Here you go: ```json\n" + json.dumps([CLIP]) + "\n```"
        assert extract_records(raw) == [CLIP]

    def test_code_block_used_when_bracket_span_is_not_json(self):
        raw = "Notes [draft]:\n```json\n" + json.dumps([CLIP]) + "\n```"
        attempt = extract(raw)
        assert attempt.strategy == "code_block"
        assert attempt.value == [CLIP]

    def test_code_block_without_language_tag(self):
        raw = "See [below]\n```\n" + json.dumps([CLIP]) + "\n```"
        assert extract(raw).strategy == "code_block"

    def test_wrapper_object_is_unwrapped(self):
        raw = json.dumps({"clips": [CLIP], "note": "see [1]"})
        attempt = extract(raw)
        assert attempt.strategy == "whole_text"
        assert attempt.value == [CLIP]

    def test_wrapper_key_priority(self):
        raw = json.dumps({"results": [OTHER_CLIP], "clips": [CLIP]})
        assert extract_records(raw) == [CLIP]

    def test_prose_brackets_around_fence(self):
        raw = "Example: [1, 2]\n```json\n" + json.dumps([CLIP]) + "\n```\nDone [ok]"
        # greedy bracket span runs from "[1, 2]" to "[ok]"
        assert extract(raw).strategy == "code_block"

    def test_section_fields(self):
        section = {k: v for k, v in CLIP.items() if k != "reason"}
        assert extract_records(json.dumps([section]), SECTION_FIELDS) == [section]

    def test_no_json_at_all(self):
        with pytest.raises(UnparsableResponseError):
            extract("I'm sorry, I can't help with that.")

    def test_empty_response(self):
        with pytest.raises(UnparsableResponseError):
            extract("   ")

    def test_deeply_nested_json_is_unparsable(self):
        with pytest.raises(UnparsableResponseError):
            extract("[" * 5000 + "]" * 5000)

    def test_parseable_but_invalid_records(self):
        with pytest.raises(ValidationError):
            extract(json.dumps([{"title": "only a title"}]))

    def test_one_bad_record_rejects_response(self):
        bad = dict(CLIP, endTimestamp="thirty seconds")
        with pytest.raises(ValidationError):
            extract(json.dumps([CLIP, bad]))


class TestUnwrapRecords:
    def test_list_returned_as_is(self):
        assert unwrap_records([1, 2]) == [1, 2]

    def test_first_array_property(self):
        assert unwrap_records({"meta": 1, "items": [1], "other": [2]}) == [1]

    def test_named_wrapper_beats_first_array(self):
        assert unwrap_records({"items": [1], "contentClips": [2]}) == [2]

    def test_no_array(self):
        assert unwrap_records({"title": "x"}) is None

    def test_scalar(self):
        assert unwrap_records("text") is None
