"""Tests for prompt assembly."""

import pytest

from yt2clips.prompts import build_clips_prompt, build_topics_prompt, clamp_clip_count


class TestClampClipCount:
    @pytest.mark.parametrize("value,expected", [
        (None, 5),
        ("abc", 5),
        (0, 5),
        (-3, 1),
        (42, 10),
        ("7", 7),
        (3.9, 3),
        (float("nan"), 5),
    ])
    def test_coerces(self, value, expected):
        assert clamp_clip_count(value) == expected


class TestBuildClipsPrompt:
    def test_embeds_count_transcript_and_schema(self):
        prompt = build_clips_prompt("[00:00] hello there", 7)
        assert "exactly 7 short-form content clips" in prompt
        assert "[00:00] hello there" in prompt
        for field in ("title", "summary", "startTimestamp", "endTimestamp", "reason"):
            assert f'"{field}"' in prompt
        assert "ONLY with a valid JSON array" in prompt
        assert "DO NOT include any explanations, markdown formatting" in prompt

    def test_clamps_count(self):
        assert "exactly 10 short-form" in build_clips_prompt("x", 99)
        assert "exactly 5 short-form" in build_clips_prompt("x", "lots")


class TestBuildTopicsPrompt:
    def test_embeds_transcript_and_schema(self):
        prompt = build_topics_prompt("[01:00] chapter two")
        assert "[01:00] chapter two" in prompt
        for field in ("title", "summary", "startTimestamp", "endTimestamp"):
            assert f'"{field}"' in prompt
        assert '"reason"' not in prompt
        assert "just the JSON array" in prompt
