"""Shared test fixtures and utilities."""

from unittest.mock import MagicMock

import pytest

from yt2clips.models import TranscriptItem


def make_openai_response(text="[]"):
    """Build a mock OpenAI ChatCompletion response."""
    msg = MagicMock()
    msg.content = text
    choice = MagicMock()
    choice.message = msg
    resp = MagicMock()
    resp.choices = [choice]
    return resp


def make_sdk_client(text="[]"):
    """Build a mock OpenAI SDK client whose completions return `text`."""
    sdk = MagicMock()
    sdk.chat.completions.create.return_value = make_openai_response(text)
    return sdk


@pytest.fixture
def sample_items():
    """Ten transcript lines, ten seconds apart."""
    return [
        TranscriptItem(text=f"line {i} talks about growth marketing strategy today", offset=i * 10000, duration=9000)
        for i in range(10)
    ]
