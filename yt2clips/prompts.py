"""Prompt text and prompt assembly for clip and topic extraction."""

MIN_CLIPS = 1
MAX_CLIPS = 10
DEFAULT_CLIPS = 5


CLIPS_SYSTEM_PROMPT = (
    "You are an AI assistant that specializes in analyzing video transcripts and "
    "extracting engaging clips for short-form content. Your responses should be in "
    "valid JSON array format only. DO NOT wrap your response in code blocks or add "
    "any explanations."
)

TOPICS_SYSTEM_PROMPT = (
    "You're an assistant that helps break down videos into simple sections with time "
    "stamps. Keep your language simple and clear. Make your summaries easy to "
    "understand, like you're explaining to a friend. Only reply with JSON - no extra text."
)


# Short-form clip extraction instructions
CLIP_INSTRUCTIONS = """# Instructions for Short-Form Content Extraction

## Overview
You are an AI specialized in identifying and extracting high-potential short-form content clips from YouTube video transcripts. Your task is to analyze the provided transcript and select the most engaging segments that would perform well as short-form videos on platforms like TikTok, Instagram Reels, and YouTube Shorts.

## Guidelines

1. Extract the most engaging, shareable, and high-potential short form content clips from the transcript.

2. Depending on the length of the original video, there should be at least one or two clips.

3. Focus on moments with emotional impact, surprising insights, or valuable quick tips.

4. Make sure every clip has clear and logical start and end points. It should not start out of nowhere or end without a conclusion.

5. Only include clips that are trendy, captivating, informative, intriguing, humorous, or otherwise engaging.

6. Use the exact timestamps from the transcript, from start to finish.

7. Give each clip a heading, a short summary, and a reason it was chosen, in natural and conversational language.

## Output Format
For each clip, provide the following information in JSON format:
- title: A catchy, descriptive title for the clip
- summary: A brief summary of what the clip contains
- startTimestamp: The exact starting timestamp in MM:SS format
- endTimestamp: The exact ending timestamp in MM:SS format
- reason: Why this clip would perform well as short-form content, in conversational language
"""

TOPIC_INSTRUCTIONS = """# How to Break Down This Video

## Your Job
Look at the video's transcript and divide it into clear sections with time stamps.

## What You Need to Do
1. Find the main topics in the video
2. Give each section a simple, clear title
3. Write a short, easy-to-understand summary for each section
4. Add the exact start and end times for each section
5. Make sure you cover the whole video from start to finish
6. Double-check your time stamps and summaries
"""

CLIP_SCHEMA = """[
  {
    "title": "Catchy title for the clip",
    "summary": "Brief description of the clip content",
    "startTimestamp": "MM:SS",
    "endTimestamp": "MM:SS",
    "reason": "Why this clip would perform well as short-form content"
  }
]"""

TOPIC_SCHEMA = """[
  {
    "title": "Short, clear title for this part",
    "summary": "Simple explanation of what happens in this part of the video",
    "startTimestamp": "MM:SS",
    "endTimestamp": "MM:SS"
  }
]"""


def clamp_clip_count(value, default: int = DEFAULT_CLIPS) -> int:
    """
    Coerce a requested clip count into the supported range.

    Anything that is not a positive number becomes the default; numbers are
    truncated and clamped to [MIN_CLIPS, MAX_CLIPS].
    """
    try:
        count = int(float(value))
    except (TypeError, ValueError, OverflowError):
        count = 0
    if not count:
        count = default
    return min(MAX_CLIPS, max(MIN_CLIPS, count))


def build_clips_prompt(formatted_transcript: str, num_clips=DEFAULT_CLIPS) -> str:
    """
    Build the user prompt for clip extraction.

    Args:
        formatted_transcript: Output of format_transcript_for_prompt
        num_clips: Requested number of clips (clamped to 1-10)

    Returns:
        Prompt text
    """
    count = clamp_clip_count(num_clips)
    return f"""{CLIP_INSTRUCTIONS}
Please extract exactly {count} short-form content clips from the transcript.

Here is the transcript (with timestamps):
{formatted_transcript}

IMPORTANT: You must respond ONLY with a valid JSON array (not an object) containing {count} clip objects with this structure:
{CLIP_SCHEMA}

DO NOT include any explanations, markdown formatting, or text outside of the JSON array. Your response must be a valid JSON array that can be parsed directly."""


def build_topics_prompt(formatted_transcript: str) -> str:
    """Build the user prompt for topic section extraction."""
    return f"""{TOPIC_INSTRUCTIONS}
Here is the transcript (with timestamps):
{formatted_transcript}

IMPORTANT: Your answer should ONLY be a simple JSON array with this structure:
{TOPIC_SCHEMA}

Don't add any extra text, markdown, or explanations - just the JSON array."""
