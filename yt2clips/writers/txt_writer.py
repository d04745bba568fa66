"""Writer for readable TXT format with timestamps."""

from pathlib import Path


def format_entry(entry: dict) -> str:
    """
    Format one clip or section as a text block.

    Format: [MM:SS - MM:SS] title, followed by summary, reason and transcript
    """
    lines = [f"[{entry['startTimeFormatted']} - {entry['endTimeFormatted']}] {entry['title']}"]
    lines.append(f"Summary: {entry['summary']}")
    if entry.get('reason'):
        lines.append(f"Why: {entry['reason']}")
    lines.append(f"Transcript: {entry['transcript']}")
    return "\n".join(lines)


def write_txt(result: dict, output_path: Path) -> None:
    """Write every clip or section of a result to a TXT file."""
    entries = result.get('contentClips') or result.get('topicSections') or []
    with open(output_path, 'w', encoding='utf-8') as f:
        for entry in entries:
            f.write(format_entry(entry))
            f.write("\n\n" + "-" * 60 + "\n\n")
