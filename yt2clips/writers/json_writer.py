"""Writer for JSON format."""

import json
from pathlib import Path


def write_json(result: dict, output_path: Path) -> None:
    """Write an extraction result ({"contentClips": [...]} etc.) to a JSON file."""
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(result, f, indent=2, ensure_ascii=False)
