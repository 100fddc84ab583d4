"""
Input/Output helpers for examples.
"""
import json
from pathlib import Path
from typing import Any, Dict, Union

def ensure_outdir(path: Union[str, Path]) -> Path:
    """Ensure the output directory exists."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p

def write_json(data: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Write an example result dict to a JSON file."""
    p = Path(path)
    ensure_outdir(p.parent)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, default=str)
    return p

def write_snapshot(text: str, path: Union[str, Path]) -> Path:
    """Write an already-serialized node snapshot as-is."""
    p = Path(path)
    ensure_outdir(p.parent)
    p.write_text(text, encoding="utf-8")
    return p

def print_summary(result: Dict[str, Any]) -> None:
    """
    Print a summary of the example result to stdout.

    Expects result dict to have keys: 'name', 'config', 'outputs', 'artifacts'.
    """
    print("=" * 60)
    print(f"EXAMPLE: {result.get('name', 'Unknown')}")

    for section in ("config", "outputs", "artifacts"):
        values = result.get(section)
        if not values:
            continue
        print("-" * 60)
        print(f"{section.capitalize()}:")
        for k, v in values.items():
            print(f"  {k}: {v}")

    print("=" * 60)
