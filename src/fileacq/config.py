from __future__ import annotations

"""Configuration models.

CONTRACT
- Inputs: YAML file path (fileacq.yaml) or dictionary data
- Outputs (required):
  - Validated FileAcqConfig (DemoConfig + IoConfig)
- Invariants:
  - Missing keys fall back to defaults
  - chunk_size is positive; create_mode is a permission int in [0, 0o7777]
- Failure:
  - Raises ValueError on invalid schema or unreadable YAML
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "fileacq.yaml"


@dataclass(frozen=True)
class DemoConfig:
    first_path: str = "hello.txt"
    second_path: str = "hello2.txt"


@dataclass(frozen=True)
class IoConfig:
    chunk_size: int = 8192
    encoding: str = "utf-8"
    create_mode: int = 0o666


@dataclass(frozen=True)
class FileAcqConfig:
    demo: DemoConfig = field(default_factory=DemoConfig)
    io: IoConfig = field(default_factory=IoConfig)


CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "demo": {
            "type": "object",
            "properties": {
                "first_path": {"type": "string", "minLength": 1},
                "second_path": {"type": "string", "minLength": 1},
            },
            "additionalProperties": False,
        },
        "io": {
            "type": "object",
            "properties": {
                "chunk_size": {"type": "integer", "minimum": 1},
                "encoding": {"type": "string", "minLength": 1},
                "create_mode": {"type": "integer", "minimum": 0, "maximum": 0o7777},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


def parse_config(data: dict[str, Any]) -> FileAcqConfig:
    import jsonschema  # lazy import

    try:
        jsonschema.validate(instance=data, schema=CONFIG_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ValueError(f"Invalid {CONFIG_FILENAME} schema: {e.message}") from e

    demo_raw = data.get("demo", {}) or {}
    io_raw = data.get("io", {}) or {}
    return FileAcqConfig(
        demo=DemoConfig(
            first_path=str(demo_raw.get("first_path", "hello.txt")),
            second_path=str(demo_raw.get("second_path", "hello2.txt")),
        ),
        io=IoConfig(
            chunk_size=int(io_raw.get("chunk_size", 8192)),
            encoding=str(io_raw.get("encoding", "utf-8")),
            create_mode=int(io_raw.get("create_mode", 0o666)),
        ),
    )


def load_config(path: Path) -> FileAcqConfig:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {CONFIG_FILENAME} schema: top level must be a mapping")
    return parse_config(data)


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Config Loader CLI")
    parser.add_argument("--config", required=True, help="Path to fileacq.yaml")
    args = parser.parse_args()

    try:
        cfg = load_config(Path(args.config))
        print(f"Demo: {cfg.demo}")
        print(f"IO: {cfg.io}")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
