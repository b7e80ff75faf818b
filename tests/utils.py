"""Shared test utilities."""

import re
from pathlib import Path

import yaml


def compile_all(*patterns: str) -> list[re.Pattern[str]]:
    return [re.compile(pattern) for pattern in patterns]


def create_yaml_config(config_dir: Path, filename: str, config_data: dict) -> Path:
    config_path = config_dir / filename
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


def create_text_config(config_dir: Path, filename: str, content: str) -> Path:
    config_path = config_dir / filename
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(content, encoding="utf-8")
    return config_path
