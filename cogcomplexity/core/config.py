import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_FILE_NAMES = [
    ".cogcomplexity.yaml",
    ".cogcomplexity.yml",
    ".cogcomplexity.json",
]


DEFAULT_CONFIG: Dict[str, Any] = {
    "version": 1,
    "languages": {
        "enabled": [
            "typescript",
            "tsx",
            "javascript",
        ]
    },
    "scan": {
        "ignore_dirs": [
            ".git",
            ".hg",
            ".svn",
            ".idea",
            ".vscode",
            ".venv",
            "node_modules",
            "dist",
            "build",
            "coverage",
            "out",
        ],
        "max_file_size": 10 * 1024 * 1024,
        "max_workers": 4,
    },
    "reporting": {
        "format": "text",
        "fail_above": None,
    },
    "server": {
        "host": "127.0.0.1",
        "port": 5555,
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class Config:
    data: Dict[str, Any]

    @classmethod
    def load(cls, path: Optional[str]) -> "Config":
        if not path:
            return cls(DEFAULT_CONFIG)
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        raw = config_path.read_text(encoding="utf-8")
        if config_path.suffix.lower() in {".json"}:
            overrides = json.loads(raw)
        else:
            overrides = yaml.safe_load(raw) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return cls(_deep_merge(DEFAULT_CONFIG, overrides))

    def with_overrides(self, overrides: Dict[str, Any]) -> "Config":
        return Config(_deep_merge(self.data, overrides))

    def languages(self) -> set[str]:
        return set(self.data.get("languages", {}).get("enabled", []))

    def scan(self) -> Dict[str, Any]:
        return self.data.get("scan", {})

    def ignore_dirs(self) -> set[str]:
        return set(self.scan().get("ignore_dirs", []))

    def max_file_size(self) -> int:
        return int(self.scan().get("max_file_size", 10 * 1024 * 1024))

    def max_workers(self) -> int:
        return max(1, int(self.scan().get("max_workers", 4)))

    def reporting(self) -> Dict[str, Any]:
        return self.data.get("reporting", {})

    def fail_above(self) -> Optional[int]:
        value = self.reporting().get("fail_above")
        return None if value is None else int(value)

    def server(self) -> Dict[str, Any]:
        return self.data.get("server", {})


def find_config(start_path: str = ".") -> Optional[str]:
    """
    Find a configuration file by searching up the directory tree.

    Returns the path to the first config file found, or None.
    """
    current = Path(start_path).resolve()
    if current.is_file():
        current = current.parent

    while True:
        for name in CONFIG_FILE_NAMES:
            config_path = current / name
            if config_path.exists():
                return str(config_path)
        if current == current.parent:
            return None
        current = current.parent


def create_default_config() -> str:
    """Default configuration file content, as YAML."""
    config: Dict[str, Any] = {
        "languages": {"enabled": list(DEFAULT_CONFIG["languages"]["enabled"])},
        "scan": dict(DEFAULT_CONFIG["scan"]),
        "reporting": dict(DEFAULT_CONFIG["reporting"]),
        "server": dict(DEFAULT_CONFIG["server"]),
    }
    return yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
