"""Config file discovery for the classifier API and tooling.

Settings live in `classifier.config.yaml`, looked up from the working
directory upwards. Each consumer reads its own top-level section; a file
without sections is treated as a single flat section.

Example classifier.config.yaml:
```yaml
api:
  host: 0.0.0.0
  port: 8000
  log_level: INFO
  auto_approve_threshold: 0.8
```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

CONFIG_FILENAME = "classifier.config.yaml"

# Top-level keys that mark a sectioned file
KNOWN_SECTIONS = frozenset({"api", "classifier"})


def find_config_file(start_path: str | Path | None = None) -> Path | None:
    """Return the nearest classifier.config.yaml at or above start_path.

    Args:
        start_path: Directory to start from (default: cwd).
    """
    current = Path(start_path) if start_path else Path.cwd()

    for directory in [current, *current.parents]:
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    return None


def load_yaml_file(config_file: str | Path) -> dict[str, Any]:
    """Parse a YAML config file.

    Missing files and empty documents both yield an empty dict. A document
    whose root is not a mapping raises ValueError.
    """
    import yaml

    path = Path(config_file)
    if not path.exists():
        return {}

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def load_section(section: str, config_file: str | Path | None = None) -> dict[str, Any]:
    """Load one section of the config file.

    Args:
        section: Section name, e.g. "api".
        config_file: Explicit file path. When None, nothing is loaded.

    Returns:
        The section's mapping. Flat files (no known section keys) are
        returned whole. Returns an empty dict when the file or section is
        absent.
    """
    if config_file is None:
        return {}

    data = load_yaml_file(config_file)
    if not KNOWN_SECTIONS.intersection(data):
        return data

    value = data.get(section)
    return dict(value) if isinstance(value, dict) else {}
