"""
Sample YAML table definitions stored as strings.
"""

import copy
from typing import Any

import yaml

CONFIG_LOOT = """
metadata:
  name: "loot_drop"
  seed: 7

entries:
  - { value: "copper_coin", weight: 600 }
  - { value: "healing_potion", weight: 250 }
  - { value: "iron_sword", weight: 100 }
  - { value: "dragon_scale", weight: 45 }
  - { value: "phoenix_feather", weight: 5 }
"""

CONFIG_WEATHER = """
metadata:
  name: "weather"
  seed: 11

entries:
  - { value: "clear", weight: 50 }
  - { value: "cloudy", weight: 25 }
  - { value: "rain", weight: 15 }
  - { value: "storm", weight: 8 }
  - { value: "snow", weight: 2 }
"""

CONFIG_ENCOUNTERS = """
metadata:
  name: "encounters"
  seed: 23

entries:
  - value: "wolf_pack"
    weight: 30
  - value: "bandits"
    weight: 20
  - value: "merchant"
    weight: 20
  - value: "wandering_knight"
    weight: 10
  - value: "nothing"
    weight: 0
"""

_SAMPLE_CONFIGS = {
    "loot": CONFIG_LOOT,
    "weather": CONFIG_WEATHER,
    "encounters": CONFIG_ENCOUNTERS,
}


def available_sample_configs() -> list[str]:
    """Return sorted names for all built-in sample configurations."""

    return sorted(_SAMPLE_CONFIGS.keys())


def load_config(config: Any) -> dict[str, Any]:
    """Parse and normalize a config from YAML text or dict input."""

    if isinstance(config, dict):
        return copy.deepcopy(config)

    if isinstance(config, str):
        parsed = yaml.safe_load(config)
        if parsed is None:
            raise ValueError("Config text is empty")
        if not isinstance(parsed, dict):
            raise ValueError("Config must parse to a mapping")
        return parsed

    raise TypeError("Config must be a dict or YAML string")


def get_sample_config(name: str) -> dict[str, Any]:
    """Load one of the built-in sample configurations by name."""

    key = str(name).strip().lower()
    if key not in _SAMPLE_CONFIGS:
        options = ", ".join(available_sample_configs())
        raise ValueError(f"Unknown sample config '{name}'. Available: {options}")
    return load_config(_SAMPLE_CONFIGS[key])
