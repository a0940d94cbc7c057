"""Battle engine configuration.

Tune these without touching the combat logic. Values can come from code, a
plain dictionary or a YAML file.
"""

from dataclasses import dataclass, fields
from typing import Any, Optional

import yaml


@dataclass(frozen=True)
class BattleConfig:
    """Engine-level settings.

    Attributes:
        max_rounds: Optional cap on rounds fought before the battle is
            declared a stalemate (None, the default, fights until one fleet
            is gone or no ship can deal damage)
        side_a_label: Name of the first fleet in battle messages
        side_b_label: Name of the second fleet in battle messages
    """
    max_rounds: Optional[int] = None
    side_a_label: str = "Player"
    side_b_label: str = "Enemy"

    def __post_init__(self):
        if self.max_rounds is not None and self.max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1, got {self.max_rounds}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BattleConfig":
        """Create configuration from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_yaml(cls, path: str) -> "BattleConfig":
        """Load configuration from the ``battle`` section of a YAML file (or its root)."""
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise FileNotFoundError(f"Battle config not found: {path}")

        if not isinstance(data, dict):
            raise ValueError(f"Battle config {path} must contain a mapping")
        return cls.from_dict(data.get("battle", data))
