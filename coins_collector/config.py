"""Configuration management for coins-collector."""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_BASE_DIR = Path.home() / ".coins-collector"


@dataclass
class Config:
    """coins-collector configuration."""

    resolver_url: str = ""  # Set via 'coins-collector config-cmd --resolver https://...'
    strict: bool = True
    timeout: float = 30.0

    def save(self, path: Path | None = None):
        """Save config to JSON file."""
        path = path or (DEFAULT_BASE_DIR / "config.json")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load config from JSON file, falling back to defaults."""
        path = path or (DEFAULT_BASE_DIR / "config.json")
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
                return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
            except (json.JSONDecodeError, TypeError, AttributeError) as e:
                logger.warning("Failed to load config from %s: %s. Using defaults.", path, e)
        return cls()
