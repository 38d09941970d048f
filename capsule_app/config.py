"""Configuration helpers for the capsule wardrobe service."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_SUGGESTION_LIMIT = 5
DEFAULT_GREAT_MATCH_THRESHOLD = 60


@dataclass
class CapsuleConfig:
    """Configuration values for the capsule wardrobe service.

    ``catalog_path`` of ``None`` means the catalog bundled with the package.
    """

    catalog_path: Optional[str] = None
    log_level: str = "INFO"
    suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT
    great_match_threshold: int = DEFAULT_GREAT_MATCH_THRESHOLD
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "CapsuleConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is overridden key by key by upper-cased environment
        variables.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("CAPSULE_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        return cls(
            catalog_path=get_value("catalog_path") or None,
            log_level=str(get_value("log_level", "INFO") or "INFO").upper(),
            suggestion_limit=cls._as_int(get_value("suggestion_limit"), DEFAULT_SUGGESTION_LIMIT),
            great_match_threshold=cls._as_int(
                get_value("great_match_threshold"), DEFAULT_GREAT_MATCH_THRESHOLD
            ),
            environment=env_name,
        )

    @staticmethod
    def _as_int(value: Optional[str], default: int) -> int:
        if value in (None, ""):
            return default
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"Expected an integer config value, got {value!r}") from exc

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a flat ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
