# src/meetingbot/config.py
"""
Configuration loader for MeetingBot.
Loads configuration from YAML files and environment variables.
"""

from typing import Dict, Any, Optional
from pathlib import Path
import yaml
import os
import re
from pydantic import BaseModel, ConfigDict
import logging

logger = logging.getLogger(__name__)


class AppConfig(BaseModel):
    """Main MeetingBot configuration."""
    
    model_config = ConfigDict(extra="allow")
    
    # Environment
    environment: str = "development"
    port: int = 3000
    
    # Store
    database_type: str = "sqlite"  # or "supabase"
    database_uri: str = "meetingbot.db"
    supabase_url: str = ""
    supabase_key: str = ""
    
    # Auth
    jwt_secret: str = "secret"
    jwt_expiration: str = "1h"
    
    # Logging
    log_level: str = "INFO"
    
    # Cache
    cache_enabled: bool = True
    redis_host: str = ""
    redis_port: int = 6379
    redis_password: str = ""
    meeting_stats_cache_ttl: int = 3600
    dashboard_stats_cache_ttl: int = 3600
    
    @property
    def is_test(self) -> bool:
        return self.environment == "test"
    
    @property
    def redis_url(self) -> Optional[str]:
        """Build a redis:// URL from host/port/password, or None if no host."""
        if not self.redis_host:
            return None
        auth = f":{self.redis_password}@" if self.redis_password else ""
        return f"redis://{auth}{self.redis_host}:{self.redis_port}/0"
    
    @property
    def jwt_expiration_seconds(self) -> int:
        return parse_duration(self.jwt_expiration)


_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_DURATION_UNITS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value: str) -> int:
    """
    Parse a duration like "90", "30m", "1h" or "7d" into seconds.
    
    Raises:
        ValueError: if the value is not a recognised duration
    """
    match = _DURATION_RE.match(str(value))
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return int(amount) * _DURATION_UNITS[unit]


# env var -> (field, caster)
_ENV_FIELDS = {
    "MEETINGBOT_ENV": ("environment", str),
    "PORT": ("port", int),
    "DATABASE_TYPE": ("database_type", str),
    "DATABASE_URI": ("database_uri", str),
    "SUPABASE_URL": ("supabase_url", str),
    "SUPABASE_KEY": ("supabase_key", str),
    "JWT_SECRET": ("jwt_secret", str),
    "JWT_EXPIRATION": ("jwt_expiration", str),
    "LOG_LEVEL": ("log_level", str),
    "CACHE_ENABLED": ("cache_enabled", lambda v: v.lower() in ("true", "1", "yes")),
    "REDIS_HOST": ("redis_host", str),
    "REDIS_PORT": ("redis_port", int),
    "REDIS_PASSWORD": ("redis_password", str),
    "MEETING_STATS_CACHE_TTL": ("meeting_stats_cache_ttl", int),
    "DASHBOARD_STATS_CACHE_TTL": ("dashboard_stats_cache_ttl", int),
}


class ConfigLoader:
    """Load and manage MeetingBot configuration."""
    
    def __init__(self, config_dir: str = "config"):
        """
        Initialize config loader.
        
        Args:
            config_dir: Directory containing config files
        """
        self.config_dir = Path(config_dir)
        self.config: Optional[AppConfig] = None
        self.load()
    
    def load(self) -> AppConfig:
        """Load configuration from YAML and environment variables."""
        
        env = os.getenv("MEETINGBOT_ENV", "development")
        config_file = self.config_dir / f"{env}.yaml"
        
        # Load default config first
        values = self._load_yaml(self.config_dir / "default.yaml")
        
        # Override with environment-specific config
        if config_file.exists():
            values.update(self._load_yaml(config_file))
        else:
            logger.debug(f"Config file not found: {config_file}, using defaults")
        
        # Override with environment variables
        values.update(self._load_from_env())
        
        self.config = AppConfig(**values)
        
        logger.info(f"Configuration loaded (environment: {self.config.environment}, "
                    f"store: {self.config.database_type})")
        
        return self.config
    
    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML config file."""
        if not path.exists():
            return {}
        
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
                return data or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load YAML config {path}: {e}")
            return {}
    
    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config = {}
        for env_name, (field_name, cast) in _ENV_FIELDS.items():
            raw = os.getenv(env_name)
            if raw is None or raw == "":
                continue
            try:
                config[field_name] = cast(raw)
            except ValueError:
                logger.warning(f"Ignoring invalid value for {env_name}: {raw!r}")
        return config
    
    def get(self) -> AppConfig:
        """Get current configuration."""
        if not self.config:
            self.load()
        return self.config


# Global config instance
_global_config_loader: Optional[ConfigLoader] = None


def get_config() -> AppConfig:
    """Get the global MeetingBot configuration."""
    global _global_config_loader
    if _global_config_loader is None:
        _global_config_loader = ConfigLoader()
    return _global_config_loader.get()
