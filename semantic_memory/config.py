"""
Configuration module for Semantic Memory.

Loads application settings from config.yaml and secrets from environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Default config file path
CONFIG_FILE = Path(__file__).parent.parent / "config.yaml"


def _load_yaml_config() -> dict:
    """Load configuration from YAML file."""
    if CONFIG_FILE.exists():
        with open(CONFIG_FILE) as f:
            return yaml.safe_load(f) or {}
    return {}


# Load YAML config once at module import
_yaml_config = _load_yaml_config()


def _get_yaml(section: str, key: str, default=None):
    """Get a value from the YAML config."""
    return _yaml_config.get(section, {}).get(key, default)


@dataclass
class EmbeddingConfig:
    """Embedding service configuration."""
    provider: Literal["http", "openai"] = field(
        default_factory=lambda: _get_yaml("embedding", "provider", "http")
    )
    # Env var wins so deployments can point at a different endpoint
    base_url: str = field(
        default_factory=lambda: os.getenv(
            "EMBEDDING_BASE_URL", _get_yaml("embedding", "base_url", "")
        )
    )
    path: str = field(
        default_factory=lambda: _get_yaml("embedding", "path", "/embeddings")
    )
    model: str = field(
        default_factory=lambda: _get_yaml("embedding", "model", "text-embedding-3-large")
    )
    timeout: float = field(
        default_factory=lambda: _get_yaml("embedding", "timeout", 30.0)
    )
    # None = use model's default dimensions (openai provider only)
    dimensions: int | None = field(
        default_factory=lambda: _get_yaml("embedding", "dimensions", None)
    )
    # Secret from .env, only used by the openai provider
    api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))


@dataclass
class MemoryConfig:
    """Vector memory search defaults."""
    default_limit: int = field(
        default_factory=lambda: _get_yaml("memory", "default_limit", 5)
    )
    min_similarity: float = field(
        default_factory=lambda: _get_yaml("memory", "min_similarity", 0.0)
    )


@dataclass
class AppConfig:
    """Application settings from YAML."""
    log_level: str = field(
        default_factory=lambda: _get_yaml("logging", "level", "INFO")
    )


@dataclass
class Config:
    """Main configuration container."""
    embedding: EmbeddingConfig = field(default_factory=EmbeddingConfig)
    memory: MemoryConfig = field(default_factory=MemoryConfig)
    app: AppConfig = field(default_factory=AppConfig)

    def setup_logging(self) -> logging.Logger:
        """Configure and return the application logger."""
        # Reset existing handlers to ensure clean configuration
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)

        logging.basicConfig(
            level=getattr(logging, self.app.log_level.upper()),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        return logging.getLogger("semantic_memory")

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of missing/invalid settings.

        Returns:
            List of validation error messages, empty if all valid.
        """
        errors = []

        if self.embedding.provider == "http" and not self.embedding.base_url:
            errors.append("embedding.base_url (or EMBEDDING_BASE_URL) is required for the http provider")
        elif self.embedding.provider == "openai" and not self.embedding.api_key:
            errors.append("OPENAI_API_KEY is required when using the openai embedding provider")
        elif self.embedding.provider not in ("http", "openai"):
            errors.append(f"Unknown embedding provider: {self.embedding.provider}")

        if self.memory.default_limit <= 0:
            errors.append("memory.default_limit must be positive")

        if self.app.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level: {self.app.log_level}")

        return errors


# Global configuration instance
config = Config()
