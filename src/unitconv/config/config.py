"""
Configuration management for unitconv.
"""
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel


class Config(BaseModel):
    """Configuration class for the unit converter."""

    # Definition file lookup
    definition_file: Optional[Path] = None  # explicit path, skips the search
    definition_file_name: str = "convert.def"
    home_subdir: str = "bin"

    # Output
    output_precision: int = 8  # significant digits
    list_name_width: int = 12

    # Conversion search
    max_search_depth: int = 10000

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_yaml(cls, path: Path) -> "Config":
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        definition_file = os.getenv("UNITCONV_DEFINITION_FILE")
        return cls(
            definition_file=Path(definition_file) if definition_file else None,
            definition_file_name=os.getenv("UNITCONV_DEFINITION_FILE_NAME", "convert.def"),
            home_subdir=os.getenv("UNITCONV_HOME_SUBDIR", "bin"),
            output_precision=int(os.getenv("UNITCONV_OUTPUT_PRECISION", "8")),
            list_name_width=int(os.getenv("UNITCONV_LIST_NAME_WIDTH", "12")),
            max_search_depth=int(os.getenv("UNITCONV_MAX_SEARCH_DEPTH", "10000")),
            log_level=os.getenv("UNITCONV_LOG_LEVEL", "WARNING"),
        )

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        config_path = Path("config.yaml")
        if config_path.exists():
            return cls.from_yaml(config_path)
        return cls.from_env()
