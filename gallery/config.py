from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

from .log_level import LogLevel

class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="GALLERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    # Logging
    log_level: LogLevel = Field(default=LogLevel.COLLECTION, description="Verbosity of the gallery log")

    # Pricing rule for new exhibitions
    base_price: float = Field(default=1000.0, description="Starting price of every new exhibition")
    painting_year_rate: float = Field(default=50.0, description="Price added per year of age for paintings")
    sculpture_year_rate: float = Field(default=30.0, description="Price added per year of age for sculptures")

    # File System Configuration
    project_root: Optional[Path] = None
    data_dir: Optional[Path] = None
    logs_dir: Optional[Path] = None
    data_file: Optional[Path] = None

    def initialize_paths(self, project_root: Path) -> None:
        """Initialize path configurations based on project root.

        Paths already set (e.g. from ``GALLERY_DATA_FILE``) are kept.
        """
        self.project_root = project_root
        if self.data_dir is None:
            self.data_dir = project_root / 'data'
        if self.logs_dir is None:
            self.logs_dir = self.data_dir / 'logs'
        if self.data_file is None:
            self.data_file = self.data_dir / 'exhibitions.json'

        # Ensure all directories exist
        self._ensure_directories()

    def _ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        directories = [
            self.data_dir,
            self.logs_dir,
            self.data_file.parent if self.data_file else None,
        ]

        for directory in directories:
            if directory:  # Check if not None before creating
                directory.mkdir(parents=True, exist_ok=True)

# Create global settings instance
settings = Settings()
