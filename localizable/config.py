"""Configuration management for the localizable converter."""

import os
import shutil
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Config:
    """Application configuration."""

    # External tools
    grep_path: str = field(
        default_factory=lambda: os.getenv("LOCALIZABLE_GREP_PATH", "/usr/bin/grep")
    )
    plutil_path: str = field(
        default_factory=lambda: os.getenv("LOCALIZABLE_PLUTIL_PATH", "/usr/bin/plutil")
    )

    # Timeouts in seconds
    search_timeout: float = field(
        default_factory=lambda: float(os.getenv("LOCALIZABLE_SEARCH_TIMEOUT", "60"))
    )
    convert_timeout: float = field(
        default_factory=lambda: float(os.getenv("LOCALIZABLE_CONVERT_TIMEOUT", "30"))
    )

    # Folder searched below the selected project
    dependency_dir_name: str = field(
        default_factory=lambda: os.getenv("LOCALIZABLE_DEPENDENCY_DIR", "Pods")
    )

    log_level: str = field(
        default_factory=lambda: os.getenv("LOCALIZABLE_LOG_LEVEL", "WARNING").upper()
    )

    # Strings table settings
    strings_extension: str = ".strings"
    default_output_name: str = "ConvertedLocalizable.strings"

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not shutil.which(self.grep_path):
            errors.append(f"Search tool not found: {self.grep_path}")
        if not shutil.which(self.plutil_path):
            errors.append(f"Property list tool not found: {self.plutil_path}")
        if self.search_timeout <= 0:
            errors.append("LOCALIZABLE_SEARCH_TIMEOUT must be positive")
        if self.convert_timeout <= 0:
            errors.append("LOCALIZABLE_CONVERT_TIMEOUT must be positive")
        return errors


# Global config instance
config = Config()
