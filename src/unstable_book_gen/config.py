"""
Configuration for unstable book generation.

Settings are read from ``BOOKGEN_*`` environment variables (and a ``.env``
file), or loaded from a YAML file with ``BookGenSettings.from_yaml``.
"""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from unstable_book_gen.errors import ConfigError


class BookGenSettings(BaseSettings):
    """Settings for unstable book generation.

    Attributes:
        doc_path: Location of the hand-written book sources, relative to the source root
        lang_features_dir: Section directory for language features
        lib_features_dir: Section directory for library features
        compiler_flags_dir: Section directory for compiler flags
        summary_file: Name of the generated table of contents
        lang_features_file: Language feature-gate table, relative to the source root
        skip_dirs: Directory names ignored while scanning for library features
        template_dir: Optional directory overriding the packaged templates
        log_level: Logging level
        log_format: Logging output format
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOKGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Book layout
    doc_path: Path = Path("doc/unstable-book/src")
    lang_features_dir: str = "lang-features"
    lib_features_dir: str = "lib-features"
    compiler_flags_dir: str = "compiler-flags"
    summary_file: str = "SUMMARY.md"

    # Feature extraction
    lang_features_file: Path = Path("libsyntax/feature_gate.rs")
    skip_dirs: list[str] = [
        "test", "tests", "target", "build", ".git", "doc", "etc", "llvm", "jemalloc",
    ]

    # Rendering
    template_dir: Path | None = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "BookGenSettings":
        """Load settings from a YAML file.

        Values in the file take precedence over environment variables.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            BookGenSettings instance

        Raises:
            ConfigError: If the file cannot be read or holds invalid values
        """
        try:
            with open(yaml_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load settings from {yaml_path}", cause=e) from e

        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {yaml_path} must contain a mapping")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BookGenSettings":
        """Create settings from a dictionary, wrapping validation failures."""
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings: {e.error_count()} error(s)", cause=e) from e

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain dictionary."""
        return {
            "doc_path": str(self.doc_path),
            "lang_features_dir": self.lang_features_dir,
            "lib_features_dir": self.lib_features_dir,
            "compiler_flags_dir": self.compiler_flags_dir,
            "summary_file": self.summary_file,
            "lang_features_file": str(self.lang_features_file),
            "skip_dirs": list(self.skip_dirs),
            "template_dir": str(self.template_dir) if self.template_dir else None,
            "log_level": self.log_level,
            "log_format": self.log_format,
        }


_settings: BookGenSettings | None = None


def get_settings() -> BookGenSettings:
    """Get or create the settings instance."""
    global _settings
    if _settings is None:
        _settings = BookGenSettings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
