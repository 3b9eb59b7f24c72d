from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExtractionSettings(BaseSettings):
    """Settings for text extraction."""

    model_config = SettingsConfigDict(env_prefix="EXTRACTION_")

    # Base directory that relative resource paths resolve against
    base_dir: Path = Field(default_factory=Path.cwd, description="Process base directory")

    # OCR settings
    tessdata_dir: Path = Field(default=Path("tessdata"), description="Tesseract language data directory")
    ocr_language: str = Field(default="eng", description="OCR language")

    def resolve(self, path: Path) -> Path:
        """Resolve ``path`` against :attr:`base_dir` unless it is absolute."""
        path = Path(path)
        return path if path.is_absolute() else self.base_dir / path

    @property
    def tessdata_path(self) -> Path:
        return self.resolve(self.tessdata_dir)


class ClassifierSettings(BaseSettings):
    """Settings for the text classification pipeline."""

    model_config = SettingsConfigDict(env_prefix="CLASSIFIER_", protected_namespaces=())

    # Model artifact
    model_dir: Path = Field(default=Path("models"), description="Directory holding the model artifact")
    model_filename: str = Field(default="textModel.joblib", description="Model artifact file name")

    # Featurization
    n_features: int = Field(default=2 ** 16, description="Hashed dimensionality per vectorizer")
    word_ngram_max: int = Field(default=2, description="Largest word n-gram")
    char_ngram_range: Tuple[int, int] = Field(default=(2, 4), description="Character n-gram range")

    # Classifier
    regularization_c: float = Field(default=10.0, description="Inverse regularization strength")
    max_iter: int = Field(default=1000, description="Maximum optimizer iterations")
    random_state: int = Field(default=0, description="Seed for the optimizer")

    @field_validator("char_ngram_range")
    @classmethod
    def check_ngram_range(cls, v):
        """Reject inverted or empty n-gram ranges."""
        low, high = v
        if low < 1 or high < low:
            raise ValueError(f"invalid character n-gram range: {v}")
        return v

    def model_path(self, base_dir: Path) -> Path:
        """Full path of the model artifact for the given base directory."""
        model_dir = Path(self.model_dir)
        if not model_dir.is_absolute():
            model_dir = Path(base_dir) / model_dir
        return model_dir / self.model_filename


class LoggingSettings(BaseSettings):
    """Settings for logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_")

    # Log level
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format")

    # Log files
    log_file: Optional[Path] = Field(default=None, description="Log file path")
    log_file_level: str = Field(default="DEBUG", description="Log file level")
    max_log_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, description="Number of log file backups")

    # Console logging
    console_logging: bool = Field(default=True, description="Enable console logging")
    console_log_level: str = Field(default="INFO", description="Console log level")

    # Structured logging
    json_logging: bool = Field(default=False, description="Enable JSON formatted logging")

    @field_validator("log_level", "log_file_level", "console_log_level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper()


class Settings(BaseSettings):
    """Main settings class that combines all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = Field(default="development", description="Environment (development, staging, production)")

    # Configuration sections
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    classifier: ClassifierSettings = Field(default_factory=ClassifierSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Override settings based on environment
        if self.environment == "production":
            self.logging.log_level = "WARNING"
        elif self.environment == "staging":
            self.logging.log_level = "INFO"
        else:  # development
            self.logging.log_level = "DEBUG"

    @property
    def model_path(self) -> Path:
        return self.classifier.model_path(self.extraction.base_dir)


# Global settings instance
settings = Settings()

# Convenience imports for easy access
__all__ = [
    "Settings",
    "ExtractionSettings",
    "ClassifierSettings",
    "LoggingSettings",
    "settings",
]
