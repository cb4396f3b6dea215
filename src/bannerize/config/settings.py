"""Configuration settings for Bannerize."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from bannerize.domain import FontLayout


class FontConfig(BaseModel):
    """Layout of banner font files.

    The defaults describe the standard format: 95 printable ASCII glyphs
    (code points 32-126), each 8 rows tall followed by one separator row.
    """

    glyph_height: int = Field(
        default=8,
        ge=1,
        le=64,
        description="Content rows per glyph",
    )
    first_code_point: int = Field(
        default=32,
        ge=32,
        le=126,
        description="First character code defined by the font",
    )
    last_code_point: int = Field(
        default=126,
        ge=32,
        le=126,
        description="Last character code defined by the font (inclusive)",
    )

    @model_validator(mode="after")
    def _check_range(self) -> "FontConfig":
        if self.first_code_point > self.last_code_point:
            raise ValueError("first_code_point must not be greater than last_code_point")
        return self

    def to_layout(self) -> FontLayout:
        """Build the domain layout for these settings."""
        return FontLayout(
            glyph_height=self.glyph_height,
            first_code_point=self.first_code_point,
            last_code_point=self.last_code_point,
        )


class LibraryConfig(BaseModel):
    """Where banner fonts live and how they are looked up."""

    font_dir: Path = Field(
        default=Path("banners"),
        description="Directory containing banner font files",
    )
    extension: str = Field(
        default=".txt",
        description="File extension of banner font files",
    )
    default_banner: str = Field(
        default="standard",
        min_length=1,
        description="Banner used when none is requested",
    )
    cache_tables: bool = Field(
        default=False,
        description="Keep loaded glyph tables between renders",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BannerSettings(BaseModel):
    """Main application settings."""

    font: FontConfig = Field(default_factory=FontConfig)
    library: LibraryConfig = Field(default_factory=LibraryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BannerSettings:
    """Get default application settings."""
    return BannerSettings()
