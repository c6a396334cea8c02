"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use CODEMARKUP_ prefix (e.g., CODEMARKUP_LEXICON_FILE=words.yaml).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use CODEMARKUP_ prefix.

    Examples:
        CODEMARKUP_ZERO_WIDTH_MARKER=&#8204;
        CODEMARKUP_FILTER_ILLEGAL_CHARS=false
        CODEMARKUP_LEXICON_FILE=lexicons/rx.yaml
    """

    model_config = SettingsConfigDict(
        env_prefix="CODEMARKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Pipeline configuration
    zero_width_marker: str = Field(
        default="&zwnj;",
        description="Marker inserted after '(' and before '.' by the e-book pipeline",
    )

    filter_illegal_chars: bool = Field(
        default=True,
        description="Silently drop characters that are illegal in XML (otherwise raise)",
    )

    lexicon_file: Optional[str] = Field(
        default=None,
        description="YAML file with keyword/known-type lists (built-in lists when unset)",
    )

    # Document configuration
    content_pattern: str = Field(
        default="*.html",
        description="Glob of content files formatted within the input directory",
    )

    # Stylesheet configuration
    stylesheet_style: str = Field(
        default="default",
        description="Pygments style the generated stylesheet takes its colours from",
    )

    stylesheet_name: str = Field(
        default="csharpcode.css",
        description="File name of the stylesheet written next to the formatted content",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
