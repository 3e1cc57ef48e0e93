"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MDSTRIP_ prefix (e.g., MDSTRIP_BULLET_MARKER=-).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MDSTRIP_ prefix.

    Examples:
        MDSTRIP_BULLET_MARKER=*
        MDSTRIP_OUTPUT_SUFFIX=.plain
        MDSTRIP_TRACE_EVENTS=false
    """

    model_config = SettingsConfigDict(
        env_prefix="MDSTRIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Renderer configuration
    bullet_marker: str = Field(
        default="•",
        description="Marker written before each list item (followed by one space)",
    )

    trace_events: bool = Field(
        default=True,
        description="Report every consumed event on the debug log channel (verbosity 3)",
    )

    # Output configuration
    output_suffix: str = Field(
        default=".txt",
        description="Suffix of the plain-text file written by the CLI",
    )

    def outputName_make(self, stem: str) -> str:
        """
        Build the default output filename for an input file stem.

        Args:
            stem: Input filename without its extension

        Returns:
            Output filename (e.g., "notes.txt")

        Example:
            >>> settings = AppSettings()
            >>> settings.outputName_make("notes")
            'notes.txt'
        """
        return f"{stem}{self.output_suffix}"


# Singleton instance - import this in your code
appsettings = AppSettings()
