"""Test-run settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ideoz E2E configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Target application
    base_url: str = Field(
        default="https://app-test.ideoz.ai/", description="Application under test"
    )
    environment: str = Field(default="test", description="Environment label")

    # Logging
    debug: bool = Field(default=False, description="Pretty console logs")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level"
    )
    ci: bool = Field(default=False, description="Running on CI")

    # Browser
    headed: bool = Field(default=False, description="Run the browser headed")
    slow_mo: int = Field(default=0, ge=0, description="Delay between browser operations (ms)")
    viewport_width: int = Field(default=1280, ge=320, description="Viewport width")
    viewport_height: int = Field(default=720, ge=240, description="Viewport height")
    accept_language: str = Field(
        default="en-US,en;q=0.9", description="Accept-Language header for every request"
    )

    # Timeouts (in milliseconds)
    expect_timeout_ms: int = Field(default=10_000, ge=0)
    action_timeout_ms: int = Field(default=15_000, ge=0)
    navigation_timeout_ms: int = Field(default=30_000, ge=0)
    ai_response_timeout_ms: int = Field(default=30_000, ge=0)
    login_success_timeout_ms: int = Field(default=10_000, ge=0)

    # UI settle delays (in milliseconds)
    ui_settle_ms: int = Field(default=1_000, ge=0, description="Pause after attach/send/drop")
    drag_settle_ms: int = Field(default=500, ge=0, description="Pause after drag events")
    state_check_delay_ms: int = Field(
        default=2_000, ge=0, description="Pause before sampling a form outcome"
    )

    # Uploads
    max_upload_kb: int = Field(default=100, ge=1, description="Upload size limit (KB)")
    test_files_dir: Path = Field(
        default=Path("test-files"), description="Generated upload fixtures"
    )

    # Artifacts
    results_dir: Path = Field(default=Path("test-results"), description="Reports directory")
    artifact_dirs: list[str] = Field(
        default=["test-results", "playwright-report", "screenshots", "videos", "traces"],
        description="Directories created at session start",
    )
    temp_dirs: list[str] = Field(
        default=["temp", ".temp", "tmp"], description="Directories removed at session end"
    )
    cleanup_temp_files: bool = Field(default=False, description="Remove temp_dirs at the end")
    warm_up: bool = Field(default=True, description="Probe the app before the e2e session")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate application URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v

    @property
    def viewport(self) -> dict[str, int]:
        """Viewport in the shape Playwright expects."""
        return {"width": self.viewport_width, "height": self.viewport_height}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
