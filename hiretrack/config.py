"""Application configuration."""
from pathlib import Path
from pydantic_settings import BaseSettings
from typing import List


DEFAULT_FIXTURES_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "HireTrack Recruitment Tracker"
    app_version: str = "1.0.0"

    # CORS
    allowed_origins: str = "http://localhost:5173,http://localhost:3000"

    # Fixtures loaded into the in-memory store at startup
    fixtures_dir: Path = DEFAULT_FIXTURES_DIR

    # Simulated backend latency
    simulate_latency: bool = True
    latency_scale: float = 1.0

    # Calendar
    calendar_timezone: str = "UTC"
    slot_horizon_days: int = 14
    upcoming_interview_days: int = 7

    # Dashboard
    recent_activity_limit: int = 8
    upcoming_task_limit: int = 5

    # Pipeline
    enforce_forward_stages: bool = False

    @property
    def allowed_origins_list(self) -> List[str]:
        """Get allowed origins as a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
