"""
app/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; Docker Compose injects these at runtime.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "Job Application Intake API"
    app_version: str = "1.0.0"
    debug: bool = False

    # ── Server ─────────────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8081
    cors_allow_origins: List[str] = ["*"]
    static_dir: str = "static"

    # ── Document store (MongoDB) ───────────────────────────────────────────────
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "job_sprint"
    mongo_collection: str = "applications"
    store_timeout_seconds: float = 10.0

    # ── Uploads ────────────────────────────────────────────────────────────────
    max_upload_size: int = 5 * 1024 * 1024   # bytes, per file
    form_overhead_bytes: int = 1024          # allowance for text fields + multipart framing
    allowed_extensions: List[str] = [".jpg", ".png", ".pdf"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def max_request_size(self) -> int:
        """Upper bound for a whole /submit request body."""
        return self.max_upload_size + self.form_overhead_bytes


# Single shared instance — import this everywhere.
settings = Settings()
