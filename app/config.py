"""
Application configuration loaded from environment variables.
Uses pydantic-settings so every value can be overridden via a .env file.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = "INFO"

    # ── Record store ──────────────────────────────────────────────────────────
    # "dynamodb" for real deployments, "memory" for a throwaway local store.
    store_backend: str = "dynamodb"

    # ── AWS ──────────────────────────────────────────────────────────────────
    aws_region: str = "us-east-1"
    # Leave blank to use the default credential chain (IAM role, env vars, …)
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""

    # ── DynamoDB ─────────────────────────────────────────────────────────────
    dynamodb_table_name: str = "vpc_records"
    # Set to a local DynamoDB endpoint for development (e.g. http://localhost:8001)
    dynamodb_endpoint_url: str = ""

    # ── HTTP ─────────────────────────────────────────────────────────────────
    # Comma-separated list of origins allowed to call the API from a browser.
    cors_allow_origins: str = "*"

    # ── Console ──────────────────────────────────────────────────────────────
    # Base URL the HTML console uses to reach the REST API.  Console handlers
    # are sync and hold a threadpool worker while they call /vpcs; when the
    # console and the API share one process, concurrent console requests can
    # exhaust the pool and the inner calls then fail after the timeout below.
    # Point this at a separate API deployment (or run several workers) for
    # anything beyond light use.
    console_api_base_url: str = "http://localhost:8000"
    console_api_timeout_seconds: float = 10.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    # ── Helpers ───────────────────────────────────────────────────────────────
    def get_cors_origins(self) -> list[str]:
        """Return the configured CORS origins as a list."""
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


settings = Settings()
