from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # PDF decoding
    line_break_threshold: float = 5.0  # Max y delta (PDF points) between tokens on one line
    use_pdf_line_flags: bool = True  # Use PyMuPDF line numbers instead of the y heuristic
    decode_workers: int = 2

    @field_validator("line_break_threshold")
    @classmethod
    def check_threshold(cls, v: float) -> float:
        """Reject negative thresholds, which would break every line."""
        if v < 0:
            raise ValueError("line_break_threshold must be >= 0")
        return v

    # Sessions
    session_expire_hours: int = 24
    cookie_domain: str | None = None

    # Frontend
    frontend_url: str = "http://localhost:3000"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rate limiting
    rate_limit_enabled: bool = False
    rate_limit_storage_uri: str = "memory://"
    rate_limit_general_per_minute: int = 100
    rate_limit_extract_per_minute: int = 30
    rate_limit_login_per_minute: int = 10

    # Request size limits
    max_request_size_bytes: int = 10 * 1024 * 1024  # 10MB

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
