from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str
    port: int
    debug: bool
    access_password: str  # Shared secret exchanged for a session on login
    session_expire_minutes: int = 10
    database_url: str | None = None  # MongoDB URL with database name, e.g. mongodb://localhost/blogdesk (optional)
    github_token: str | None = None  # GitHub token for upload relay (optional)
    github_repo: str | None = None  # Target repository as 'owner/repo' (optional)
    github_branch: str = "main"  # Branch used to build raw.githubusercontent.com URLs

    model_config = {
        "env_file": [".env"],
        "env_prefix": "BLOGDESK_",
        "extra": "ignore",
    }