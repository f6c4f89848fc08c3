from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    app_env: str = "development"
    app_debug: bool = True
    app_port: int = 8000
    log_level: str = "INFO"

    # Backend REST API
    backend_url: str = "http://localhost:8000"
    api_prefix: str = "/api/v1"
    request_timeout_seconds: float = 30.0

    # Singleton site-settings record
    setting_id: str = "current"

    # Rich-text editor (TinyMCE)
    editor_api_key: str = ""

    # Brevo (credential delivery email)
    brevo_api_key: str = ""
    brevo_sender_email: str = "admin@example.com"
    brevo_sender_name: str = "Admin"
    login_url: str = "http://localhost:8501"

    # Session
    session_file: Path = Path.home() / ".cms_admin" / "session.json"
    revoke_on_logout: bool = True
    watchdog_interval_seconds: int = 60

    # Lists
    default_page_size: int = 10
    export_page_size: int = 10000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
