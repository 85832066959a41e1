from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Database - embedded SQLite through aiosqlite
    database_url: str = "sqlite+aiosqlite:///./data/green_campus.db"
    sql_echo: bool = False

    # Storage
    upload_dir: str = "./data/tree_photos"
    photo_url_prefix: str = "/tree_photos"
    max_upload_bytes: int = 10 * 1024 * 1024  # 10MB

    # CORS - allow the SPA dev server
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173", "*"]

    # Auth
    jwt_secret: str = "changeme"
    jwt_algorithm: str = "HS256"
    token_expire_days: int = 7
    bcrypt_rounds: int = 12

    # Fixed admin credentials
    admin_username: str = "admin"
    admin_password: str = "admin"

    # Mail (empty smtp_host = log only)
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_use_tls: bool = True
    mail_from: str = "no-reply@greencampus.edu"
    mail_from_name: str = "Green Campus"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"


# Shipped defaults that must be overridden outside development
INSECURE_DEFAULTS = {
    "jwt_secret": "changeme",
    "admin_username": "admin",
    "admin_password": "admin",
}


def insecure_defaults_in_use(config: Settings) -> List[str]:
    return [name for name, value in INSECURE_DEFAULTS.items() if getattr(config, name) == value]


settings = Settings()
