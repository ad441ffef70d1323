"""Environment-backed settings for applications embedding the storage client."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class R2Settings(BaseSettings):
    """Storage client configuration settings.

    The client never instantiates this class itself. Applications create it
    (reading environment variables and an optional ``.env`` file) and hand it
    to ``Builder.from_settings``.
    """

    # S3-compatible storage configuration (Cloudflare R2, AWS S3, etc.)
    bucket_name: str = ""
    endpoint_url: str = ""
    access_key_id: str = ""
    secret_access_key: str = ""
    region: str = "auto"

    # Logging
    log_level: str = "INFO"
    log_file: str = ""
    log_colors: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
