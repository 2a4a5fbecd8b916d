"""Application configuration via environment variables and defaults."""

from pydantic_settings import BaseSettings

#: Base URL of the WeWork group-robot webhook; the receiver key is appended.
DEFAULT_WEBHOOK_URL = "https://qyapi.weixin.qq.com/cgi-bin/webhook/send?key="


class Settings(BaseSettings):
    """Global configuration loaded from environment / ``.env`` file.

    Attributes:
        webhook_url: Webhook base URL.  The receiver's robot key is
            appended verbatim to build the delivery URL.
        request_timeout: Seconds before an outbound webhook POST is
            abandoned.
        log_level: Python logging level name.
        host: Bind address for the Uvicorn server.
        port: Bind port for the Uvicorn server.
    """

    webhook_url: str = DEFAULT_WEBHOOK_URL
    request_timeout: float = 10.0
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "WEWORKBOT_",
    }


def get_settings() -> Settings:
    """Return a cached :class:`Settings` instance.

    The instance is constructed once and reused for the lifetime of the
    process.
    """
    return _settings


_settings = Settings()
