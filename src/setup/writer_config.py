from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class WriterSettings(BaseSettings):
    """Configuration for the detached task writer used by create."""
    WRITE_TIMEOUT_SECONDS: float = 10.0
    WRITER_CONCURRENCY: int = 4

    model_config = ConfigDict(env_file=".env", extra="ignore")

def get_writer_settings() -> WriterSettings:
    """Return a fresh writer settings instance."""
    return WriterSettings()
