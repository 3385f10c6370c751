"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Database paths
    data_path: str = os.getenv("DATA_PATH", os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
    database_name: str = "journal.db"

    @property
    def journal_db_path(self) -> str:
        return os.path.join(self.data_path, self.database_name)

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8082
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Emotion classifier (Hugging Face inference API)
    hf_api_key: str = ""
    hf_model_id: str = "michellejieli/emotion_text_classifier"
    hf_api_base: str = "https://api-inference.huggingface.co/models"
    classifier_timeout: float = 30.0
    model_loading_estimate: float = 20.0

    @property
    def classifier_url(self) -> str:
        return f"{self.hf_api_base}/{self.hf_model_id}"

    # Analytics windows
    trend_window_days: int = 30
    sleep_window_days: int = 14
    top_emotions_limit: int = 7

    class Config:
        env_prefix = "MINDSYNC_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
