from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Core
    service_name: str = "linkedinese-service"
    environment: str = "local"
    log_level: str = "INFO"
    trace_console: bool = False

    # Providers, checked in order: Groq, OpenAI, DeepSeek
    groq_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None
    deepseek_api_key: Optional[str] = None
    deepseek_api_base_url: Optional[str] = None

settings = Settings()

def get_settings() -> Settings:
    return settings
