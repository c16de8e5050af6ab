from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./prayer.db"

    # Frontend URL for CORS
    frontend_url: str = "http://localhost:3000"

    # Vertex AI (Gemini) for prayer generation
    vertex_project_id: str = ""
    vertex_location: str = "us-central1"
    vertex_credentials_path: str = ""  # path to service account JSON; empty = use ADC
    gemini_model: str = "gemini-2.0-flash"

    # Sampling for the prayer itself (input transform uses its own, cooler settings)
    llm_temperature: float = 0.8
    llm_max_output_tokens: int = 800
    llm_presence_penalty: float = 0.1
    llm_frequency_penalty: float = 0.1

    # Ask the LLM to rephrase title/situation before building the prompt (offline transform otherwise)
    transform_input_with_llm: bool = True

    # Redis (optional read-through cache in front of prayer_cache; empty = DB only)
    redis_url: str = ""  # e.g. redis://localhost:6379/0

    # Prayer cache TTL (1 day)
    prayer_cache_ttl_hours: int = 24

    # Max learning patterns read per prompt
    learning_pattern_limit: int = 20

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
