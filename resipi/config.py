from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_key: str = Field(min_length=1)
    env: Env = Env.local
    html_dir: Path = Path(__file__).parent / "templates"
    core_model: str = "gemini-2.5-flash"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    initial_ingredients: list[str] = ["Santan", "Cili Padi", "Ayam"]
    max_sessions: int = 1000
    log_level: str = "INFO"
