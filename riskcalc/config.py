"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///riskcalc.db"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]  # Vite dev server

    # History
    history_key: str = "trades"  # Store key the trade list is saved under

    # Simulated price walk
    price_history_points: int = 20
    price_step_pct: float = 0.01  # Max move per step as a fraction of the last price

    model_config = {"env_prefix": "RC_", "env_file": ".env"}


settings = Settings()
