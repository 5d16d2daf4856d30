"""
Configuration management for the eventgraph API
"""

from pydantic_settings import BaseSettings

from .store.relations import ParticipantMatch


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # GraphQL
    graphiql: bool = True  # playground served on GET /graphql
    mutations_enabled: bool = True  # False serves the read-only schema
    event_participants_match: ParticipantMatch = ParticipantMatch.USER

    # Seed data
    seed_on_startup: bool = True
    seed_path: str | None = None  # bundled sample data when unset

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "EVENTGRAPH_"
        case_sensitive = False


# Global settings instance
settings = Settings()
