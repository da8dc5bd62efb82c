"""
Application configuration management.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Database
    database_url: str = "mysql+aiomysql://root@localhost:3306/lintbot"
    
    # Redis
    redis_url: str = "redis://localhost:6379/0"
    job_queue_prefix: str = "queue"
    
    # Application
    log_level: str = "INFO"
    fanout_concurrency: int = 8
    stale_review_seconds: int = 3600
    
    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
