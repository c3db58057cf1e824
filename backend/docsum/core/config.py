from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    app_name: str = "docsum"
    environment: str = "dev"
    database_url: str = "sqlite:///./docsum.db"
    public_base_url: str = "http://localhost:8000"

    jwt_secret: str = "CHANGE_ME_FOR_PROD_0123456789abcdef"
    jwt_algorithm: str = "HS256"
    jwt_issuer: str | None = None
    jwt_audience: str | None = None

    upload_dir: str = "/data/uploads"
    max_upload_bytes: int = 50 * 1024 * 1024

    redis_url: str = "redis://redis:6379/0"
    rq_queue_name: str = "summaries"
    rq_default_timeout: int = 1200
    summary_pipeline_task: str = "pipeline.tasks.generate_summaries"
    rate_limit_per_min: int = 60

    log_level: str = "INFO"


settings = Settings()
