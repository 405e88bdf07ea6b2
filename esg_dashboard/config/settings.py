from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    esg_api_base_url: str = "http://localhost:4000/api"
    esg_api_token: str = ""
    request_timeout: float = 30.0
    cors_origins: list[str] = ["http://localhost:5173"]
    log_level: str = "INFO"
    evaluation_cache_size: int = 64

    class Config:
        env_file = ".env"
        env_prefix = "ESG_"
