from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Порядок выдачи результатов поиска: по id или в порядке вставки
    order_by_id: bool = True

    model_config = {"env_prefix": "DOCSTORE_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
