from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "dev"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"
    service_name: str = "robotutor-api"

    tutor_avatar: str = "edu-ardu"
    default_lesson_type: str = "introduction"
    max_suggestions: int = 4

    event_history_size: int = 200
    event_replay_last: int = 20

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
