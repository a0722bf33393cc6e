from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./notekeeper.db"
    SQL_ECHO: bool = False

    # Ключ, под которым хранится снимок всего контейнера заметок
    NOTES_STORAGE_KEY: str = "notes"
    # Одноразовый ключ для проверки доступности хранилища
    PROBE_KEY: str = "__storage_test__"

    DEBOUNCE_DELAY_MS: int = 300
    STORAGE_QUOTA_BYTES: int = 5 * 1024 * 1024  # 0 - без ограничения

    DELETE_ICON_SRC: str = "images/delete.png"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
