from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Uploads whose extracted text is shorter than this are rejected as "insufficient text"
    min_text_length: int = 50
    max_upload_size_mb: int = 5
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="RESUME_EXTRACTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


settings = Settings()
