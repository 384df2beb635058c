# upload_api/config/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    environment: str = "development"
    debug: bool = False

    # 🔵 HTTP
    host: str = "0.0.0.0"
    port: int = 3000

    # Lista separada por vírgula. "*" libera qualquer origem.
    cors_origins_raw: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # 🟢 Uploads
    upload_dir: str = "./uploads"
    max_files_per_upload: int = Field(default=50, gt=0)

    # 🟠 Webhook (opcional)
    notifier_url: str | None = None
    notifier_timeout_seconds: float = Field(default=5.0, gt=0)

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("upload_dir", "notifier_url", "cors_origins_raw", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip().strip('"').strip("'")
        return v

    @field_validator("notifier_url")
    @classmethod
    def blank_url_disables_notifier(cls, v: str | None) -> str | None:
        return v or None

    @property
    def cors_origins(self) -> list[str] | str:
        parts = [p.strip() for p in (self.cors_origins_raw or "").split(",")]
        origins = [p for p in parts if p]
        if not origins or "*" in origins:
            return "*"
        return origins


settings = Settings()
