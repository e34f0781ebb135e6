from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str
    AUTH_SECRET: str

    TOKEN_TTL_SECONDS: int = 60 * 60 * 24 * 7  # 7 dias
    LOG_LEVEL: str = "INFO"

    # conta admin garantida no startup (opcional)
    BOOTSTRAP_ADMIN_EMAIL: str = ""
    BOOTSTRAP_ADMIN_PASSWORD: str = ""
    BOOTSTRAP_ADMIN_NAME: str = "Admin User"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
