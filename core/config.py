from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_NAME: str = "geekpie_portfolio"
    # Full SQLAlchemy URL; takes precedence over the DB_* parts when set
    DATABASE_URL: str | None = None

    FRONTEND_URL: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"
    SESSION_TTL_DAYS: int = 30

    # Server-side upload directory and the URL path it is served under
    MEDIA_DIR: str = "uploads"
    MEDIA_URL_PATH: str = "/uploads"
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

    # Public static site tree rewritten by the generator
    SITE_ROOT: str = "site"
    SITE_NAME: str = "GeekPie"
    SITE_HOMEPAGE: str = "index.html"
    SITE_PAGE_TEMPLATE: str = "portfolio/mockup-3d/index.html"
    SITE_UPLOADS_DIR: str = "uploads"
    SITE_PROJECTS_DIR: str = "portfolio"
    SITE_AI_SECTORS_DIR: str = "ai-sector"

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    class Config:
        env_file = ".env"

settings = Settings()
