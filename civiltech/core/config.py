
import os
from typing import List, Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "CivilTech API"
    API_PREFIX: str = "/api"

    # Database
    # DATABASE_URL wins when set, otherwise the MySQL parts below are used
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")
    MYSQL_USER: str = os.getenv("MYSQL_USER", "root")
    MYSQL_PASSWORD: str = os.getenv("MYSQL_PASSWORD", "")
    MYSQL_SERVER: str = os.getenv("MYSQL_SERVER", "localhost")
    MYSQL_PORT: str = os.getenv("MYSQL_PORT", "3306")
    MYSQL_DB: str = os.getenv("MYSQL_DB", "civiltech_db")
    USE_SQLITE: bool = False
    SQLITE_PATH: str = "./civiltech.db"

    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: Optional[float] = None  # None = wait for a connection forever
    AUTO_CREATE_DB: bool = True
    CREATE_OPTIONAL_TABLES: bool = True  # project_gis, project_documents

    # Uploads
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    UPLOAD_FILENAME_PREFIX: str = "file-"

    # Dashboard
    CIVIL_CATEGORY_ID: int = 1
    NOTIFICATION_FEED_LIMIT: int = 10

    # Errors / logging
    EXPOSE_DB_ERRORS: bool = True
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON: bool = True

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.USE_SQLITE:
            return f"sqlite:///{self.SQLITE_PATH}"
        return f"mysql+mysqlconnector://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}@{self.MYSQL_SERVER}:{self.MYSQL_PORT}/{self.MYSQL_DB}"

    @property
    def is_sqlite(self) -> bool:
        return self.SQLALCHEMY_DATABASE_URI.startswith("sqlite")

settings = Settings()
