# counsel_api/core/config.py
import os
from typing import ClassVar, List
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

def _default_database_url() -> str:
    data_dir = os.path.abspath(os.getenv("DATA_DIR", "./data"))
    os.makedirs(data_dir, exist_ok=True)
    return os.getenv("DATABASE_URL", f"sqlite:///{os.path.join(data_dir, 'counsel.db')}")

def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]

def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}

class Settings(BaseModel):
    DATA_DIR: ClassVar[str] = os.path.abspath(os.getenv("DATA_DIR", "./data"))

    DATABASE_URL: str = Field(default_factory=_default_database_url)
    SECRET_KEY: str = Field(default_factory=lambda: os.getenv("SECRET_KEY", "CHANGE_ME_SUPER_SECRET"))
    ALGORITHM: str = Field(default_factory=lambda: os.getenv("ALGORITHM", "HS256"))
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")))
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "http://localhost:5173")))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    RUN_MIGRATIONS_ON_STARTUP: bool = Field(default_factory=lambda: _env_flag("RUN_MIGRATIONS_ON_STARTUP"))

settings = Settings()

# maior valor de uma coluna INTEGER (ids de programa e de conta)
MAX_ID = 2_147_483_647
