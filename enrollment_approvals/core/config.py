# enrollment_approvals/core/config.py
import os
from typing import ClassVar
from pydantic import BaseModel, Field

def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}

def _default_database_url() -> str:
    data_dir = os.path.abspath(os.getenv("DATA_DIR", "./data"))
    os.makedirs(data_dir, exist_ok=True)
    return os.getenv("DATABASE_URL", f"sqlite:///{os.path.join(data_dir, 'enrollments.db')}")

class Settings(BaseModel):
    # Constante (não vira campo Pydantic)
    DATA_DIR: ClassVar[str] = os.path.abspath(os.getenv("DATA_DIR", "./data"))

    DATABASE_URL: str = Field(default_factory=_default_database_url)
    SECRET_KEY: str = Field(default_factory=lambda: os.getenv("SECRET_KEY", "CHANGE_ME_SUPER_SECRET"))
    ALGORITHM: str = Field(default_factory=lambda: os.getenv("ALGORITHM", "HS256"))
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30")))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Regras de aprovação
    ADMIN_ROLE: str = Field(default_factory=lambda: os.getenv("ADMIN_ROLE", "Administrador"))
    APPROVAL_LOCK_TIMEOUT_SECONDS: float = Field(default_factory=lambda: float(os.getenv("APPROVAL_LOCK_TIMEOUT_SECONDS", "5")))
    DEFAULT_REJECTION_REASON: str = Field(default_factory=lambda: os.getenv("DEFAULT_REJECTION_REASON", "Sin especificar"))

    # Documentos ficam num storage externo; aqui só montamos a URL pública
    STORAGE_PUBLIC_URL: str = Field(default_factory=lambda: os.getenv("STORAGE_PUBLIC_URL", "/storage"))

    RUN_MIGRATIONS_ON_STARTUP: bool = Field(default_factory=lambda: _env_bool("RUN_MIGRATIONS_ON_STARTUP", "true"))
    SEED_ADMIN_EMAIL: str = Field(default_factory=lambda: os.getenv("SEED_ADMIN_EMAIL", "admin@local"))
    SEED_ADMIN_PASSWORD: str = Field(default_factory=lambda: os.getenv("SEED_ADMIN_PASSWORD", "admin12345"))

settings = Settings()
