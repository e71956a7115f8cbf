from __future__ import annotations
import os
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://replay.thehax.pl"

def _getenv_int(name: str, default: int) -> int:
    """
    Entero desde el entorno; valor por defecto si falta o no es numérico.
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default

@dataclass(frozen=True)
class Settings:
    # discord
    DISCORD_TOKEN: str

    # thehax
    THEHAX_BASE_URL: str
    THEHAX_API_KEY: str
    THEHAX_TENANT_KEY: str
    THEHAX_PRIVATE: bool

    # login (opcional)
    THEHAX_USERNAME: str
    THEHAX_PASSWORD: str
    LOGIN_COOLDOWN_SEC: int

    # red
    HTTP_TIMEOUT_SEC: int

def load_settings() -> Settings:
    env_path = Path(__file__).resolve().parent.parent / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
    else:
        load_dotenv()

    DISCORD_TOKEN = os.getenv("DISCORD_TOKEN", "").strip()

    THEHAX_BASE_URL = os.getenv("THEHAX_BASE_URL", DEFAULT_BASE_URL).strip().rstrip("/") or DEFAULT_BASE_URL
    THEHAX_API_KEY = os.getenv("THEHAX_API_KEY", "").strip()
    THEHAX_TENANT_KEY = os.getenv("THEHAX_TENANT_KEY", "").strip()
    # solo "1" activa privado, igual que el formulario web
    THEHAX_PRIVATE = os.getenv("THEHAX_PRIVATE", "0").strip() == "1"

    THEHAX_USERNAME = os.getenv("THEHAX_USERNAME", "").strip()
    THEHAX_PASSWORD = os.getenv("THEHAX_PASSWORD", "")
    LOGIN_COOLDOWN_SEC = _getenv_int("THEHAX_LOGIN_COOLDOWN_SEC", 300)

    HTTP_TIMEOUT_SEC = _getenv_int("HTTP_TIMEOUT_SEC", 60)

    return Settings(
        DISCORD_TOKEN=DISCORD_TOKEN,
        THEHAX_BASE_URL=THEHAX_BASE_URL,
        THEHAX_API_KEY=THEHAX_API_KEY,
        THEHAX_TENANT_KEY=THEHAX_TENANT_KEY,
        THEHAX_PRIVATE=THEHAX_PRIVATE,
        THEHAX_USERNAME=THEHAX_USERNAME,
        THEHAX_PASSWORD=THEHAX_PASSWORD,
        LOGIN_COOLDOWN_SEC=LOGIN_COOLDOWN_SEC,
        HTTP_TIMEOUT_SEC=HTTP_TIMEOUT_SEC,
    )
