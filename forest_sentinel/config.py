# config.py
import os
from dotenv import load_dotenv, find_dotenv

# Load .env (auto-discover from project root or CWD); OS env still wins
load_dotenv(find_dotenv(usecwd=True), override=False)

def _opt(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name, default)
    if v is not None and not v.strip():
        return default
    return v

def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")

# --- Mode ---
APP_ENV = (_opt("APP_ENV", "development") or "development").lower()
PRODUCTION = APP_ENV == "production"

# --- Credentials (each optional outside production) ---
EE_PRIVATE_KEY      = _opt("EE_PRIVATE_KEY")
EE_PROJECT          = _opt("EE_PROJECT")
NASA_FIRMS_MAP_KEY  = _opt("NASA_FIRMS_MAP_KEY")
OPENWEATHER_API_KEY = _opt("OPENWEATHER_API_KEY")

# Value shipped in sample env files; treated as "not configured"
EE_PLACEHOLDER_KEY = '{"type":"service_account"}'

# --- Geocoding (Nominatim, no key) ---
NOMINATIM_URL       = _opt("NOMINATIM_URL", "https://nominatim.openstreetmap.org/search")
GEOCODE_TIMEOUT_SEC = float(_opt("GEOCODE_TIMEOUT_SEC", "10"))

# --- FIRMS ---
FIRMS_API_BASE  = _opt("FIRMS_API_BASE", "https://firms.modaps.eosdis.nasa.gov/api/area/csv")
FIRMS_SOURCE    = _opt("FIRMS_SOURCE", "MODIS_NRT")
FIRMS_DAY_RANGE = int(_opt("FIRMS_DAY_RANGE", "1"))
FIRMS_PUBLIC_CSV_URL = _opt(
    "FIRMS_PUBLIC_CSV_URL",
    "https://firms.modaps.eosdis.nasa.gov/data/active_fire/modis-c6.1/csv/"
    "MODIS_C6_1_USA_contiguous_and_Hawaii_24h.csv",
)
FIRMS_TIMEOUT_SEC        = float(_opt("FIRMS_TIMEOUT_SEC", "10"))
FIRMS_PUBLIC_TIMEOUT_SEC = float(_opt("FIRMS_PUBLIC_TIMEOUT_SEC", "30"))

# --- OpenWeather ---
OPENWEATHER_URL     = _opt("OPENWEATHER_URL", "https://api.openweathermap.org/data/2.5/weather")
WEATHER_TIMEOUT_SEC = float(_opt("WEATHER_TIMEOUT_SEC", "5"))

# --- HTTP / logging ---
USER_AGENT   = _opt("USER_AGENT", "ForestSentinel/1.0")
LOG_LEVEL    = _opt("LOG_LEVEL", "INFO")
CORS_ORIGINS = [o.strip() for o in (_opt("CORS_ORIGINS", "*") or "*").split(",") if o.strip()]


def ee_key_configured() -> bool:
    return bool(EE_PRIVATE_KEY) and EE_PRIVATE_KEY.strip() != EE_PLACEHOLDER_KEY


def missing_credentials() -> list[str]:
    """Names of the provider credentials that are not configured, in a stable order."""
    missing = []
    if not ee_key_configured():
        missing.append("EE_PRIVATE_KEY")
    if not NASA_FIRMS_MAP_KEY:
        missing.append("NASA_FIRMS_MAP_KEY")
    if not OPENWEATHER_API_KEY:
        missing.append("OPENWEATHER_API_KEY")
    return missing
