# ----------------------------
# Shared HTTP session (no retries: a failed call falls to the next rung)
# ----------------------------
import requests

from . import config


def http_session() -> requests.Session:
    s = requests.Session()
    a = requests.adapters.HTTPAdapter(max_retries=0, pool_connections=10, pool_maxsize=50)
    s.mount("http://", a)
    s.mount("https://", a)
    s.headers.update({"User-Agent": config.USER_AGENT})
    return s


SESSION = http_session()
