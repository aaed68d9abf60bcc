"""
Earth Engine Session

One authenticated Earth Engine session per process, created on first use.
The first caller authenticates while concurrent callers wait on the same
lock, so a burst of cold requests triggers a single ``ee.Initialize``.
Success is remembered; a failure is not, so the next request tries again.
"""

import json
import logging
import threading
from typing import Callable, Optional

from . import config

log = logging.getLogger(__name__)


def initialize_with_service_account(key_json: str, project: Optional[str] = None) -> None:
    """Authenticate with a service-account key (JSON text) and initialize ee."""
    import ee

    key = json.loads(key_json)
    email = key.get("client_email")
    if not email:
        raise ValueError("EE_PRIVATE_KEY is missing client_email")

    credentials = ee.ServiceAccountCredentials(email, key_data=key_json)
    ee.Initialize(credentials, project=project or key.get("project_id"))


class EarthEngineSession:
    def __init__(self, initializer: Callable[[str, Optional[str]], None] = initialize_with_service_account):
        self._initializer = initializer
        self._lock = threading.Lock()
        self._ready = False
        self.last_error: Optional[str] = None

    @property
    def ready(self) -> bool:
        return self._ready

    def ensure(self) -> bool:
        """
        Initialize once if a key is configured. Returns True when the session
        is usable; never raises.
        """
        if self._ready:
            return True
        if not config.ee_key_configured():
            self.last_error = "Earth Engine not configured"
            return False

        with self._lock:
            if self._ready:
                return True
            try:
                self._initializer(config.EE_PRIVATE_KEY, config.EE_PROJECT)
            except Exception as e:
                self.last_error = str(e)
                log.error(f"❌ Earth Engine initialization failed: {e}")
                return False
            self._ready = True
            self.last_error = None
            log.info("✅ Earth Engine initialized successfully")
            return True

    def reset(self) -> None:
        with self._lock:
            self._ready = False
            self.last_error = None


session = EarthEngineSession()
