"""Root conftest: shared test configuration."""

import os

# Module-level games_api.main.app is built at import; keep it off the real disk
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("LOG_FORMAT", "text")
