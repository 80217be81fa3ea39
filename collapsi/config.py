from __future__ import annotations

import os

LOG_LEVEL = os.getenv("COLLAPSI_LOG_LEVEL", "INFO").upper()
MAX_GAMES = int(os.getenv("COLLAPSI_MAX_GAMES", "50"))
AUDIT_AFTER_MUTATION = (
    os.getenv("COLLAPSI_AUDIT_AFTER_MUTATION", "true").lower() != "false"
)
LEGAL_MOVE_CACHE_SIZE = int(os.getenv("COLLAPSI_LEGAL_MOVE_CACHE_SIZE", "1024"))
