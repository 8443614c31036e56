"""
Utility helpers shared across routers/services.
"""

from datetime import datetime, timezone


def utc_timestamp() -> str:
    """
    Instante atual em ISO-8601 UTC com milissegundos e sufixo Z
    (ex: 2024-05-01T12:30:00.123Z).
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
