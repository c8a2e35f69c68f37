"""Root logger setup for benchmark runs.

Plain text by default.  With ``LINEAGE_BENCH_STRUCTURED_LOGGING=true`` every
record is emitted as a single-line JSON object so benchmark logs can be
ingested by log aggregators without regex parsing.

Output schema per line::

    {
        "timestamp": "2025-05-15T12:34:56.789012+00:00",
        "level": "INFO",
        "logger": "lineage_bench.workload.seeder",
        "message": "Inserted 51 ARTIFACT types",
        "family": "ARTIFACT",        // present when passed via ``extra``
        "count": 51,                 // present when passed via ``extra``
        "exc_info": "Traceback ..."  // present only on exceptions
    }
"""

from __future__ import annotations

import json
import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from lineage_bench.config import BenchSettings

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Structured fields that workload modules attach via ``extra={...}``.
_EXTRA_FIELDS = ("family", "count", "specification", "run_id")


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Render *record* as a single JSON line."""
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in _EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_info"] = "".join(traceback.format_exception(*record.exc_info))

        return json.dumps(payload, default=str, ensure_ascii=False)


def configure_logging(settings: BenchSettings) -> None:
    """Replace the root logger's handlers according to *settings*."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = logging.StreamHandler()
    if settings.structured_logging:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)
