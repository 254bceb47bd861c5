# shard_router/config/logging.py

import json
import logging
from datetime import datetime, timezone

from shard_router.core.context import index_name_ctx, tenant_id_ctx

# extra= fields copied into the JSON line when present on the record
_EXTRA_FIELDS = ("shard", "shard_count", "routing_factor")


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "index_name": getattr(record, "index_name", None) or index_name_ctx.get(),
            "tenant_id": getattr(record, "tenant_id", None) or tenant_id_ctx.get(),
        }
        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                log_record[field] = getattr(record, field)
        return json.dumps(log_record)


def configure_logging(log_level: str):
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(handler)
