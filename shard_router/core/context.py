# shard_router/core/context.py

import contextvars

index_name_ctx = contextvars.ContextVar("index_name", default=None)
tenant_id_ctx = contextvars.ContextVar("tenant_id", default=None)
