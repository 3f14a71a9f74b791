"""Gunicorn config: `gunicorn crypto_stats.main:app`."""
import os

# Bind to PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Uvicorn async workers. Each worker keeps its own price cache, so every
# worker reads each file once on first use. Tune via WEB_CONCURRENCY env var.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

timeout = 60

# Graceful timeout for shutdown
graceful_timeout = 30

keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("CRYPTO_STATS_LOG_LEVEL", "info").lower()
