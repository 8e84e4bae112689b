"""
Gunicorn configuration.

Reads from pydantic_settings env for worker count and bind address.
structlog handles all logging — gunicorn just writes to stderr.
Run `manage.py collectstatic` before starting: WhiteNoise serves
STATIC_ROOT from inside each worker.
"""

import multiprocessing

from src.config.env import env

# ── Server socket ───────────────────────────────────────────────────────

bind = env.GUNICORN_BIND

# ── Workers ─────────────────────────────────────────────────────────────

workers = env.GUNICORN_WORKERS or (multiprocessing.cpu_count() * 2 + 1)
worker_class = "sync"

# ── Timeouts ────────────────────────────────────────────────────────────

timeout = 60
graceful_timeout = 30
keepalive = 5

# ── Logging ─────────────────────────────────────────────────────────────

accesslog = "-"
errorlog = "-"
loglevel = "info"

# ── Process naming ──────────────────────────────────────────────────────

proc_name = "staticmedia"

wsgi_app = "src.wsgi:application"
