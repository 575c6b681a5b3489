"""Gunicorn configuration for production."""
import os

# Application factory
wsgi_app = "app:create_app()"

# Server socket
# Use PORT environment variable if available, otherwise the API's usual port
port = os.getenv("PORT", "4000")
bind = f"0.0.0.0:{port}"
backlog = 2048

# Worker processes
# Bookings and accounts live in process memory, so there is exactly one
# worker; requests are served concurrently by its threads.
workers = 1
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", "8"))
timeout = 60
keepalive = 5
graceful_timeout = 30

# Logging
accesslog = "-"  # stdout
errorlog = "-"  # stdout
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

capture_output = True
enable_stdio_inheritance = True

# Process naming
proc_name = "flight-search-api"

# Server mechanics
daemon = False
pidfile = None
umask = 0
user = None
group = None
tmp_upload_dir = None
