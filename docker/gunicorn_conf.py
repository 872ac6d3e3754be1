import multiprocessing
import os

# gunicorn -c docker/gunicorn_conf.py morizo_web.main:app
bind = f"0.0.0.0:{os.getenv('PORT','3000')}"
workers = int(os.getenv("WEB_CONCURRENCY", str(multiprocessing.cpu_count()))) or 1
worker_class = "uvicorn.workers.UvicornWorker"
# Whisper uploads up to 10MB plus upstream round-trips
timeout = int(os.getenv("TIMEOUT", "120"))
keepalive = 5
graceful_timeout = 30
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
