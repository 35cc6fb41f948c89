# gunicorn.conf.py
import os

bind = f"0.0.0.0:{os.getenv('PORT', '8070')}"
# Eén worker: de telemetry-teller leeft per proces en meerdere processen
# zouden elkaars dag-partitie overschrijven.
workers = 1
threads = int(os.getenv("WEB_THREADS", "4"))
worker_class = "uvicorn.workers.UvicornWorker"
preload_app = False
timeout = 120
graceful_timeout = 30  # ruimte voor de laatste flush bij shutdown
keepalive = 5
max_requests = 0  # geen worker-recycling: elke restart is een extra flush-moment
accesslog = "-"
errorlog = "-"
loglevel = "info"
