import multiprocessing
import os

# Gunicorn Production Configuration
# Run: gunicorn -c gunicorn_config.py wsgi:app
bind = os.environ.get('BIND', '0.0.0.0:8000')

# State lives in the signed session cookie, so any worker can serve any visitor
workers = int(os.environ.get('WEB_CONCURRENCY', multiprocessing.cpu_count() * 2 + 1))
threads = 2
worker_class = 'gthread'

# Resilience
timeout = 30
max_requests = 1000
max_requests_jitter = 100
keepalive = 5

# Logging
accesslog = '-'       # Stdout
errorlog = '-'        # Stderr
loglevel = 'info'
capture_output = True
