"""
storefront/utils/logging.py
───────────────────────────
Configures structured logging for the storefront.
"""
import os
import logging
from logging.handlers import RotatingFileHandler
from flask import request

FILE_HANDLER   = 'storefront-file'
STREAM_HANDLER = 'storefront-stdout'


class RequestFormatter(logging.Formatter):
    """
    Custom formatter that injects request info (IP, URL)
    into logs if context is available.
    """
    def format(self, record):
        if request:
            record.url = request.url
            record.remote_addr = request.remote_addr
        else:
            record.url = None
            record.remote_addr = None
        return super().format(record)


def setup_logging(app):
    """
    Configure logging for the app.

    File:   logs/app.log (only when LOG_TO_FILE is on)
            Max size 5MB, 5 backups
            Format: timestamp | level | module | ip | url | message
    Stdout: always, timestamp | level | message

    app.logger is shared by every app built in one process (tests build many),
    so each handler is named and only attached once.
    """
    attached = {h.name for h in app.logger.handlers}

    if app.config.get('LOG_TO_FILE') and FILE_HANDLER not in attached:
        try:
            log_dir = os.path.join(app.root_path, '..', 'logs')
            os.makedirs(log_dir, exist_ok=True)

            file_handler = RotatingFileHandler(
                os.path.join(log_dir, 'app.log'),
                maxBytes=5 * 1024 * 1024,
                backupCount=5
            )
            file_handler.setFormatter(RequestFormatter(
                '%(asctime)s | %(levelname)s | %(name)s | %(remote_addr)s | %(url)s | %(message)s'
            ))
            file_handler.set_name(FILE_HANDLER)
            file_handler.setLevel(logging.INFO)
            app.logger.addHandler(file_handler)
        except OSError as exc:
            # Read-only filesystem: stdout below still works
            app.logger.warning(f"File logging disabled: {exc}")

    # Stdout logger (picked up by gunicorn / container logs)
    if STREAM_HANDLER not in attached:
        stream_handler = logging.StreamHandler()
        stream_handler.set_name(STREAM_HANDLER)
        stream_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s'
        ))
        stream_handler.setLevel(logging.DEBUG if app.debug else logging.INFO)
        app.logger.addHandler(stream_handler)

    app.logger.setLevel(logging.DEBUG if app.debug else logging.INFO)
    app.logger.info(f"{app.config.get('SHOP_NAME', 'Storefront')} storefront startup")
