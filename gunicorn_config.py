"""
Gunicorn config for the OTP service; PORT comes from the hosting platform.
"""
import os

bind = "0.0.0.0:{}".format(os.environ.get("PORT", "8080"))
wsgi_app = "wsgi:app"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))
timeout = 30
accesslog = "-"
