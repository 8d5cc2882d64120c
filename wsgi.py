"""
WSGI entry point (Railway/Render/cPanel): gunicorn -c gunicorn_config.py wsgi:app
"""
import os

from app import create_app

app = create_app()
application = app

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=os.environ.get("FLASK_DEBUG", "false").lower() in ("true", "1"))
