# ABOUTME: The Flask app entry point, initializing the app and registering routes.
# ABOUTME: Sets up the Flask application and registers the routes defined in routes.py.

import logging
from config import Config
from routes import app as application

# Initialize Flask app
app = application

if __name__ == '__main__':
    # Gunicorn/Docker import `app` directly; this is only for `python app.py`
    logging.info(f"{Config.SITE_NAME} server running on http://localhost:{Config.PORT}")
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.FLASK_DEBUG)
