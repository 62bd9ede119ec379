# run.py
# This is the main entry point for the portal.
# To start the server, run 'python run.py' in your terminal.
import atexit
import os

from school_portal import create_app

# Fails right away if MONGO_URI (or other config) is missing or malformed.
app = create_app()
atexit.register(app.extensions["document_store"].close)

if __name__ == '__main__':
    app.run(debug=os.getenv("FLASK_DEBUG", "0").lower() in ("1", "true", "yes"),
            port=int(os.getenv("PORT", "5001")))
