# school_portal/__init__.py
# This file contains the application factory. It reads the configuration,
# builds the document store handle and registers the blueprints.
from dotenv import load_dotenv
from flask import Flask, current_app, render_template

from .config import load_settings
from .store import DocumentStore


def get_store() -> DocumentStore:
    """The DocumentStore of the running app."""
    return current_app.extensions["document_store"]


def create_app(environ=None, store=None):
    """
    Creates and configures an instance of the Flask application.

    `environ` replaces os.environ (and skips .env loading) when given; `store`
    replaces the MongoDB-backed DocumentStore. Configuration errors raise
    ConfigError right here, before any request is served.
    """
    if environ is None:
        load_dotenv()
    settings = load_settings(environ)

    app = Flask(__name__, instance_relative_config=True)
    app.config.update(settings)

    if store is None:
        store = DocumentStore.from_config(settings)
    app.extensions["document_store"] = store

    with app.app_context():
        from .schools import schools_bp
        app.register_blueprint(schools_bp)

    @app.errorhandler(404)
    def not_found(e):
        return render_template('not_found.html'), 404

    @app.errorhandler(500)
    def internal_error(e):
        return render_template('error.html'), 500

    return app
