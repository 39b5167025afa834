# rcm_analyzer/__init__.py
import logging
import os

from flask import Flask
from flask_cors import CORS

from .config import config_by_name
from .database import init_db
from .services.failure_mode_service import FailureModeRepository
from .storage import create_store


def create_app(config_name='default', store=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.sort_keys = False

    logging.basicConfig(level=app.config['LOG_LEVEL'])

    # Persistence for the custom failure mode overlay
    if store is None:
        session_factory = None
        if app.config['STORE_BACKEND'] == 'sqlalchemy':
            db_uri = app.config['SQLALCHEMY_DATABASE_URI']
            if not db_uri:
                raise ValueError("SQLALCHEMY_DATABASE_URI is not set; define DATABASE_URI for the sqlalchemy store")
            if db_uri.startswith('sqlite:///'):
                os.makedirs(os.path.dirname(os.path.abspath(db_uri[len('sqlite:///'):])), exist_ok=True)
            session_factory = init_db(db_uri)
        store = create_store(app.config['STORE_BACKEND'], session_factory)

    app.extensions['failure_mode_repository'] = FailureModeRepository(store)

    # Enable CORS
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    from .api import api_blueprint
    app.register_blueprint(api_blueprint, url_prefix='/api/v1')

    @app.route("/health")
    def health_check():
        return "OK"

    app.logger.info(f"RCM Analyzer started with {app.config['STORE_BACKEND']} store")
    return app
