from flask import Flask
from app.extensions import db, migrate, jwt
from flask_cors import CORS
from config import Config



def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    CORS(app, origins=app.config.get('CORS_ORIGINS', '*'))

    # Token blocklist and JWT error responses
    from app.api.auth import tokens  # noqa: F401

    # Register Blueprints
    from app.api import api_bp
    from app.api.storage import storage_bp
    app.register_blueprint(api_bp)
    app.register_blueprint(storage_bp)

    from app.utils.api_response import register_error_handlers
    register_error_handlers(app)

    from app.db_init.cli import register_commands
    register_commands(app)

    return app
