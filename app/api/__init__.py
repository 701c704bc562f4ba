# Routes package
from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from app.api.public import public_bp
from app.api.admin import admin_bp
from app.api.auth import auth_bp

api_bp.register_blueprint(public_bp)
api_bp.register_blueprint(admin_bp)
api_bp.register_blueprint(auth_bp)
