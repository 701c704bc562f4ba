"""
Admin API Blueprint
CRUD over every table for users with the admin role
"""
from flask import Blueprint

# Mounted under the /api blueprint, so routes live at /api/admin/...
admin_bp = Blueprint('admin', __name__, url_prefix='/admin')

# Import routes after blueprint creation to avoid circular imports
from . import dashboard, users, bookings, contacts, packages, places, cabs, services, upload
