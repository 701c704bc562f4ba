"""
Public API
Read access to active catalogue rows and anonymous booking/contact submission
"""
from flask import Blueprint

public_bp = Blueprint('public', __name__)

from . import catalogue, submissions
