from flask import Blueprint, abort, current_app, send_from_directory

from app.services.storage import StorageService

storage_bp = Blueprint('storage', __name__, url_prefix='/storage')


@storage_bp.route('/<bucket>/<path:filename>', methods=['GET'])
def serve_file(bucket, filename):
    """Public read access to uploaded objects"""
    if bucket not in current_app.config['STORAGE_BUCKETS']:
        abort(404)
    return send_from_directory(StorageService.bucket_path(bucket), filename)
