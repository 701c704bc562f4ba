from flask import request, current_app

from app.api.admin import admin_bp
from app.data import DataError
from app.services.storage import StorageService
from app.utils.decorators import admin_required
from app.utils.api_response import APIResponse


@admin_bp.route('/upload', methods=['POST'])
@admin_required()
def upload_file(client):
    """
    Store an image and return its public URL
    
    Form fields:
        bucket: target bucket (packages, places, cabs, services, admin)
        folder: folder inside the bucket (default: admin)
        file: the file
    """
    try:
        public_url, path = StorageService.save(
            request.form.get('bucket'),
            request.form.get('folder', 'admin'),
            request.files.get('file')
        )
        return APIResponse.success(
            {'publicUrl': public_url, 'path': path},
            message='File uploaded successfully',
            status_code=201
        )
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Upload error: {str(e)}")
        return APIResponse.error("Upload failed", status_code=500)
