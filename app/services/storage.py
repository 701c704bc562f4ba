import os
import time

from flask import current_app
from werkzeug.utils import secure_filename

from app.data.errors import ValidationFailed


class StorageService:
    """Public object storage for uploaded images, kept on the local filesystem"""

    @staticmethod
    def root():
        return current_app.config['STORAGE_ROOT']

    @staticmethod
    def bucket_path(bucket):
        return os.path.join(StorageService.root(), bucket)

    @staticmethod
    def public_url(bucket, path):
        base = current_app.config['STORAGE_PUBLIC_URL'].rstrip('/')
        return f"{base}/{bucket}/{path}"

    @staticmethod
    def save(bucket, folder, file):
        """
        Store an uploaded file under ``<bucket>/<folder>/<timestamp>-<name>``

        Args:
            bucket: one of STORAGE_BUCKETS
            folder: sub folder inside the bucket
            file: werkzeug FileStorage

        Returns:
            (public_url, path)
        """
        errors = {}
        bucket = (bucket or '').strip()
        if not bucket:
            errors['bucket'] = 'Missing bucket'
        elif bucket not in current_app.config['STORAGE_BUCKETS']:
            errors['bucket'] = 'Unknown bucket'

        filename = secure_filename(file.filename or '') if file else ''
        if not filename:
            errors['file'] = 'Missing file'
        else:
            extension = filename.rsplit('.', 1)[-1].lower() if '.' in filename else ''
            if extension not in current_app.config['ALLOWED_UPLOAD_EXTENSIONS']:
                errors['file'] = 'File type not allowed'

        folder = '/'.join(
            part for part in (secure_filename(p) for p in (folder or 'admin').split('/')) if part
        ) or 'admin'

        if errors:
            raise ValidationFailed(errors, message='Upload rejected', status_code=400)

        path = f"{folder}/{int(time.time() * 1000)}-{filename}"
        target = os.path.join(StorageService.bucket_path(bucket), *path.split('/'))
        os.makedirs(os.path.dirname(target), exist_ok=True)
        file.save(target)

        current_app.logger.info(f"Stored upload {bucket}/{path}")
        return StorageService.public_url(bucket, path), path
