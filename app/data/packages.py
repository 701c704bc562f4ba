from sqlalchemy import desc

from app.extensions import db
from app.models import Package, PackageImage, Booking
from app.models.enums import RecordStatus
from app.data import records
from app.data.errors import NotFound
from app.data.schemas import Schemas

PUBLIC_ORDER = (desc(Package.featured), desc(Package.created_at))


def _active(client):
    return client.query(Package).filter(Package.status == RecordStatus.ACTIVE.value)


def list_active_packages(client):
    """Active packages, featured first, newest first"""
    return _active(client).order_by(*PUBLIC_ORDER).all()


def list_featured_packages(client, limit=6):
    return _active(client).filter(Package.featured.is_(True)) \
        .order_by(desc(Package.created_at)).limit(limit).all()


def get_active_package(client, package_id):
    package = _active(client).filter(Package.id == package_id).first()
    if package is None:
        raise NotFound('Package not found')
    return package


def find_package_by_title(client, title):
    """Case-insensitive exact title match among active packages"""
    return _active(client) \
        .filter(db.func.lower(Package.title) == title.strip().lower()) \
        .first()


def list_packages(client):
    return records.list_all(client, Package, desc(Package.created_at))


def get_package(client, package_id):
    return records.get_one(client, Package, package_id, 'Package')


def create_package(client, data):
    values = records.validated(Schemas.validate_package, data)
    images = values.pop('images', None)
    package = records.create(client, Package, values)
    if images is not None:
        _set_gallery(package, images)
    return package


def update_package(client, package_id, data):
    values = records.validated(Schemas.validate_package, data)
    images = values.pop('images', None)
    package = records.replace(client, Package, package_id, values, 'Package')
    if images is not None:
        _set_gallery(package, images)
    return package


def delete_package(client, package_id):
    """Hard delete; bookings that referenced the package keep their row without it"""
    package = records.get_one(client, Package, package_id, 'Package')
    snapshot = package.to_dict()
    Booking.query.filter_by(package_id=package.id).update({'package_id': None})
    client.delete(package)
    db.session.commit()
    return snapshot


def _set_gallery(package, image_urls):
    package.images.delete()
    for url in image_urls:
        db.session.add(PackageImage(package_id=package.id, image_url=url))
    db.session.commit()
