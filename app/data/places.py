from sqlalchemy import desc, or_

from app.models import Place
from app.models.enums import RecordStatus
from app.data import records
from app.data.errors import NotFound
from app.data.schemas import Schemas


def list_active_places(client):
    """Active places: featured first, then manual ordering, then newest"""
    return client.query(Place).filter(Place.status == RecordStatus.ACTIVE.value).order_by(
        desc(Place.featured), Place.ordering, desc(Place.created_at)
    ).all()


def get_active_place(client, slug_or_id):
    place = client.query(Place).filter(
        Place.status == RecordStatus.ACTIVE.value,
        or_(Place.slug == slug_or_id, Place.id == slug_or_id)
    ).first()
    if place is None:
        raise NotFound('Place not found')
    return place


def list_places(client):
    return records.list_all(client, Place, desc(Place.created_at))


def get_place(client, place_id):
    return records.get_one(client, Place, place_id, 'Place')


def create_place(client, data):
    return records.create(client, Place, records.validated(Schemas.validate_place, data))


def update_place(client, place_id, data):
    values = records.validated(Schemas.validate_place, data)
    return records.replace(client, Place, place_id, values, 'Place')


def delete_place(client, place_id):
    return records.remove(client, Place, place_id, 'Place')
