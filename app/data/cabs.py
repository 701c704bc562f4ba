from sqlalchemy import desc

from app.models import Cab
from app.models.enums import RecordStatus
from app.data import records
from app.data.schemas import Schemas


def list_active_cabs(client):
    return client.query(Cab).filter(Cab.status == RecordStatus.ACTIVE.value).order_by(
        desc(Cab.featured), Cab.ordering, desc(Cab.created_at)
    ).all()


def list_cabs(client):
    return records.list_all(client, Cab, desc(Cab.created_at))


def get_cab(client, cab_id):
    return records.get_one(client, Cab, cab_id, 'Cab')


def create_cab(client, data):
    return records.create(client, Cab, records.validated(Schemas.validate_cab, data))


def update_cab(client, cab_id, data):
    values = records.validated(Schemas.validate_cab, data)
    return records.replace(client, Cab, cab_id, values, 'Cab')


def delete_cab(client, cab_id):
    return records.remove(client, Cab, cab_id, 'Cab')
