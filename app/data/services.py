from sqlalchemy import desc

from app.models import Service
from app.models.enums import RecordStatus
from app.data import records
from app.data.schemas import Schemas


def list_active_services(client):
    return client.query(Service).filter(Service.status == RecordStatus.ACTIVE.value) \
        .order_by(desc(Service.created_at)).all()


def list_services(client):
    return records.list_all(client, Service, desc(Service.created_at))


def get_service(client, service_id):
    return records.get_one(client, Service, service_id, 'Service')


def create_service(client, data):
    return records.create(client, Service, records.validated(Schemas.validate_service, data))


def update_service(client, service_id, data):
    values = records.validated(Schemas.validate_service, data)
    return records.replace(client, Service, service_id, values, 'Service')


def delete_service(client, service_id):
    return records.remove(client, Service, service_id, 'Service')
