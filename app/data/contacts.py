from datetime import datetime, timezone

from sqlalchemy import desc

from app.extensions import db
from app.models import Contact
from app.models.enums import ContactStatus
from app.data import records
from app.data.schemas import Schemas


def submit_contact(client, data):
    """Store a public contact message as pending"""
    values = records.validated(Schemas.validate_contact_submission, data)
    contact = Contact(status=ContactStatus.PENDING.value, **values)
    client.insert(contact)
    db.session.commit()
    return contact


def list_contacts(client):
    return records.list_all(client, Contact, desc(Contact.created_at))


def get_contact(client, contact_id):
    return records.get_one(client, Contact, contact_id, 'Contact')


def update_contact_status(client, contact_id, data):
    values = records.validated(Schemas.validate_contact_status, data)
    if values['status'] == ContactStatus.REPLIED.value:
        values['replied_at'] = datetime.now(timezone.utc)
    return records.replace(client, Contact, contact_id, values, 'Contact')


def delete_contact(client, contact_id):
    return records.remove(client, Contact, contact_id, 'Contact')
