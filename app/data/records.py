"""
Generic admin CRUD over one table

Every helper starts with ``client.require_admin()``; the caller's data
function only supplies the model, its schema and its ordering.
"""
from app.extensions import db
from app.data.errors import NotFound, ValidationFailed


def validated(validate, data):
    """Run a schema and raise ValidationFailed on errors"""
    is_valid, errors, cleaned_data = validate(data or {})
    if not is_valid:
        raise ValidationFailed(errors)
    return cleaned_data


def list_all(client, model, *order_by):
    client.require_admin()
    return client.query(model).order_by(*order_by).all()


def get_one(client, model, row_id, label):
    client.require_admin()
    row = client.get(model, row_id)
    if row is None:
        raise NotFound(f'{label} not found')
    return row


def create(client, model, values):
    client.require_admin()
    row = model(**values)
    client.insert(row)
    db.session.commit()
    return row


def replace(client, model, row_id, values, label):
    """Overwrite every editable field; last writer wins"""
    row = get_one(client, model, row_id, label)
    client.update(row, values)
    db.session.commit()
    return row


def remove(client, model, row_id, label):
    """Hard delete; returns the row as it was, serialised"""
    row = get_one(client, model, row_id, label)
    snapshot = row.to_dict()
    client.delete(row)
    db.session.commit()
    return snapshot
