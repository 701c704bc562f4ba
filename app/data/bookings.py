"""
Bookings: anonymous public submission and admin status management
"""
import hashlib
import json

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError

from app.extensions import db
from app.models import Booking
from app.models.enums import BookingStatus
from app.data import records
from app.data.errors import NotFound, Conflict
from app.data.packages import find_package_by_title, get_active_package
from app.data.schemas import Schemas

KEY_REUSED_MESSAGE = 'This Idempotency-Key was already used for a different booking'


def submission_fingerprint(values):
    """Stable hash of the cleaned submission fields"""
    fields = ('name', 'email', 'phone', 'date', 'persons', 'message', 'package_id', 'package_label')
    payload = json.dumps({field: values.get(field) for field in fields}, sort_keys=True, default=str)
    return hashlib.sha256(payload.encode('utf-8')).hexdigest()


def _replay(idempotency_key, fingerprint):
    """The booking first created with this key, None if the key is new"""
    existing = Booking.query.filter_by(idempotency_key=idempotency_key).first()
    if existing is None:
        return None
    if existing.submission_fingerprint != fingerprint:
        raise Conflict(KEY_REUSED_MESSAGE)
    return existing


def submit_booking(client, data, idempotency_key=None):
    """
    Create a pending booking from a public form submission.

    Required fields are checked before anything is read or written. A package
    may be referenced by id or by title (case-insensitive exact match); an
    unknown reference fails with "Package not found" and writes nothing.

    A repeated submission carrying the same ``idempotency_key`` and the same
    fields returns the row created the first time. The same key with different
    fields raises Conflict and reveals nothing about the stored row.

    Returns:
        (booking, created)
    """
    values = records.validated(Schemas.validate_booking_submission, data)
    fingerprint = submission_fingerprint(values)

    if idempotency_key:
        existing = _replay(idempotency_key, fingerprint)
        if existing is not None:
            return existing, False

    package_id = values.pop('package_id')
    package_label = values.pop('package_label')

    if not package_id and package_label:
        package = find_package_by_title(client, package_label)
        if package is None:
            raise NotFound('Package not found')
        package_id = package.id

    if package_id:
        get_active_package(client, package_id)

    booking = Booking(
        package_id=package_id,
        status=BookingStatus.PENDING.value,
        idempotency_key=idempotency_key or None,
        submission_fingerprint=fingerprint if idempotency_key else None,
        **values
    )

    try:
        client.insert(booking)
        db.session.commit()
    except IntegrityError:
        # Concurrent submission with the same key won the insert
        db.session.rollback()
        if not idempotency_key:
            raise
        existing = _replay(idempotency_key, fingerprint)
        if existing is None:
            raise
        return existing, False

    return booking, True


def list_bookings(client):
    return records.list_all(client, Booking, desc(Booking.created_at))


def get_booking(client, booking_id):
    return records.get_one(client, Booking, booking_id, 'Booking')


def update_booking_status(client, booking_id, data):
    """Change only the status of a booking"""
    values = records.validated(Schemas.validate_booking_status, data)
    return records.replace(client, Booking, booking_id, values, 'Booking')


def delete_booking(client, booking_id):
    return records.remove(client, Booking, booking_id, 'Booking')
