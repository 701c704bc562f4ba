from flask import current_app
from sqlalchemy import func, desc

from app.api.admin import admin_bp
from app.data import DataError
from app.models import Package, Booking, Contact, Place, Cab, Service, User
from app.models.enums import BookingStatus, ContactStatus, RecordStatus
from app.utils.decorators import admin_required
from app.utils.api_response import APIResponse


def _status_counts(client, model, statuses):
    rows = client.query(model).with_entities(model.status, func.count(model.id)) \
        .group_by(model.status).all()
    counts = {status.value: 0 for status in statuses}
    counts.update({status: count for status, count in rows})
    return counts


@admin_bp.route('/dashboard', methods=['GET'])
@admin_required()
def get_dashboard(client):
    """Record counts per table and the latest bookings"""
    try:
        catalogue = {}
        for key, model in (('packages', Package), ('places', Place), ('cabs', Cab), ('services', Service)):
            catalogue[key] = {
                'total': client.query(model).count(),
                'active': client.query(model).filter(model.status == RecordStatus.ACTIVE.value).count()
            }
        
        recent_bookings = client.query(Booking).order_by(desc(Booking.created_at)).limit(5).all()
        
        return APIResponse.success({
            'stats': {
                'totalBookings': client.query(Booking).count(),
                'totalContacts': client.query(Contact).count(),
                'totalUsers': client.query(User).count(),
                'bookingsByStatus': _status_counts(client, Booking, BookingStatus),
                'contactsByStatus': _status_counts(client, Contact, ContactStatus),
                'catalogue': catalogue
            },
            'recentBookings': [booking.to_dict() for booking in recent_bookings]
        })
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Dashboard error: {str(e)}")
        return APIResponse.error("Failed to load dashboard", status_code=500)
