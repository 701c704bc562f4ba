from flask import request, current_app

from app.api.admin import admin_bp
from app.data import DataError
from app.data import bookings as booking_data
from app.extensions import db
from app.utils.decorators import admin_required
from app.utils.api_response import APIResponse
from app.utils.audit_logging import AuditLogger

# ===== BOOKING MANAGEMENT =====


def _booking_list(client):
    return {'bookings': [booking.to_dict() for booking in booking_data.list_bookings(client)]}


@admin_bp.route('/bookings', methods=['GET'])
@admin_required()
def get_bookings(client):
    """Get every booking, newest first, with package name and total amount"""
    try:
        return APIResponse.success(_booking_list(client))
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get bookings error: {str(e)}")
        return APIResponse.error("Failed to load bookings", status_code=500)


@admin_bp.route('/bookings/<booking_id>', methods=['GET'])
@admin_required()
def get_booking(booking_id, client):
    try:
        booking = booking_data.get_booking(client, booking_id)
        return APIResponse.success({'booking': booking.to_dict()})
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get booking error: {str(e)}")
        return APIResponse.error("Failed to load booking", status_code=500)


@admin_bp.route('/bookings', methods=['PUT'])
@admin_required()
def update_booking(client):
    """
    Change booking status
    
    Request Body:
        {"id": "<booking id>", "status": "confirmed"}
    """
    try:
        data = request.get_json(silent=True) or {}
        if not data.get('id'):
            return APIResponse.error("Missing booking id")
        
        booking = booking_data.update_booking_status(client, data['id'], data)
        
        AuditLogger.log_admin_action(
            client,
            action='booking_status_updated',
            entity_type='booking',
            entity_id=booking.id,
            description=f'Admin set booking from {booking.email} to {booking.status}',
            changes={'status': booking.status}
        )
        
        return APIResponse.success(_booking_list(client), message='Booking updated successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Update booking error: {str(e)}")
        return APIResponse.error("Failed to update booking", status_code=500)


@admin_bp.route('/bookings', methods=['DELETE'])
@admin_required()
def delete_booking(client):
    """Delete booking (?id=...)"""
    try:
        booking_id = request.args.get('id')
        if not booking_id:
            return APIResponse.error("Missing booking id")
        
        booking = booking_data.delete_booking(client, booking_id)
        
        AuditLogger.log_admin_action(
            client,
            action='booking_deleted',
            entity_type='booking',
            entity_id=booking_id,
            description=f"Admin deleted booking from {booking['email']}"
        )
        
        return APIResponse.success(_booking_list(client), message='Booking deleted successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Delete booking error: {str(e)}")
        return APIResponse.error("Failed to delete booking", status_code=500)
