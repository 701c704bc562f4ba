from flask import request, current_app

from app.api.public import public_bp
from app.data import AnonymousClient, DataError
from app.data import bookings as booking_data
from app.data import contacts as contact_data
from app.extensions import db
from app.utils.api_response import APIResponse
from app.utils.followup import FollowUpLinks

FALLBACK_MESSAGE = (
    "We could not submit your request right now. "
    "Please reach us by email or WhatsApp instead."
)


@public_bp.route('/bookings', methods=['POST'])
def create_booking():
    """
    Submit a booking request from the website
    
    Always written as the anonymous client, whatever token the browser sends.
    
    Headers:
        Idempotency-Key: optional client-generated key; resubmitting with the
            same key returns the first booking instead of creating another
    
    Request Body:
        {
            "name": "Asha",
            "email": "a@x.com",
            "phone": "+911234567890",
            "date": "2025-06-01",
            "persons": 2,
            "packageId": "<package id>" (optional),
            "packageLabel": "Kashmir Valley Tour" (optional),
            "message": "..." (optional)
        }
    
    Returns:
        201: Booking created
        200: Same Idempotency-Key and details seen before
        409: Idempotency-Key already used for different details
        404: Package not found
        422: Validation error
    """
    try:
        data = request.get_json(silent=True) or {}
        idempotency_key = request.headers.get('Idempotency-Key', '').strip() or None
        
        booking, created = booking_data.submit_booking(AnonymousClient(), data, idempotency_key)
        
        if created:
            current_app.logger.info(f"Booking submitted: {booking.id}")
        else:
            current_app.logger.info(f"Duplicate booking submission for key {idempotency_key}")
        
        return APIResponse.success(
            data={
                'booking': booking.to_dict(),
                'followUp': FollowUpLinks.for_booking(booking)
            },
            message='Booking request submitted successfully' if created else 'Booking already submitted',
            status_code=201 if created else 200
        )
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Create booking error: {str(e)}")
        return APIResponse.error(FALLBACK_MESSAGE, status_code=500)


@public_bp.route('/contacts', methods=['POST'])
def create_contact():
    """
    Submit a contact message
    
    Request Body:
        {"name": "...", "email": "...", "message": "...", "phone": "..." (optional), "subject": "..." (optional)}
    """
    try:
        data = request.get_json(silent=True) or {}
        contact = contact_data.submit_contact(AnonymousClient(), data)
        
        current_app.logger.info(f"Contact message submitted: {contact.id}")
        
        return APIResponse.success(
            data={'contact': contact.to_dict()},
            message='Message sent successfully',
            status_code=201
        )
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Create contact error: {str(e)}")
        return APIResponse.error(FALLBACK_MESSAGE, status_code=500)
