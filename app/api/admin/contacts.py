from flask import request, current_app

from app.api.admin import admin_bp
from app.data import DataError
from app.data import contacts as contact_data
from app.extensions import db
from app.utils.decorators import admin_required
from app.utils.api_response import APIResponse
from app.utils.audit_logging import AuditLogger

# ===== CONTACT MESSAGES =====


def _contact_list(client):
    return {'contacts': [contact.to_dict() for contact in contact_data.list_contacts(client)]}


@admin_bp.route('/contacts', methods=['GET'])
@admin_required()
def get_contacts(client):
    """Get every contact message, newest first"""
    try:
        return APIResponse.success(_contact_list(client))
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get contacts error: {str(e)}")
        return APIResponse.error("Failed to load contacts", status_code=500)


@admin_bp.route('/contacts/<contact_id>', methods=['GET'])
@admin_required()
def get_contact(contact_id, client):
    try:
        contact = contact_data.get_contact(client, contact_id)
        return APIResponse.success({'contact': contact.to_dict()})
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get contact error: {str(e)}")
        return APIResponse.error("Failed to load contact", status_code=500)


@admin_bp.route('/contacts', methods=['PUT'])
@admin_required()
def update_contact(client):
    """Change contact status (pending, replied, archived)"""
    try:
        data = request.get_json(silent=True) or {}
        if not data.get('id'):
            return APIResponse.error("Missing contact id")
        
        contact = contact_data.update_contact_status(client, data['id'], data)
        
        AuditLogger.log_admin_action(
            client,
            action='contact_updated',
            entity_type='contact',
            entity_id=contact.id,
            description=f'Admin set contact message from {contact.email} to {contact.status}',
            changes={'status': contact.status}
        )
        
        return APIResponse.success(_contact_list(client), message='Contact updated successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Update contact error: {str(e)}")
        return APIResponse.error("Failed to update contact", status_code=500)


@admin_bp.route('/contacts', methods=['DELETE'])
@admin_required()
def delete_contact(client):
    """Delete contact message (?id=...)"""
    try:
        contact_id = request.args.get('id')
        if not contact_id:
            return APIResponse.error("Missing contact id")
        
        contact = contact_data.delete_contact(client, contact_id)
        
        AuditLogger.log_admin_action(
            client,
            action='contact_deleted',
            entity_type='contact',
            entity_id=contact_id,
            description=f"Admin deleted contact message from {contact['email']}"
        )
        
        return APIResponse.success(_contact_list(client), message='Contact deleted successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Delete contact error: {str(e)}")
        return APIResponse.error("Failed to delete contact", status_code=500)
