from flask import request, current_app

from app.api.admin import admin_bp
from app.data import DataError
from app.data import cabs as cab_data
from app.extensions import db
from app.utils.decorators import admin_required
from app.utils.api_response import APIResponse
from app.utils.audit_logging import AuditLogger

# ===== CAB MANAGEMENT =====


def _cab_list(client):
    return {'cabs': [cab.to_dict() for cab in cab_data.list_cabs(client)]}


@admin_bp.route('/cabs', methods=['GET'])
@admin_required()
def get_cabs(client):
    try:
        return APIResponse.success(_cab_list(client))
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get cabs error: {str(e)}")
        return APIResponse.error("Failed to load cabs", status_code=500)


@admin_bp.route('/cabs/<cab_id>', methods=['GET'])
@admin_required()
def get_cab(cab_id, client):
    try:
        cab = cab_data.get_cab(client, cab_id)
        return APIResponse.success({'cab': cab.to_dict()})
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get cab error: {str(e)}")
        return APIResponse.error("Failed to load cab", status_code=500)


@admin_bp.route('/cabs', methods=['POST'])
@admin_required()
def create_cab(client):
    """Create cab; type defaults to sedan, capacity to 4"""
    try:
        data = request.get_json(silent=True) or {}
        cab = cab_data.create_cab(client, data)
        
        AuditLogger.log_admin_action(
            client,
            action='cab_created',
            entity_type='cab',
            entity_id=cab.id,
            description=f'Admin created cab {cab.name}'
        )
        
        return APIResponse.success(_cab_list(client), message='Cab created successfully', status_code=201)
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Create cab error: {str(e)}")
        return APIResponse.error("Failed to create cab", status_code=500)


@admin_bp.route('/cabs', methods=['PUT'])
@admin_required()
def update_cab(client):
    try:
        data = request.get_json(silent=True) or {}
        if not data.get('id'):
            return APIResponse.error("Missing cab id")
        
        cab = cab_data.update_cab(client, data['id'], data)
        
        AuditLogger.log_admin_action(
            client,
            action='cab_updated',
            entity_type='cab',
            entity_id=cab.id,
            description=f'Admin updated cab {cab.name}',
            changes={k: v for k, v in data.items() if k != 'id'}
        )
        
        return APIResponse.success(_cab_list(client), message='Cab updated successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Update cab error: {str(e)}")
        return APIResponse.error("Failed to update cab", status_code=500)


@admin_bp.route('/cabs', methods=['DELETE'])
@admin_required()
def delete_cab(client):
    try:
        cab_id = request.args.get('id')
        if not cab_id:
            return APIResponse.error("Missing cab id")
        
        cab = cab_data.delete_cab(client, cab_id)
        
        AuditLogger.log_admin_action(
            client,
            action='cab_deleted',
            entity_type='cab',
            entity_id=cab_id,
            description=f"Admin deleted cab {cab['name']}"
        )
        
        return APIResponse.success(_cab_list(client), message='Cab deleted successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Delete cab error: {str(e)}")
        return APIResponse.error("Failed to delete cab", status_code=500)
