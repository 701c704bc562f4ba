from flask import request, current_app

from app.api.admin import admin_bp
from app.data import DataError
from app.data import places as place_data
from app.extensions import db
from app.utils.decorators import admin_required
from app.utils.api_response import APIResponse
from app.utils.audit_logging import AuditLogger

# ===== PLACE MANAGEMENT =====


def _place_list(client):
    return {'places': [place.to_dict() for place in place_data.list_places(client)]}


@admin_bp.route('/places', methods=['GET'])
@admin_required()
def get_places(client):
    """Get every place, including inactive ones"""
    try:
        return APIResponse.success(_place_list(client))
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get places error: {str(e)}")
        return APIResponse.error("Failed to load places", status_code=500)


@admin_bp.route('/places/<place_id>', methods=['GET'])
@admin_required()
def get_place(place_id, client):
    try:
        place = place_data.get_place(client, place_id)
        return APIResponse.success({'place': place.to_dict()})
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get place error: {str(e)}")
        return APIResponse.error("Failed to load place", status_code=500)


@admin_bp.route('/places', methods=['POST'])
@admin_required()
def create_place(client):
    try:
        data = request.get_json(silent=True) or {}
        place = place_data.create_place(client, data)
        
        AuditLogger.log_admin_action(
            client,
            action='place_created',
            entity_type='place',
            entity_id=place.id,
            description=f'Admin created place {place.name}'
        )
        
        return APIResponse.success(_place_list(client), message='Place created successfully', status_code=201)
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Create place error: {str(e)}")
        return APIResponse.error("Failed to create place", status_code=500)


@admin_bp.route('/places', methods=['PUT'])
@admin_required()
def update_place(client):
    try:
        data = request.get_json(silent=True) or {}
        if not data.get('id'):
            return APIResponse.error("Missing place id")
        
        place = place_data.update_place(client, data['id'], data)
        
        AuditLogger.log_admin_action(
            client,
            action='place_updated',
            entity_type='place',
            entity_id=place.id,
            description=f'Admin updated place {place.name}',
            changes={k: v for k, v in data.items() if k != 'id'}
        )
        
        return APIResponse.success(_place_list(client), message='Place updated successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Update place error: {str(e)}")
        return APIResponse.error("Failed to update place", status_code=500)


@admin_bp.route('/places', methods=['DELETE'])
@admin_required()
def delete_place(client):
    try:
        place_id = request.args.get('id')
        if not place_id:
            return APIResponse.error("Missing place id")
        
        place = place_data.delete_place(client, place_id)
        
        AuditLogger.log_admin_action(
            client,
            action='place_deleted',
            entity_type='place',
            entity_id=place_id,
            description=f"Admin deleted place {place['name']}"
        )
        
        return APIResponse.success(_place_list(client), message='Place deleted successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Delete place error: {str(e)}")
        return APIResponse.error("Failed to delete place", status_code=500)
