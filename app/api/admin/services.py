from flask import request, current_app

from app.api.admin import admin_bp
from app.data import DataError
from app.data import services as service_data
from app.extensions import db
from app.utils.decorators import admin_required
from app.utils.api_response import APIResponse
from app.utils.audit_logging import AuditLogger

# ===== SERVICE MANAGEMENT =====


def _service_list(client):
    return {'services': [service.to_dict() for service in service_data.list_services(client)]}


@admin_bp.route('/services', methods=['GET'])
@admin_required()
def get_services(client):
    try:
        return APIResponse.success(_service_list(client))
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get services error: {str(e)}")
        return APIResponse.error("Failed to load services", status_code=500)


@admin_bp.route('/services/<service_id>', methods=['GET'])
@admin_required()
def get_service(service_id, client):
    try:
        service = service_data.get_service(client, service_id)
        return APIResponse.success({'service': service.to_dict()})
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get service error: {str(e)}")
        return APIResponse.error("Failed to load service", status_code=500)


@admin_bp.route('/services', methods=['POST'])
@admin_required()
def create_service(client):
    try:
        data = request.get_json(silent=True) or {}
        service = service_data.create_service(client, data)
        
        AuditLogger.log_admin_action(
            client,
            action='service_created',
            entity_type='service',
            entity_id=service.id,
            description=f'Admin created service {service.title}'
        )
        
        return APIResponse.success(_service_list(client), message='Service created successfully', status_code=201)
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Create service error: {str(e)}")
        return APIResponse.error("Failed to create service", status_code=500)


@admin_bp.route('/services', methods=['PUT'])
@admin_required()
def update_service(client):
    try:
        data = request.get_json(silent=True) or {}
        if not data.get('id'):
            return APIResponse.error("Missing service id")
        
        service = service_data.update_service(client, data['id'], data)
        
        AuditLogger.log_admin_action(
            client,
            action='service_updated',
            entity_type='service',
            entity_id=service.id,
            description=f'Admin updated service {service.title}',
            changes={k: v for k, v in data.items() if k != 'id'}
        )
        
        return APIResponse.success(_service_list(client), message='Service updated successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Update service error: {str(e)}")
        return APIResponse.error("Failed to update service", status_code=500)


@admin_bp.route('/services', methods=['DELETE'])
@admin_required()
def delete_service(client):
    """Delete service (?id=...)"""
    try:
        service_id = request.args.get('id')
        if not service_id:
            return APIResponse.error("Missing service id")
        
        service = service_data.delete_service(client, service_id)
        
        AuditLogger.log_admin_action(
            client,
            action='service_deleted',
            entity_type='service',
            entity_id=service_id,
            description=f"Admin deleted service {service['title']}"
        )
        
        return APIResponse.success(_service_list(client), message='Service deleted successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Delete service error: {str(e)}")
        return APIResponse.error("Failed to delete service", status_code=500)
