from flask import request, current_app

from app.api.admin import admin_bp
from app.data import DataError
from app.data import users as user_data
from app.extensions import db
from app.utils.decorators import admin_required
from app.utils.api_response import APIResponse
from app.utils.audit_logging import AuditLogger

# ===== USER MANAGEMENT =====

@admin_bp.route('/users', methods=['GET'])
@admin_required()
def get_users(client):
    try:
        return APIResponse.success({
            'users': [user.to_dict() for user in user_data.list_users(client)]
        })
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get users error: {str(e)}")
        return APIResponse.error("Failed to load users", status_code=500)


@admin_bp.route('/users/<user_id>/role', methods=['PUT'])
@admin_required()
def update_user_role(user_id, client):
    """
    Grant or revoke the admin role
    
    Request Body:
        {"role": "admin" | "user"}
    """
    try:
        data = request.get_json(silent=True) or {}
        user = user_data.set_role(client, user_id, data.get('role'))
        
        AuditLogger.log_admin_action(
            client,
            action='user_role_updated',
            entity_type='user',
            entity_id=user.id,
            description=f'Admin set role of {user.email} to {user.role.value}',
            changes={'role': user.role.value}
        )
        
        return APIResponse.success({'user': user.to_dict()}, message='User role updated successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Update user role error: {str(e)}")
        return APIResponse.error("Failed to update user role", status_code=500)
