from flask import request, current_app

from app.api.admin import admin_bp
from app.data import DataError
from app.data import packages as package_data
from app.extensions import db
from app.utils.decorators import admin_required
from app.utils.api_response import APIResponse
from app.utils.audit_logging import AuditLogger

# ===== PACKAGE MANAGEMENT =====


def _package_list(client):
    return {'packages': [pkg.to_dict() for pkg in package_data.list_packages(client)]}


@admin_bp.route('/packages', methods=['GET'])
@admin_required()
def get_packages(client):
    """Get every package, newest first"""
    try:
        return APIResponse.success(_package_list(client))
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get packages error: {str(e)}")
        return APIResponse.error("Failed to load packages", status_code=500)


@admin_bp.route('/packages/<package_id>', methods=['GET'])
@admin_required()
def get_package(package_id, client):
    """Get one package with its gallery"""
    try:
        package = package_data.get_package(client, package_id)
        return APIResponse.success({'package': package.to_dict(include_images=True)})
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get package error: {str(e)}")
        return APIResponse.error("Failed to load package", status_code=500)


@admin_bp.route('/packages', methods=['POST'])
@admin_required()
def create_package(client):
    """Create new travel package"""
    try:
        data = request.get_json(silent=True) or {}
        package = package_data.create_package(client, data)
        
        AuditLogger.log_admin_action(
            client,
            action='package_created',
            entity_type='package',
            entity_id=package.id,
            description=f'Admin created package {package.title}'
        )
        current_app.logger.info(f"Package created: {package.id}")
        
        return APIResponse.success(
            _package_list(client),
            message='Package created successfully',
            status_code=201
        )
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Create package error: {str(e)}")
        return APIResponse.error("Failed to create package", status_code=500)


@admin_bp.route('/packages', methods=['PUT'])
@admin_required()
def update_package(client):
    """Replace package details; the body carries the id"""
    try:
        data = request.get_json(silent=True) or {}
        if not data.get('id'):
            return APIResponse.error("Missing package id")
        
        package = package_data.update_package(client, data['id'], data)
        
        AuditLogger.log_admin_action(
            client,
            action='package_updated',
            entity_type='package',
            entity_id=package.id,
            description=f'Admin updated package {package.title}',
            changes={k: v for k, v in data.items() if k != 'id'}
        )
        
        return APIResponse.success(_package_list(client), message='Package updated successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Update package error: {str(e)}")
        return APIResponse.error("Failed to update package", status_code=500)


@admin_bp.route('/packages', methods=['DELETE'])
@admin_required()
def delete_package(client):
    """Delete package (?id=...)"""
    try:
        package_id = request.args.get('id')
        if not package_id:
            return APIResponse.error("Missing package id")
        
        package = package_data.delete_package(client, package_id)
        
        AuditLogger.log_admin_action(
            client,
            action='package_deleted',
            entity_type='package',
            entity_id=package_id,
            description=f"Admin deleted package {package['title']}"
        )
        
        return APIResponse.success(_package_list(client), message='Package deleted successfully')
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Delete package error: {str(e)}")
        return APIResponse.error("Failed to delete package", status_code=500)
