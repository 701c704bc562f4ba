from flask import request, current_app

from app.api.public import public_bp
from app.data import AnonymousClient, DataError
from app.data import packages as package_data
from app.data import places as place_data
from app.data import cabs as cab_data
from app.data import services as service_data
from app.utils.api_response import APIResponse

# ==================== CATALOGUE ENDPOINTS ====================
# Read as the anonymous client: listings only ever contain active rows.


@public_bp.route('/packages', methods=['GET'])
def list_packages():
    """
    Get active packages, featured first then newest
    
    Query Parameters:
        featured: "true" to return featured packages only
        limit: maximum number of featured packages (default: 6)
    """
    try:
        client = AnonymousClient()
        if request.args.get('featured', '').lower() == 'true':
            limit = min(request.args.get('limit', 6, type=int), 50)
            packages = package_data.list_featured_packages(client, limit)
        else:
            packages = package_data.list_active_packages(client)
        
        return APIResponse.success(
            data={'packages': [pkg.to_dict() for pkg in packages]},
            message=f"Found {len(packages)} package(s)"
        )
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"List packages error: {str(e)}")
        return APIResponse.error("An error occurred while fetching packages", status_code=500)


@public_bp.route('/packages/<package_id>', methods=['GET'])
def get_package(package_id):
    """Get an active package with its gallery"""
    try:
        package = package_data.get_active_package(AnonymousClient(), package_id)
        return APIResponse.success(data={'package': package.to_dict(include_images=True)})
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get package error: {str(e)}")
        return APIResponse.error("An error occurred while fetching the package", status_code=500)


@public_bp.route('/places', methods=['GET'])
def list_places():
    try:
        places = place_data.list_active_places(AnonymousClient())
        return APIResponse.success(
            data={'places': [place.to_dict() for place in places]},
            message=f"Found {len(places)} place(s)"
        )
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"List places error: {str(e)}")
        return APIResponse.error("An error occurred while fetching places", status_code=500)


@public_bp.route('/places/<slug_or_id>', methods=['GET'])
def get_place(slug_or_id):
    """Get an active place by slug or id"""
    try:
        place = place_data.get_active_place(AnonymousClient(), slug_or_id)
        return APIResponse.success(data={'place': place.to_dict()})
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"Get place error: {str(e)}")
        return APIResponse.error("An error occurred while fetching the place", status_code=500)


@public_bp.route('/cabs', methods=['GET'])
def list_cabs():
    try:
        cabs = cab_data.list_active_cabs(AnonymousClient())
        return APIResponse.success(
            data={'cabs': [cab.to_dict() for cab in cabs]},
            message=f"Found {len(cabs)} cab(s)"
        )
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"List cabs error: {str(e)}")
        return APIResponse.error("An error occurred while fetching cabs", status_code=500)


@public_bp.route('/services', methods=['GET'])
def list_services():
    try:
        services = service_data.list_active_services(AnonymousClient())
        return APIResponse.success(
            data={'services': [service.to_dict() for service in services]},
            message=f"Found {len(services)} service(s)"
        )
        
    except DataError as e:
        return APIResponse.from_data_error(e)
    except Exception as e:
        current_app.logger.error(f"List services error: {str(e)}")
        return APIResponse.error("An error occurred while fetching services", status_code=500)
