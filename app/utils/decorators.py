from functools import wraps

from app.data.client import client_for_request
from app.utils.api_response import APIResponse


def admin_required():
    """
    Decorator for admin-only routes.

    Resolves the data client from the request's access token and passes it to
    the view as the ``client`` keyword argument.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            client = client_for_request()
            
            if not client.is_authenticated:
                return APIResponse.unauthorized("Please login to continue")
            
            if not client.is_admin:
                return APIResponse.forbidden("Admin access required")
            
            return f(*args, client=client, **kwargs)
        return decorated_function
    return decorator
