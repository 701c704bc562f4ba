from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException


class APIResponse:
    """Standardized API response format"""
    
    @staticmethod
    def success(data=None, message=None, status_code=200):
        """Success response"""
        response = {
            'success': True,
            'message': message or 'Operation successful'
        }
        if data is not None:
            response['data'] = data
        return jsonify(response), status_code
    
    @staticmethod
    def error(message, errors=None, status_code=400):
        """Error response"""
        response = {
            'success': False,
            'message': message
        }
        if errors:
            response['errors'] = errors
        return jsonify(response), status_code
    
    @staticmethod
    def validation_error(errors, message="Validation failed"):
        """Validation error response"""
        return APIResponse.error(message, errors=errors, status_code=422)
    
    @staticmethod
    def unauthorized(message="Unauthorized access"):
        """Unauthorized response"""
        return APIResponse.error(message, status_code=401)
    
    @staticmethod
    def forbidden(message="Forbidden"):
        """Forbidden response"""
        return APIResponse.error(message, status_code=403)
    
    @staticmethod
    def not_found(message="Resource not found"):
        """Not found response"""
        return APIResponse.error(message, status_code=404)
    
    @staticmethod
    def from_data_error(error):
        """Response for an error raised by the data-access layer"""
        current_app.logger.warning(f"{type(error).__name__}: {error.message}")
        return APIResponse.error(
            error.message,
            errors=getattr(error, 'errors', None),
            status_code=error.status_code
        )


def register_error_handlers(app):
    """JSON bodies for errors raised outside the route handlers"""
    
    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        if e.code == 413:
            return APIResponse.error("File is too large", status_code=413)
        return APIResponse.error(e.description or e.name, status_code=e.code)
