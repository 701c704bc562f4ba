from flask import request, current_app

from app.extensions import db
from app.api.auth.schemas import AuthSchemas
from app.api.auth.tokens import issue_tokens
from app.data import DataError
from app.data import users as user_data
from app.utils.api_response import APIResponse

from app.api.auth import auth_bp


@auth_bp.route('/register', methods=['POST'])
def register():
    """
    Register an account. New accounts get the "user" role; an existing admin
    grants the admin role through /api/admin/users/<id>/role.
    
    Request Body:
        {
            "name": "Asha",
            "email": "asha@example.com",
            "password": "SecurePass123",
            "confirmPassword": "SecurePass123"
        }
    
    Returns:
        201: Account created, with tokens
        422: Validation error or email already registered
    """
    try:
        data = request.get_json(silent=True) or {}
        
        is_valid, errors, cleaned_data = AuthSchemas.validate_registration(data)
        if not is_valid:
            return APIResponse.validation_error(errors)
        
        user = user_data.register_user(
            cleaned_data['email'],
            cleaned_data['password'],
            cleaned_data['name']
        )
        current_app.logger.info(f"User registered: {user.email}")
        
        return APIResponse.success(
            data={
                'user': user.to_dict(),
                'tokens': issue_tokens(user)
            },
            message='Registration successful',
            status_code=201
        )
        
    except DataError as e:
        db.session.rollback()
        return APIResponse.from_data_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Registration error: {str(e)}")
        return APIResponse.error('An error occurred during registration. Please try again.', status_code=500)
