from flask import request, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity, get_jwt
from sqlalchemy.exc import IntegrityError

from app.extensions import db
from app.models import User
from app.models.revoked_tokens import RevokedToken
from app.api.auth.schemas import AuthSchemas
from app.api.auth.tokens import issue_tokens
from app.data import users as user_data
from app.utils.api_response import APIResponse
from app.utils.audit_logging import AuditLogger

from app.api.auth import auth_bp


@auth_bp.route('/login', methods=['POST'])
def login():
    """
    Login with email and password
    
    Request Body:
        {
            "email": "admin@example.com",
            "password": "SecurePass123"
        }
    
    Returns:
        200: Login successful with tokens
        401: Invalid credentials
        422: Validation error
    """
    try:
        data = request.get_json(silent=True) or {}
        
        is_valid, errors, cleaned_data = AuthSchemas.validate_login(data)
        if not is_valid:
            return APIResponse.validation_error(errors)
        
        user = user_data.authenticate(cleaned_data['email'], cleaned_data['password'])
        if user is None:
            current_app.logger.warning(f"Failed login for {cleaned_data['email']}")
            return APIResponse.unauthorized('Invalid email or password')
        
        AuditLogger.log_action(
            user_id=user.id,
            action='user_login',
            description=f'User logged in: {user.email}',
            ip_address=request.remote_addr,
            user_agent=request.headers.get('User-Agent')
        )
        
        return APIResponse.success(
            data={
                'user': user.to_dict(),
                'tokens': issue_tokens(user)
            },
            message='Login successful'
        )
        
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Login error: {str(e)}")
        return APIResponse.error('An error occurred during login. Please try again.', status_code=500)


@auth_bp.route('/refresh', methods=['POST'])
@jwt_required(refresh=True)
def refresh():
    """
    Rotate tokens; each refresh token can be used once
    
    Headers:
        Authorization: Bearer <refresh_token>
    """
    try:
        current_user_id = get_jwt_identity()
        jti = get_jwt()['jti']
        
        user = db.session.get(User, current_user_id)
        if not user or not user.is_active:
            return APIResponse.unauthorized('User not found or inactive')
        
        try:
            db.session.add(RevokedToken(jti=jti, type='refresh'))
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            return APIResponse.unauthorized('Token has already been used')
        
        return APIResponse.success(
            data={'tokens': issue_tokens(user)},
            message='Token refreshed successfully'
        )
        
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Token refresh error: {str(e)}")
        return APIResponse.error('An error occurred during token refresh', status_code=500)


@auth_bp.route('/logout', methods=['POST'])
@jwt_required()
def logout():
    """
    Logout: the access token is revoked and rejected from now on
    
    Headers:
        Authorization: Bearer <access_token>
    """
    try:
        jwt_payload = get_jwt()
        db.session.add(RevokedToken(jti=jwt_payload['jti'], type=jwt_payload.get('type', 'access')))
        db.session.commit()
        
        AuditLogger.log_action(
            user_id=get_jwt_identity(),
            action='user_logout',
            description='User logged out',
            ip_address=request.remote_addr,
            user_agent=request.headers.get('User-Agent')
        )
        
        return APIResponse.success(message='Logout successful')
        
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Logout error: {str(e)}")
        return APIResponse.error('An error occurred during logout', status_code=500)
