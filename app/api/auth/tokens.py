"""
JWT session lifecycle
Tokens are issued at login, rotated on refresh and revoked at logout.
"""
from flask_jwt_extended import create_access_token, create_refresh_token

from app.extensions import jwt
from app.models.revoked_tokens import RevokedToken
from app.utils.api_response import APIResponse


def issue_tokens(user):
    access_token = create_access_token(
        identity=user.id,
        additional_claims={'email': user.email, 'role': user.role.value}
    )
    refresh_token = create_refresh_token(identity=user.id)
    return {
        'accessToken': access_token,
        'refreshToken': refresh_token,
        'tokenType': 'Bearer'
    }


@jwt.token_in_blocklist_loader
def check_if_token_revoked(jwt_header, jwt_payload):
    return RevokedToken.is_revoked(jwt_payload['jti'])


@jwt.revoked_token_loader
def revoked_token_callback(jwt_header, jwt_payload):
    return APIResponse.unauthorized('Token has been revoked')


@jwt.expired_token_loader
def expired_token_callback(jwt_header, jwt_payload):
    return APIResponse.unauthorized('Token has expired')


@jwt.invalid_token_loader
def invalid_token_callback(reason):
    return APIResponse.unauthorized(f'Invalid token: {reason}')


@jwt.unauthorized_loader
def missing_token_callback(reason):
    return APIResponse.unauthorized('Please login to continue')
