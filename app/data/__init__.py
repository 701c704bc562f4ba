"""
Data-access layer

Every function takes the data client it must run as; see ``app.data.client``.
"""
from app.data.client import DataClient, AnonymousClient, SessionClient, client_for_request
from app.data.errors import DataError, ValidationFailed, NotFound, Unauthorized, PolicyViolation, Conflict

__all__ = [
    'DataClient',
    'AnonymousClient',
    'SessionClient',
    'client_for_request',
    'DataError',
    'ValidationFailed',
    'NotFound',
    'Unauthorized',
    'PolicyViolation',
    'Conflict',
]
