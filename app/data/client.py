"""
Data clients

A client is the explicit trust context of a data operation. Public
submissions always run through ``AnonymousClient`` so that a session living
in the same browser can never change what a public write is allowed to do.
Admin work runs through ``SessionClient`` bound to the logged-in user.
"""
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity

from app.extensions import db
from app.models import User
from app.data import policy as rls
from app.data.errors import Unauthorized, PolicyViolation


class DataClient:
    role = rls.ANONYMOUS
    user = None

    def __init__(self, policy=None):
        self.policy = policy or rls.default_policy

    @property
    def is_authenticated(self):
        return self.user is not None

    @property
    def is_admin(self):
        return self.role == rls.ADMIN

    def require_admin(self):
        if not self.is_admin:
            raise self._denied()

    def query(self, model):
        """Query over the rows this client may read"""
        rule = self._rule(model, rls.SELECT)
        return rule.filter(model, model.query)

    def get(self, model, row_id):
        return self.query(model).filter(model.id == row_id).first()

    def insert(self, row):
        rule = self._rule(type(row), rls.INSERT)
        if not rule.permits(row):
            raise PolicyViolation()
        db.session.add(row)
        db.session.flush()
        return row

    def update(self, row, values):
        rule = self._rule(type(row), rls.UPDATE)
        for key, value in values.items():
            setattr(row, key, value)
        if not rule.permits(row):
            # Drop the staged values so the session holds no refused change
            db.session.expire(row, list(values))
            raise PolicyViolation()
        db.session.flush()
        return row

    def delete(self, row):
        self._rule(type(row), rls.DELETE)
        db.session.delete(row)
        db.session.flush()

    def _rule(self, model, operation):
        rule = self.policy.rule_for(self.role, model, operation)
        if rule is None:
            raise self._denied()
        return rule

    def _denied(self):
        return Unauthorized(status_code=403 if self.is_authenticated else 401)

    def __repr__(self):
        return f"<{type(self).__name__} role={self.role}>"


class AnonymousClient(DataClient):
    pass


class SessionClient(DataClient):
    def __init__(self, user, policy=None):
        super().__init__(policy)
        self.user = user
        self.role = rls.ADMIN if user.is_admin else rls.AUTHENTICATED


def client_for_request():
    """Session client for the request's access token, anonymous otherwise"""
    verify_jwt_in_request(optional=True)
    user_id = get_jwt_identity()
    if user_id:
        user = db.session.get(User, user_id)
        if user and user.is_active:
            return SessionClient(user)
    return AnonymousClient()
