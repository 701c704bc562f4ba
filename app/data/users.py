from datetime import datetime, timezone

from sqlalchemy import desc

from app.extensions import db
from app.models import User
from app.models.enums import UserRole, enum_values
from app.data import records
from app.data.errors import ValidationFailed


def find_user_by_email(email):
    return User.query.filter_by(email=email.strip().lower()).first()


def authenticate(email, password):
    """Active user matching the credentials, or None"""
    user = find_user_by_email(email)
    if user is None or not user.is_active or not user.check_password(password):
        return None
    user.last_login = datetime.now(timezone.utc)
    db.session.commit()
    return user


def register_user(email, password, name):
    """Self-service accounts are never admins"""
    if find_user_by_email(email) is not None:
        raise ValidationFailed({'email': 'Email is already registered'})
    user = User(email=email.strip().lower(), name=name, role=UserRole.USER)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return user


def list_users(client):
    return records.list_all(client, User, desc(User.created_at))


def set_role(client, user_id, role):
    role = str(role or '').strip().lower()
    if role not in enum_values(UserRole):
        raise ValidationFailed({'role': f'Role must be one of: {", ".join(enum_values(UserRole))}'})

    user = records.get_one(client, User, user_id, 'User')
    if user.id == client.user.id and role != UserRole.ADMIN.value:
        raise ValidationFailed({'role': 'You cannot remove your own admin role'})

    client.update(user, {'role': UserRole(role)})
    db.session.commit()
    return user


def ensure_admin(email, password, name=None):
    """Create the account as admin, or promote and reset the password of an existing one"""
    user = find_user_by_email(email)
    if user is None:
        user = User(email=email.strip().lower(), name=name or email.split('@')[0])
        db.session.add(user)
    elif name:
        user.name = name
    user.role = UserRole.ADMIN
    user.is_active = True
    user.set_password(password)
    db.session.commit()
    return user
