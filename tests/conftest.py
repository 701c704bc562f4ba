import json

import pytest
from app import create_app
from app.extensions import db as _db
from app.models import User, Package, Place, Cab, Service
from app.models.enums import UserRole, RecordStatus
from config import Config


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    JWT_SECRET_KEY = 'test-secret-key'
    AGENCY_EMAIL = 'bookings@example.com'
    AGENCY_WHATSAPP = '+91 70065 94976'
    AGENCY_NAME = 'Test Travels'


@pytest.fixture
def app(tmp_path):
    app = create_app(TestConfig)
    app.config['STORAGE_ROOT'] = str(tmp_path / 'storage')

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def runner(app):
    return app.test_cli_runner()

@pytest.fixture
def db(app):
    return _db


def _create_user(email, password, role):
    user = User(email=email, name=email.split('@')[0], role=role, is_active=True)
    user.set_password(password)
    _db.session.add(user)
    _db.session.commit()
    return user


def _login(client, email, password):
    response = client.post('/api/auth/login', json={'email': email, 'password': password})
    data = json.loads(response.data)
    return {'Authorization': f"Bearer {data['data']['tokens']['accessToken']}"}


@pytest.fixture
def admin_user(app):
    return _create_user('admin@test.com', 'AdminPass123', UserRole.ADMIN)

@pytest.fixture
def regular_user(app):
    return _create_user('user@test.com', 'UserPass123', UserRole.USER)

@pytest.fixture
def admin_headers(client, admin_user):
    return _login(client, 'admin@test.com', 'AdminPass123')

@pytest.fixture
def user_headers(client, regular_user):
    return _login(client, 'user@test.com', 'UserPass123')


@pytest.fixture
def active_package(db):
    pkg = Package(
        title='Kashmir Valley Tour',
        slug='kashmir-valley-tour',
        location='Srinagar',
        price=15000,
        days=5,
        nights=4,
        status=RecordStatus.ACTIVE.value,
        featured=True
    )
    db.session.add(pkg)
    db.session.commit()
    return pkg

@pytest.fixture
def inactive_package(db):
    pkg = Package(
        title='Ladakh Road Trip',
        slug='ladakh-road-trip',
        price=30000,
        days=8,
        nights=7,
        status=RecordStatus.INACTIVE.value
    )
    db.session.add(pkg)
    db.session.commit()
    return pkg

@pytest.fixture
def catalogue(db, active_package, inactive_package):
    """One active and one inactive row in every public table"""
    rows = [
        Place(name='Gulmarg', slug='gulmarg', status=RecordStatus.ACTIVE.value),
        Place(name='Gurez', slug='gurez', status=RecordStatus.INACTIVE.value),
        Cab(name='Innova', slug='innova', status=RecordStatus.ACTIVE.value),
        Cab(name='Alto', slug='alto', status=RecordStatus.INACTIVE.value),
        Service(title='Houseboats', status=RecordStatus.ACTIVE.value),
        Service(title='Helicopter', status=RecordStatus.INACTIVE.value),
    ]
    db.session.add_all(rows)
    db.session.commit()
    return rows
