"""
Tests for authentication API endpoints
Run with: pytest tests/test_auth.py -v
"""
import json

from app.models import User
from app.models.enums import UserRole


class TestLogin:

    def test_successful_login(self, client, admin_user):
        response = client.post('/api/auth/login', json={
            'email': 'Admin@Test.com',
            'password': 'AdminPass123'
        })

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['success'] is True
        assert data['data']['user']['role'] == 'admin'
        assert data['data']['tokens']['tokenType'] == 'Bearer'
        assert admin_user.last_login is not None

    def test_wrong_password(self, client, admin_user):
        response = client.post('/api/auth/login', json={
            'email': 'admin@test.com',
            'password': 'wrong'
        })
        assert response.status_code == 401

    def test_inactive_user_cannot_login(self, client, db, regular_user):
        regular_user.is_active = False
        db.session.commit()

        response = client.post('/api/auth/login', json={
            'email': 'user@test.com',
            'password': 'UserPass123'
        })
        assert response.status_code == 401

    def test_missing_fields(self, client):
        response = client.post('/api/auth/login', json={})
        assert response.status_code == 422
        data = json.loads(response.data)
        assert set(data['errors']) == {'email', 'password'}


class TestRegistration:

    def test_successful_registration(self, client):
        response = client.post('/api/auth/register', json={
            'name': 'Asha',
            'email': 'asha@example.com',
            'password': 'SecurePass123',
            'confirmPassword': 'SecurePass123'
        })

        assert response.status_code == 201
        data = json.loads(response.data)
        assert data['data']['user']['role'] == 'user'
        assert 'accessToken' in data['data']['tokens']

    def test_registration_never_grants_admin(self, client):
        client.post('/api/auth/register', json={
            'email': 'sneaky@example.com',
            'password': 'SecurePass123',
            'role': 'admin'
        })
        assert User.query.filter_by(email='sneaky@example.com').first().role == UserRole.USER

    def test_duplicate_email(self, client, regular_user):
        response = client.post('/api/auth/register', json={
            'email': 'user@test.com',
            'password': 'SecurePass123'
        })
        assert response.status_code == 422
        assert 'email' in json.loads(response.data)['errors']

    def test_weak_password(self, client):
        response = client.post('/api/auth/register', json={
            'email': 'asha@example.com',
            'password': 'password'
        })
        assert response.status_code == 422
        assert User.query.count() == 0

    def test_password_mismatch(self, client):
        response = client.post('/api/auth/register', json={
            'email': 'asha@example.com',
            'password': 'SecurePass123',
            'confirmPassword': 'SecurePass124'
        })
        assert response.status_code == 422


class TestSession:

    def _tokens(self, client):
        response = client.post('/api/auth/login', json={
            'email': 'user@test.com',
            'password': 'UserPass123'
        })
        return json.loads(response.data)['data']['tokens']

    def test_me(self, client, user_headers):
        response = client.get('/api/auth/me', headers=user_headers)
        assert response.status_code == 200
        assert json.loads(response.data)['data']['user']['email'] == 'user@test.com'

    def test_me_requires_token(self, client):
        response = client.get('/api/auth/me')
        assert response.status_code == 401
        assert json.loads(response.data)['message'] == 'Please login to continue'

    def test_refresh_rotates_token(self, client, regular_user):
        tokens = self._tokens(client)
        headers = {'Authorization': f"Bearer {tokens['refreshToken']}"}

        first = client.post('/api/auth/refresh', headers=headers)
        assert first.status_code == 200
        assert 'accessToken' in json.loads(first.data)['data']['tokens']

        second = client.post('/api/auth/refresh', headers=headers)
        assert second.status_code == 401

    def test_access_token_cannot_refresh(self, client, regular_user):
        tokens = self._tokens(client)
        response = client.post('/api/auth/refresh', headers={
            'Authorization': f"Bearer {tokens['accessToken']}"
        })
        assert response.status_code == 401

    def test_logout_revokes_access_token(self, client, regular_user):
        tokens = self._tokens(client)
        headers = {'Authorization': f"Bearer {tokens['accessToken']}"}

        response = client.post('/api/auth/logout', headers=headers)
        assert response.status_code == 200

        response = client.get('/api/auth/me', headers=headers)
        assert response.status_code == 401
        assert json.loads(response.data)['message'] == 'Token has been revoked'
