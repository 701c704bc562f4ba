"""
Tests for admin image upload and public storage reads
Run with: pytest tests/test_upload.py -v
"""
import io
import json


def _upload(client, headers, filename='hero.jpg', bucket='places', folder='gulmarg'):
    return client.post('/api/admin/upload', headers=headers, content_type='multipart/form-data', data={
        'bucket': bucket,
        'folder': folder,
        'file': (io.BytesIO(b'fake image bytes'), filename)
    })


class TestUpload:

    def test_upload_and_fetch(self, client, admin_headers):
        response = _upload(client, admin_headers)

        assert response.status_code == 201
        data = json.loads(response.data)['data']
        assert data['path'].startswith('gulmarg/')
        assert data['path'].endswith('-hero.jpg')
        assert data['publicUrl'] == f"/storage/places/{data['path']}"

        stored = client.get(data['publicUrl'])
        assert stored.status_code == 200
        assert stored.data == b'fake image bytes'

    def test_upload_requires_admin(self, client, user_headers):
        response = _upload(client, user_headers)
        assert response.status_code == 403

    def test_upload_requires_login(self, client):
        response = _upload(client, {})
        assert response.status_code == 401

    def test_unknown_bucket(self, client, admin_headers):
        response = _upload(client, admin_headers, bucket='secrets')
        assert response.status_code == 400
        assert 'bucket' in json.loads(response.data)['errors']

    def test_disallowed_extension(self, client, admin_headers):
        response = _upload(client, admin_headers, filename='script.sh')
        assert response.status_code == 400
        assert json.loads(response.data)['errors']['file'] == 'File type not allowed'

    def test_folder_cannot_escape_bucket(self, client, admin_headers):
        response = _upload(client, admin_headers, folder='../../etc')
        assert response.status_code == 201
        assert '..' not in json.loads(response.data)['data']['path']

    def test_missing_object(self, client):
        assert client.get('/storage/places/nothing.jpg').status_code == 404
        assert client.get('/storage/secrets/nothing.jpg').status_code == 404


class TestCreateAdminCommand:

    def test_create_admin(self, runner, db):
        from app.models import User
        from app.models.enums import UserRole

        result = runner.invoke(args=[
            'db-manage', 'create-admin', '--email', 'Owner@Example.com', '--password', 'OwnerPass123'
        ])

        assert result.exit_code == 0
        user = User.query.filter_by(email='owner@example.com').first()
        assert user is not None
        assert user.role == UserRole.ADMIN
        assert user.check_password('OwnerPass123')

    def test_promotes_existing_user(self, runner, regular_user):
        from app.models.enums import UserRole

        result = runner.invoke(args=[
            'db-manage', 'create-admin', '--email', 'user@test.com', '--password', 'NewPass12345'
        ])

        assert result.exit_code == 0
        assert regular_user.role == UserRole.ADMIN

    def test_short_password_rejected(self, runner, db):
        result = runner.invoke(args=[
            'db-manage', 'create-admin', '--email', 'owner@example.com', '--password', 'short'
        ])
        assert result.exit_code != 0
