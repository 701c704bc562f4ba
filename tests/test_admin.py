"""
Tests for admin API endpoints
Run with: pytest tests/test_admin.py -v
"""
import json

import pytest

from app.models import Booking, Contact, Package, Place, Cab, Service, User, AuditLog
from app.models.enums import UserRole


BOOKING = {
    'name': 'Asha',
    'email': 'a@x.com',
    'phone': '+911234567890',
    'date': '2025-06-01',
    'persons': 2,
    'message': 'Window seat please'
}


def _submit_booking(client, **overrides):
    response = client.post('/api/bookings', json=dict(BOOKING, **overrides))
    return json.loads(response.data)['data']['booking']


# ===== AUTHORIZATION TESTS =====

class TestAdminAuthorization:

    @pytest.mark.parametrize('path', [
        '/api/admin/dashboard',
        '/api/admin/bookings',
        '/api/admin/contacts',
        '/api/admin/packages',
        '/api/admin/places',
        '/api/admin/cabs',
        '/api/admin/services',
        '/api/admin/users',
    ])
    def test_requires_authentication(self, client, path):
        response = client.get(path)
        assert response.status_code == 401

    def test_requires_admin_role(self, client, user_headers):
        response = client.get('/api/admin/bookings', headers=user_headers)
        assert response.status_code == 403
        data = json.loads(response.data)
        assert data['message'] == 'Admin access required'

    def test_anonymous_delete_changes_nothing(self, client, active_package):
        response = client.delete(f'/api/admin/packages?id={active_package.id}')
        assert response.status_code == 401
        assert Package.query.count() == 1

    def test_non_admin_update_changes_nothing(self, client, user_headers, active_package):
        response = client.put('/api/admin/packages', headers=user_headers, json={
            'id': active_package.id,
            'title': 'Hijacked'
        })
        assert response.status_code == 403
        assert Package.query.first().title == 'Kashmir Valley Tour'

    def test_invalid_token(self, client):
        response = client.get('/api/admin/bookings', headers={'Authorization': 'Bearer not-a-token'})
        assert response.status_code == 401


# ===== BOOKINGS =====

class TestAdminBookings:

    def test_list_bookings(self, client, admin_headers, active_package):
        _submit_booking(client, packageId=active_package.id)

        response = client.get('/api/admin/bookings', headers=admin_headers)
        assert response.status_code == 200
        bookings = json.loads(response.data)['data']['bookings']
        assert len(bookings) == 1
        assert bookings[0]['packageName'] == 'Kashmir Valley Tour'
        assert bookings[0]['totalAmount'] == 30000.0

    def test_update_status_changes_only_status(self, client, admin_headers):
        booking = _submit_booking(client)

        response = client.put('/api/admin/bookings', headers=admin_headers, json={
            'id': booking['id'],
            'status': 'confirmed',
            'name': 'Someone Else'
        })

        assert response.status_code == 200
        updated = json.loads(response.data)['data']['bookings'][0]
        assert updated['status'] == 'confirmed'
        for key in ('name', 'email', 'phone', 'date', 'persons', 'message', 'package_id'):
            assert updated[key] == booking[key]

    def test_update_requires_id(self, client, admin_headers):
        response = client.put('/api/admin/bookings', headers=admin_headers, json={'status': 'confirmed'})
        assert response.status_code == 400

    def test_update_unknown_booking(self, client, admin_headers):
        response = client.put('/api/admin/bookings', headers=admin_headers, json={
            'id': 'missing',
            'status': 'confirmed'
        })
        assert response.status_code == 404

    def test_invalid_status(self, client, admin_headers):
        booking = _submit_booking(client)
        response = client.put('/api/admin/bookings', headers=admin_headers, json={
            'id': booking['id'],
            'status': 'paid'
        })
        assert response.status_code == 422
        assert Booking.query.first().status == 'pending'

    def test_delete_booking(self, client, admin_headers):
        booking = _submit_booking(client)

        response = client.delete(f"/api/admin/bookings?id={booking['id']}", headers=admin_headers)

        assert response.status_code == 200
        assert json.loads(response.data)['data']['bookings'] == []
        assert Booking.query.count() == 0

    def test_changes_are_audited(self, client, admin_headers, admin_user):
        booking = _submit_booking(client)
        client.put('/api/admin/bookings', headers=admin_headers, json={
            'id': booking['id'],
            'status': 'cancelled'
        })

        log = AuditLog.query.filter_by(action='booking_status_updated').first()
        assert log is not None
        assert log.user_id == admin_user.id
        assert log.entity_id == booking['id']


# ===== CONTACTS =====

class TestAdminContacts:

    def test_reply_and_delete(self, client, admin_headers):
        client.post('/api/contacts', json={'name': 'Ravi', 'email': 'r@x.com', 'message': 'Hello'})
        contact_id = Contact.query.first().id

        response = client.put('/api/admin/contacts', headers=admin_headers, json={
            'id': contact_id,
            'status': 'replied'
        })
        assert response.status_code == 200
        contact = json.loads(response.data)['data']['contacts'][0]
        assert contact['status'] == 'replied'
        assert contact['replied_at'] is not None

        response = client.delete(f'/api/admin/contacts?id={contact_id}', headers=admin_headers)
        assert response.status_code == 200
        assert Contact.query.count() == 0


# ===== PACKAGES =====

class TestAdminPackages:

    def test_list_includes_inactive(self, client, admin_headers, active_package, inactive_package):
        response = client.get('/api/admin/packages', headers=admin_headers)
        packages = json.loads(response.data)['data']['packages']
        assert {pkg['status'] for pkg in packages} == {'active', 'inactive'}

    def test_create_package(self, client, admin_headers):
        response = client.post('/api/admin/packages', headers=admin_headers, json={
            'title': 'Gurez Explorer',
            'location': 'Gurez',
            'price': 12000,
            'days': 3,
            'nights': 2,
            'itinerary': [{'title': 'Drive to Gurez'}, {'day': 2, 'description': 'Habba Khatoon peak'}],
            'inclusions': ['Stay', ' ', 'Meals'],
            'images': ['/storage/packages/gurez/1.jpg']
        })

        assert response.status_code == 201
        packages = json.loads(response.data)['data']['packages']
        assert len(packages) == 1
        created = packages[0]
        assert created['slug'] == 'gurez-explorer'
        assert created['status'] == 'active'
        assert created['itinerary'][0] == {'day': 1, 'title': 'Drive to Gurez', 'description': ''}
        assert created['itinerary'][1]['title'] == 'Day 2'
        assert created['inclusions'] == ['Stay', 'Meals']
        assert created['image'] == '/storage/packages/gurez/1.jpg'

    def test_create_requires_title(self, client, admin_headers):
        response = client.post('/api/admin/packages', headers=admin_headers, json={'price': 100})
        assert response.status_code == 422
        assert 'title' in json.loads(response.data)['errors']
        assert Package.query.count() == 0

    def test_update_is_full_replace(self, client, admin_headers, active_package):
        response = client.put('/api/admin/packages', headers=admin_headers, json={
            'id': active_package.id,
            'title': 'Kashmir Valley Tour',
            'price': 16000
        })

        assert response.status_code == 200
        updated = json.loads(response.data)['data']['packages'][0]
        assert updated['price'] == 16000.0
        assert updated['location'] is None
        assert updated['featured'] is False

    def test_deactivated_package_leaves_public_listing(self, client, admin_headers, active_package):
        client.put('/api/admin/packages', headers=admin_headers, json={
            'id': active_package.id,
            'title': 'Kashmir Valley Tour',
            'status': 'inactive'
        })

        response = client.get('/api/packages')
        assert json.loads(response.data)['data']['packages'] == []

    def test_delete_package(self, client, admin_headers, active_package):
        response = client.delete(f'/api/admin/packages?id={active_package.id}', headers=admin_headers)

        assert response.status_code == 200
        assert Package.query.count() == 0

    def test_delete_requires_id(self, client, admin_headers):
        response = client.delete('/api/admin/packages', headers=admin_headers)
        assert response.status_code == 400


# ===== PLACES / CABS / SERVICES =====

class TestAdminCatalogue:

    @pytest.mark.parametrize('path, key, model, payload, field', [
        ('/api/admin/places', 'places', Place, {'name': 'Sonamarg', 'region': 'Kashmir'}, 'name'),
        ('/api/admin/cabs', 'cabs', Cab, {'name': 'Innova Crysta', 'capacity': 7}, 'name'),
        ('/api/admin/services', 'services', Service, {'title': 'Airport pickup'}, 'title'),
    ])
    def test_crud(self, client, admin_headers, path, key, model, payload, field):
        response = client.post(path, headers=admin_headers, json=payload)
        assert response.status_code == 201
        rows = json.loads(response.data)['data'][key]
        assert len(rows) == 1
        row_id = rows[0]['id']

        response = client.get(f'{path}/{row_id}', headers=admin_headers)
        assert response.status_code == 200

        response = client.put(path, headers=admin_headers, json=dict(payload, id=row_id, status='inactive'))
        assert response.status_code == 200
        assert json.loads(response.data)['data'][key][0]['status'] == 'inactive'

        response = client.delete(f'{path}?id={row_id}', headers=admin_headers)
        assert response.status_code == 200
        assert model.query.count() == 0

    def test_cab_defaults(self, client, admin_headers):
        response = client.post('/api/admin/cabs', headers=admin_headers, json={'name': 'Dzire'})
        cab = json.loads(response.data)['data']['cabs'][0]
        assert cab['type'] == 'sedan'
        assert cab['capacity'] == 4


# ===== USERS =====

class TestAdminUsers:

    def test_list_users(self, client, admin_headers, regular_user):
        response = client.get('/api/admin/users', headers=admin_headers)
        users = json.loads(response.data)['data']['users']
        assert {user['email'] for user in users} == {'admin@test.com', 'user@test.com'}
        assert all('password_hash' not in user for user in users)

    def test_grant_admin_role(self, client, admin_headers, regular_user):
        response = client.put(f'/api/admin/users/{regular_user.id}/role', headers=admin_headers, json={
            'role': 'admin'
        })

        assert response.status_code == 200
        assert json.loads(response.data)['data']['user']['role'] == 'admin'
        assert User.query.filter_by(email='user@test.com').first().role == UserRole.ADMIN

    def test_unknown_role(self, client, admin_headers, regular_user):
        response = client.put(f'/api/admin/users/{regular_user.id}/role', headers=admin_headers, json={
            'role': 'owner'
        })
        assert response.status_code == 422

    def test_cannot_demote_self(self, client, admin_headers, admin_user):
        response = client.put(f'/api/admin/users/{admin_user.id}/role', headers=admin_headers, json={
            'role': 'user'
        })
        assert response.status_code == 422


# ===== DASHBOARD =====

class TestAdminDashboard:

    def test_dashboard_stats(self, client, admin_headers, catalogue):
        _submit_booking(client)
        client.post('/api/contacts', json={'name': 'Ravi', 'email': 'r@x.com', 'message': 'Hello'})

        response = client.get('/api/admin/dashboard', headers=admin_headers)

        assert response.status_code == 200
        data = json.loads(response.data)['data']
        assert data['stats']['totalBookings'] == 1
        assert data['stats']['totalContacts'] == 1
        assert data['stats']['bookingsByStatus'] == {
            'pending': 1, 'confirmed': 0, 'completed': 0, 'cancelled': 0
        }
        assert data['stats']['catalogue']['packages'] == {'total': 2, 'active': 1}
        assert len(data['recentBookings']) == 1

    def test_dashboard_reads_through_client(self, client, admin_headers, monkeypatch):
        from app.data.client import DataClient

        queried = []
        original_query = DataClient.query

        def recording_query(self, model):
            queried.append(model.__tablename__)
            return original_query(self, model)

        monkeypatch.setattr(DataClient, 'query', recording_query)

        response = client.get('/api/admin/dashboard', headers=admin_headers)

        assert response.status_code == 200
        assert {'bookings', 'contacts', 'users', 'packages', 'places', 'cabs', 'services'} <= set(queried)
