"""
Tests for the public catalogue and submission endpoints
Run with: pytest tests/test_public.py -v
"""
import json
from urllib.parse import unquote

from app.models import Booking, Contact


BOOKING = {
    'name': 'Asha',
    'email': 'a@x.com',
    'phone': '+911234567890',
    'date': '2025-06-01',
    'persons': 2
}


class TestCatalogue:

    def test_packages_list_only_active(self, client, catalogue, active_package):
        response = client.get('/api/packages')
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['success'] is True
        assert [pkg['id'] for pkg in data['data']['packages']] == [active_package.id]

    def test_admin_token_does_not_expose_inactive(self, client, catalogue, admin_headers):
        response = client.get('/api/packages', headers=admin_headers)
        data = json.loads(response.data)
        assert all(pkg['status'] == 'active' for pkg in data['data']['packages'])

    def test_featured_packages(self, client, catalogue, active_package):
        response = client.get('/api/packages?featured=true&limit=3')
        data = json.loads(response.data)
        assert [pkg['title'] for pkg in data['data']['packages']] == ['Kashmir Valley Tour']

    def test_package_detail(self, client, active_package):
        response = client.get(f'/api/packages/{active_package.id}')
        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['data']['package']['duration'] == '5 Days / 4 Nights'
        assert data['data']['package']['images'] == []

    def test_inactive_package_detail_is_hidden(self, client, inactive_package):
        response = client.get(f'/api/packages/{inactive_package.id}')
        assert response.status_code == 404
        data = json.loads(response.data)
        assert data['message'] == 'Package not found'

    def test_places_cabs_services_only_active(self, client, catalogue):
        for path, key, field, expected in (
            ('/api/places', 'places', 'name', ['Gulmarg']),
            ('/api/cabs', 'cabs', 'name', ['Innova']),
            ('/api/services', 'services', 'title', ['Houseboats']),
        ):
            response = client.get(path)
            assert response.status_code == 200
            data = json.loads(response.data)
            assert [row[field] for row in data['data'][key]] == expected

    def test_place_by_slug(self, client, catalogue):
        response = client.get('/api/places/gulmarg')
        assert response.status_code == 200
        assert json.loads(response.data)['data']['place']['name'] == 'Gulmarg'

        assert client.get('/api/places/gurez').status_code == 404


class TestBookingSubmission:

    def test_submit_booking(self, client):
        response = client.post('/api/bookings', json=BOOKING)

        assert response.status_code == 201
        data = json.loads(response.data)
        booking = data['data']['booking']
        assert booking['status'] == 'pending'
        assert booking['date'] == '2025-06-01'
        assert booking['persons'] == 2
        assert booking['package_id'] is None
        assert booking['packageName'] == 'Custom Booking'
        assert Booking.query.count() == 1

    def test_unknown_package_returns_404(self, client):
        response = client.post('/api/bookings', json=dict(BOOKING, packageId='nope'))

        assert response.status_code == 404
        data = json.loads(response.data)
        assert data['success'] is False
        assert data['message'] == 'Package not found'
        assert Booking.query.count() == 0

    def test_missing_fields_return_422(self, client):
        response = client.post('/api/bookings', json={'name': 'Asha'})

        assert response.status_code == 422
        data = json.loads(response.data)
        assert 'email' in data['errors']
        assert 'date' in data['errors']
        assert Booking.query.count() == 0

    def test_invalid_date(self, client):
        response = client.post('/api/bookings', json=dict(BOOKING, date='01/06/2025'))
        assert response.status_code == 422
        assert Booking.query.count() == 0

    def test_idempotency_key(self, client):
        headers = {'Idempotency-Key': 'form-123'}
        first = client.post('/api/bookings', json=BOOKING, headers=headers)
        second = client.post('/api/bookings', json=BOOKING, headers=headers)

        assert first.status_code == 201
        assert second.status_code == 200
        first_id = json.loads(first.data)['data']['booking']['id']
        second_id = json.loads(second.data)['data']['booking']['id']
        assert first_id == second_id
        assert Booking.query.count() == 1

    def test_reused_key_with_other_details_reveals_nothing(self, client):
        headers = {'Idempotency-Key': 'abc'}
        first = client.post('/api/bookings', json=dict(BOOKING, email='asha@private.com'), headers=headers)
        assert first.status_code == 201

        second = client.post('/api/bookings', json=dict(BOOKING, email='eve@x.com'), headers=headers)

        assert second.status_code == 409
        data = json.loads(second.data)
        assert data['success'] is False
        assert 'data' not in data
        assert b'asha@private.com' not in second.data
        assert b'+911234567890' not in second.data
        assert Booking.query.count() == 1

    def test_fractional_persons_rejected(self, client):
        response = client.post('/api/bookings', json=dict(BOOKING, persons=2.9))

        assert response.status_code == 422
        assert json.loads(response.data)['errors']['persons'] == 'persons must be a whole number'
        assert Booking.query.count() == 0

    def test_boolean_persons_rejected(self, client):
        response = client.post('/api/bookings', json=dict(BOOKING, persons=True))
        assert response.status_code == 422
        assert Booking.query.count() == 0

    def test_whole_float_persons_accepted(self, client):
        response = client.post('/api/bookings', json=dict(BOOKING, persons=3.0))
        assert response.status_code == 201
        assert Booking.query.first().persons == 3

    def test_over_long_name_is_reported_not_cut(self, client):
        response = client.post('/api/bookings', json=dict(BOOKING, name='A' * 121))

        assert response.status_code == 422
        assert json.loads(response.data)['errors']['name'] == 'name must be at most 120 characters'
        assert Booking.query.count() == 0

    def test_status_in_body_is_ignored(self, client, admin_headers):
        response = client.post('/api/bookings', json=dict(BOOKING, status='confirmed'), headers=admin_headers)
        assert response.status_code == 201
        assert Booking.query.first().status == 'pending'

    def test_follow_up_links(self, client, active_package):
        response = client.post('/api/bookings', json=dict(BOOKING, packageId=active_package.id))
        follow_up = json.loads(response.data)['data']['followUp']

        whatsapp = follow_up['whatsapp']
        assert whatsapp['number'] == '917006594976'
        assert whatsapp['url'].startswith('https://wa.me/917006594976?text=')
        assert 'Package: Kashmir Valley Tour' in whatsapp['text']
        assert unquote(whatsapp['url'].split('?text=', 1)[1]) == whatsapp['text']

        email = follow_up['email']
        assert email['to'] == 'bookings@example.com'
        assert email['subject'] == 'Booking Request - Asha'
        assert email['body'].startswith('Hello Test Travels,')
        assert email['url'].startswith('mailto:bookings@example.com?subject=Booking%20Request%20-%20Asha&body=')


class TestContactSubmission:

    def test_submit_contact(self, client):
        response = client.post('/api/contacts', json={
            'name': 'Ravi',
            'email': 'ravi@example.com',
            'message': 'Do you arrange houseboats?'
        })

        assert response.status_code == 201
        contact = json.loads(response.data)['data']['contact']
        assert contact['status'] == 'pending'
        assert contact['subject'] == 'Booking enquiry'
        assert Contact.query.count() == 1

    def test_over_long_message_is_reported_not_cut(self, client):
        response = client.post('/api/contacts', json={
            'name': 'Ravi',
            'email': 'ravi@example.com',
            'message': 'x' * 5001
        })

        assert response.status_code == 422
        assert 'message' in json.loads(response.data)['errors']
        assert Contact.query.count() == 0

    def test_contact_requires_message(self, client):
        response = client.post('/api/contacts', json={'name': 'Ravi', 'email': 'ravi@example.com'})

        assert response.status_code == 422
        assert 'message' in json.loads(response.data)['errors']
        assert Contact.query.count() == 0
