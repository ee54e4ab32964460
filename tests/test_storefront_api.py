import pytest

from apps.storefront.models import ContactMessage, SiteSettings

pytestmark = pytest.mark.django_db


class TestSiteSettings:

    def test_singleton(self):
        first = SiteSettings.load()
        second = SiteSettings(site_name='Other')
        second.save()
        assert SiteSettings.objects.count() == 1
        assert first.pk == second.pk
        assert SiteSettings.load().site_name == 'Other'

    def test_delete_is_ignored(self):
        settings = SiteSettings.load()
        settings.delete()
        assert SiteSettings.objects.count() == 1

    def test_public_read(self, api_client):
        SiteSettings.objects.create(site_name='Deal Shelf', contact_email='hi@example.com')
        response = api_client.get('/api/settings/')
        assert response.status_code == 200
        assert response.data['site_name'] == 'Deal Shelf'
        assert response.data['contact_email'] == 'hi@example.com'

    def test_anonymous_cannot_update(self, api_client):
        response = api_client.put('/api/settings/', {'site_name': 'Hacked'}, format='json')
        assert response.status_code == 403
        assert SiteSettings.load().site_name == ''

    def test_staff_update(self, staff_client):
        response = staff_client.patch(
            '/api/settings/',
            {'site_name': 'Deal Shelf', 'logo_url': 'https://cdn.example.com/logo.png'},
            format='json',
        )
        assert response.status_code == 200
        settings = SiteSettings.load()
        assert settings.site_name == 'Deal Shelf'
        assert settings.logo_url == 'https://cdn.example.com/logo.png'
        assert settings.history.count() >= 1

    def test_invalid_email_rejected(self, staff_client):
        response = staff_client.patch('/api/settings/', {'contact_email': 'not-an-email'}, format='json')
        assert response.status_code == 400
        assert 'contact_email' in response.data


class TestContactMessages:

    def test_submit(self, api_client):
        response = api_client.post('/api/messages/', {
            'name': 'Ada',
            'email': 'ada@example.com',
            'subject': 'Hello',
            'message': 'Do you ship to Canada?',
        }, format='json')

        assert response.status_code == 201
        assert response.data['success'] is True
        message = ContactMessage.objects.get(pk=response.data['id'])
        assert message.email == 'ada@example.com'
        assert message.is_read is False

    def test_subject_is_optional(self, api_client):
        response = api_client.post('/api/messages/', {
            'name': 'Ada', 'email': 'ada@example.com', 'message': 'Hi',
        }, format='json')
        assert response.status_code == 201

    def test_required_fields(self, api_client):
        response = api_client.post('/api/messages/', {'name': '  ', 'email': 'bad'}, format='json')
        assert response.status_code == 400
        assert set(response.data) == {'name', 'email', 'message'}
        assert ContactMessage.objects.count() == 0

    def test_list_is_staff_only(self, api_client, staff_client):
        ContactMessage.objects.create(name='Ada', email='ada@example.com', message='Hi')
        assert api_client.get('/api/messages/').status_code == 403
        response = staff_client.get('/api/messages/')
        assert response.status_code == 200
        assert response.data['count'] == 1

    def test_mark_read(self, staff_client):
        message = ContactMessage.objects.create(name='Ada', email='ada@example.com', message='Hi')
        response = staff_client.post(f'/api/messages/{message.pk}/mark_read/')
        assert response.status_code == 200
        message.refresh_from_db()
        assert message.is_read is True
