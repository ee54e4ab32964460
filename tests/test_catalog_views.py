import pytest
from django.test import Client
from django.urls import reverse

pytestmark = pytest.mark.django_db


def select(client, slug, group, option):
    return client.post(
        reverse('catalog:product_select_option', kwargs={'slug': slug}),
        data={'group': group, 'option': option},
        content_type='application/json',
    )


class TestProductDetail:

    def test_child_page(self, client, family):
        response = client.get(reverse('catalog:product_detail', kwargs={'slug': 'shirt-red'}))
        assert response.status_code == 200

        data = response.json()
        assert data['title'] == 'Classic Cotton T-Shirt - Red'
        assert data['category'] == 'Clothing'
        assert data['images'] == ['https://cdn.example.com/red-front.jpg', 'https://cdn.example.com/red-back.jpg']
        assert data['variants']['is_family'] is True
        assert data['variants']['initial_selection'] == {'Color': 'Red', 'Size': 'L'}
        assert data['variants']['buy_url'] == 'https://amazon.com/dp/RED'

    def test_images_fall_back_to_main_image(self, client, family):
        data = client.get(reverse('catalog:product_detail', kwargs={'slug': 'shirt-blue'})).json()
        assert data['images'] == ['https://cdn.example.com/blue-main.jpg']

    def test_parent_redirects_to_first_child(self, client, family):
        response = client.get(reverse('catalog:product_detail', kwargs={'slug': 'shirt-family'}))
        assert response.status_code == 302
        assert response['Location'] == '/products/shirt-red/'

    def test_unknown_product(self, client, family):
        response = client.get(reverse('catalog:product_detail', kwargs={'slug': 'nope'}))
        assert response.status_code == 404

    def test_inactive_product(self, client, family):
        family['blue'].is_active = False
        family['blue'].save()
        response = client.get(reverse('catalog:product_detail', kwargs={'slug': 'shirt-blue'}))
        assert response.status_code == 404


class TestSelectOption:

    def test_full_selection_navigates(self, client, family):
        client.get(reverse('catalog:product_detail', kwargs={'slug': 'shirt-red'}))
        response = select(client, 'shirt-red', 'Color', 'Blue')

        assert response.status_code == 200
        data = response.json()
        assert data['navigate_to'] == '/products/shirt-blue/'
        assert data['matched'] is True
        assert data['selection'] == {'Color': 'Blue', 'Size': 'L'}
        assert data['last_touched_group'] == 'Color'
        assert data['buy_url'] == 'https://amazon.com/dp/BLUE'

    def test_reselecting_current_option_stays(self, client, family):
        client.get(reverse('catalog:product_detail', kwargs={'slug': 'shirt-red'}))
        data = select(client, 'shirt-red', 'Color', 'Red').json()
        assert data['navigate_to'] is None
        assert data['matched'] is True

    def test_state_persists_between_clicks(self, client, standalone):
        client.get(reverse('catalog:product_detail', kwargs={'slug': 'canvas-tote'}))
        select(client, 'canvas-tote', 'Color', 'Black')

        session = client.session['variant_selection']
        assert session['state']['selection'] == {'Color': 'Black'}
        assert session['state']['last_touched_group'] == 'Color'

    def test_page_load_resets_state(self, client, standalone):
        client.get(reverse('catalog:product_detail', kwargs={'slug': 'canvas-tote'}))
        select(client, 'canvas-tote', 'Color', 'Black')
        client.get(reverse('catalog:product_detail', kwargs={'slug': 'canvas-tote'}))

        assert client.session['variant_selection']['state']['selection'] == {}

    def test_standalone_option_link(self, client, standalone):
        data = select(client, 'canvas-tote', 'Color', 'Black').json()
        assert data['navigate_to'] is None
        assert data['buy_url'] == 'https://amazon.com/dp/TOTE-BLACK'
        assert data['image_index'] == 1

    def test_unknown_option(self, client, family):
        response = select(client, 'shirt-red', 'Color', 'Green')
        assert response.status_code == 400

    def test_missing_fields(self, client, family):
        response = client.post(
            reverse('catalog:product_select_option', kwargs={'slug': 'shirt-red'}),
            data={'group': 'Color'},
            content_type='application/json',
        )
        assert response.status_code == 400
        assert response.json()['error'] == 'group and option are required'

    def test_invalid_json(self, client, family):
        response = client.post(
            reverse('catalog:product_select_option', kwargs={'slug': 'shirt-red'}),
            data='{not json',
            content_type='application/json',
        )
        assert response.status_code == 400

    def test_get_not_allowed(self, client, family):
        response = client.get(reverse('catalog:product_select_option', kwargs={'slug': 'shirt-red'}))
        assert response.status_code == 405


class TestThumbnailFailed:

    def test_failed_thumbnail_renders_as_text(self, client, standalone):
        detail_url = reverse('catalog:product_detail', kwargs={'slug': 'canvas-tote'})
        data = client.get(detail_url).json()
        black = data['variants']['groups'][0]['options'][1]
        assert black['thumbnail_url'] == '/uploads/tote-black-thumb.jpg'

        response = client.post(
            reverse('catalog:product_thumbnail_failed', kwargs={'slug': 'canvas-tote'}),
            data={'group': 'Color', 'option': 'Black'},
            content_type='application/json',
        )
        assert response.status_code == 200
        assert response.json()['failed_thumbnails'] == [['Color', 'Black']]


class TestCsrf:

    def test_detail_page_hands_out_token_for_selection(self, family):
        client = Client(enforce_csrf_checks=True)
        client.get(reverse('catalog:product_detail', kwargs={'slug': 'shirt-red'}))
        token = client.cookies['csrftoken'].value

        response = client.post(
            reverse('catalog:product_select_option', kwargs={'slug': 'shirt-red'}),
            data={'group': 'Color', 'option': 'Blue'},
            content_type='application/json',
            HTTP_X_CSRFTOKEN=token,
        )
        assert response.status_code == 200
        assert response.json()['navigate_to'] == '/products/shirt-blue/'

    def test_selection_without_token_is_rejected(self, family):
        client = Client(enforce_csrf_checks=True)
        client.get(reverse('catalog:product_detail', kwargs={'slug': 'shirt-red'}))
        response = select(client, 'shirt-red', 'Color', 'Blue')
        assert response.status_code == 403
