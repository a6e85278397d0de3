import pytest
from unittest.mock import patch
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status
from apps.bottles.models import Bottle
from apps.wishlist.models import WishlistItem


@pytest.mark.django_db
class TestWishlistApi:
    """Tests for /api/wishlist/"""

    def test_list_sorted_and_scoped(self, authenticated_client, wishlist_item, low_priority_item, other_item):
        response = authenticated_client.get(reverse('wishlist:item-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [i['name'] for i in response.data] == ['Port Ellen 40', 'Kilchoman Machir Bay']
        assert response.data[0]['priority_level'] == 'high'

    def test_create(self, authenticated_client, user):
        response = authenticated_client.post(
            reverse('wishlist:item-list'),
            {'name': 'Springbank 21', 'priority': 4, 'target_price': '450.00'},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['priority_level'] == 'high'
        assert WishlistItem.objects.filter(owner=user).count() == 1

    @pytest.mark.parametrize('priority', [0, 6])
    def test_create_rejects_priority_out_of_range(self, authenticated_client, priority):
        response = authenticated_client.post(
            reverse('wishlist:item-list'),
            {'name': 'Invalid', 'priority': priority},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_partial_update(self, authenticated_client, wishlist_item):
        url = reverse('wishlist:item-detail', kwargs={'pk': wishlist_item.id})
        response = authenticated_client.patch(url, {'notes': 'Auction only'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['notes'] == 'Auction only'

    def test_update_other_users_item(self, authenticated_client, other_item):
        url = reverse('wishlist:item-detail', kwargs={'pk': other_item.id})
        response = authenticated_client.patch(url, {'notes': 'mine now'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete(self, authenticated_client, wishlist_item):
        url = reverse('wishlist:item-detail', kwargs={'pk': wishlist_item.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not WishlistItem.objects.exists()

    def test_convert(self, authenticated_client, user, wishlist_item):
        url = reverse('wishlist:item-convert', kwargs={'pk': wishlist_item.id})
        response = authenticated_client.post(url, {'volume': 700, 'type': 'Single Malt'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Port Ellen 40'
        assert response.data['purchase_price'] == '2500.00'
        assert Bottle.objects.filter(owner=user).count() == 1
        assert not WishlistItem.objects.exists()

    def test_convert_missing_item(self, authenticated_client, other_item):
        url = reverse('wishlist:item-convert', kwargs={'pk': other_item.id})
        response = authenticated_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_failure_returns_503(self, authenticated_client, wishlist_item):
        url = reverse('wishlist:item-detail', kwargs={'pk': wishlist_item.id})

        with patch.object(WishlistItem, 'delete', side_effect=DatabaseError('locked')):
            response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert WishlistItem.objects.filter(id=wishlist_item.id).exists()

    def test_create_failure_returns_503(self, authenticated_client):
        url = reverse('wishlist:item-list')

        with patch.object(WishlistItem, 'save', side_effect=DatabaseError('disk full')):
            response = authenticated_client.post(url, {'name': 'Rosebank 30'}, format='json')

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE

    def test_convert_failure_returns_503(self, authenticated_client, user, wishlist_item):
        url = reverse('wishlist:item-convert', kwargs={'pk': wishlist_item.id})

        with patch.object(Bottle, 'save', side_effect=DatabaseError('disk full')):
            response = authenticated_client.post(url, {'volume': 700}, format='json')

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert WishlistItem.objects.filter(id=wishlist_item.id).exists()
