import pytest
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestStatisticsEndpoint:
    """Tests for GET /api/analytics/statistics/"""

    def test_monthly_statistics(self, authenticated_client, collection):
        response = authenticated_client.get(reverse('analytics:statistics'))

        assert response.status_code == status.HTTP_200_OK
        data = response.data
        assert data['total_bottles'] == 2
        assert data['opened_bottles'] == 1
        assert data['opened_percentage'] == 50.0
        assert data['total_investment'] == '86.00'
        assert data['average_abv'] == 47.5
        assert data['average_remaining_percentage'] == 80.0
        assert data['period'] == 'month'
        assert len(data['consumption']) == 6
        assert data['consumption'][-1]['volume'] == 140
        assert data['trend']['total'] == 140
        assert data['has_consumption_data'] is True
        assert [row['name'] for row in data['cost_performance']] == ["Maker's Mark", 'Bruichladdich Classic Laddie']

    def test_yearly_statistics(self, authenticated_client, collection):
        response = authenticated_client.get(reverse('analytics:statistics'), {'period': 'yearly'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['period'] == 'year'
        assert len(response.data['consumption']) == 5
        assert response.data['consumption'][-1]['label'].endswith('年')

    def test_custom_count(self, authenticated_client, collection):
        response = authenticated_client.get(
            reverse('analytics:statistics'),
            {'period': 'monthly', 'count': 12}
        )

        assert len(response.data['consumption']) == 12

    def test_invalid_period(self, authenticated_client):
        response = authenticated_client.get(reverse('analytics:statistics'), {'period': 'weekly'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_empty_collection(self, authenticated_client):
        response = authenticated_client.get(reverse('analytics:statistics'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_bottles'] == 0
        assert response.data['has_bottles'] is False
        assert response.data['type_distribution'] == []

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('analytics:statistics'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
