import pytest
from django.urls import reverse
from rest_framework import status
from apps.sync.models import SyncEvent


@pytest.mark.django_db
class TestSyncApi:
    """Tests for /api/sync/"""

    def test_status(self, authenticated_client, settings):
        response = authenticated_client.get(reverse('sync:status'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['container_id'] == settings.CLOUD_SYNC_CONTAINER_ID
        assert response.data['cloud_sync_available'] is False

    def test_recheck(self, authenticated_client):
        response = authenticated_client.post(
            reverse('sync:recheck'), {'status': 'available'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['cloud_sync_available'] is True

    def test_recheck_invalid_status(self, authenticated_client):
        response = authenticated_client.post(
            reverse('sync:recheck'), {'status': 'maybe'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_initialize_schema_without_account(self, authenticated_client):
        response = authenticated_client.post(reverse('sync:initialize-schema'))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert 'error' in response.data

    def test_initialize_schema(self, authenticated_client, available_state):
        response = authenticated_client.post(reverse('sync:initialize-schema'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['schema_initialized'] is True

    def test_diagnostics(self, authenticated_client, available_state):
        response = authenticated_client.get(reverse('sync:diagnostics'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['counts']['bottles'] == 0

    def test_events_list_and_clear(self, authenticated_client, user):
        authenticated_client.post(reverse('sync:recheck'), {'status': 'restricted'}, format='json')

        listed = authenticated_client.get(reverse('sync:events'))
        assert listed.data[0]['kind'] == 'error'

        cleared = authenticated_client.delete(reverse('sync:events'))
        assert cleared.status_code == status.HTTP_204_NO_CONTENT
        assert list(SyncEvent.objects.filter(user=user).values_list('message', flat=True)) == ['Logs cleared']
