import pytest
from django.urls import reverse
from rest_framework import status
from apps.notifications.models import NotificationPreferences, ScheduledReminder


@pytest.mark.django_db
class TestPreferencesEndpoint:
    """Tests for /api/notifications/preferences/"""

    def test_get_creates_defaults(self, authenticated_client, user):
        url = reverse('notifications:preferences')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['notifications_enabled'] is False
        assert response.data['low_stock_threshold'] == 10.0
        assert NotificationPreferences.objects.filter(user=user).exists()

    def test_patch_enables_and_reschedules(self, authenticated_client, user, low_bottle,
                                          django_capture_on_commit_callbacks):
        url = reverse('notifications:preferences')

        with django_capture_on_commit_callbacks(execute=True):
            response = authenticated_client.patch(
                url, {'notifications_enabled': True}, format='json'
            )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['notifications_enabled'] is True
        assert ScheduledReminder.objects.filter(user=user, category='LOW_STOCK').count() == 1

    def test_patch_rejects_threshold_over_100(self, authenticated_client):
        url = reverse('notifications:preferences')
        response = authenticated_client.patch(url, {'low_stock_threshold': 150}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_requires_authentication(self, api_client):
        url = reverse('notifications:preferences')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestPendingAndReschedule:

    def test_reschedule_returns_pending(self, authenticated_client, enabled_preferences,
                                        low_bottle, opened_bottle):
        url = reverse('notifications:reschedule')
        response = authenticated_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['scheduled'] == 3
        assert len(response.data['reminders']) == 3

    def test_pending_sorted_by_fire_date(self, authenticated_client, enabled_preferences,
                                         low_bottle, opened_bottle):
        authenticated_client.post(reverse('notifications:reschedule'))

        response = authenticated_client.get(reverse('notifications:pending'))

        assert response.status_code == status.HTTP_200_OK
        categories = [r['category'] for r in response.data]
        assert categories == ['LOW_STOCK', 'AGE_NOTIFICATION', 'AGE_NOTIFICATION']

    def test_pending_empty_when_disabled(self, authenticated_client, low_bottle):
        authenticated_client.post(reverse('notifications:reschedule'))

        response = authenticated_client.get(reverse('notifications:pending'))

        assert response.data == []
