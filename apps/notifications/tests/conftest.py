import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.bottles.models import Bottle
from apps.notifications.models import NotificationPreferences


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(
        email='notify@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def enabled_preferences(user):
    """Preferences with reminders on and every age threshold enabled."""
    return NotificationPreferences.objects.create(
        user=user,
        notifications_enabled=True,
        low_stock_threshold=10.0,
        notify_at_30_days=True,
        notify_at_60_days=True,
        notify_at_90_days=True,
    )


@pytest.fixture
def low_bottle(user):
    """Bottle at exactly 10% remaining, opened long enough ago that every age threshold has passed."""
    return Bottle.objects.create(
        owner=user,
        name='Lagavulin 16',
        volume=700,
        remaining_volume=70,
        opened_date=timezone.now() - timedelta(days=120),
    )


@pytest.fixture
def sealed_bottle(user):
    return Bottle.objects.create(
        owner=user,
        name='Highland Park 12',
        volume=700,
        remaining_volume=50,
    )


@pytest.fixture
def opened_bottle(user):
    """Full-ish bottle opened 45 days ago."""
    return Bottle.objects.create(
        owner=user,
        name='Springbank 10',
        volume=700,
        remaining_volume=600,
        opened_date=timezone.now() - timedelta(days=45),
    )
