import pytest
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.bottles.models import Bottle, DrinkingLog
from apps.notifications.models import ReminderCategory, ScheduledReminder, TriggerType
from apps.wishlist.models import WishlistItem

PASSWORD = 'TestPass123!'


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    """Factory for collection owners sharing one password."""
    def _make(email, **extra):
        return User.objects.create_user(email=email, password=PASSWORD, **extra)
    return _make


@pytest.fixture
def user(make_user):
    return make_user('testuser@example.com', display_name='Test User')


@pytest.fixture
def user_inactive(make_user):
    return make_user('inactive@example.com', is_active=False)


@pytest.fixture
def other_user(make_user):
    return make_user('otheruser@example.com', display_name='Other User')


@pytest.fixture
def authenticated_client(api_client, user):
    """API client carrying a JWT access token for ``user``."""
    token = RefreshToken.for_user(user).access_token
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return api_client


@pytest.fixture
def stocked_collection(user):
    """One opened bottle with a log and a pending reminder, plus a wishlist item."""
    bottle = Bottle.objects.create(
        owner=user,
        name='Hakushu 12',
        volume=700,
        remaining_volume=40,
        opened_date=timezone.now(),
    )
    DrinkingLog.objects.create(bottle=bottle, volume=660)
    WishlistItem.objects.create(owner=user, name='Yamazaki 18', priority=5)
    ScheduledReminder.objects.create(
        user=user,
        identifier=f"low_stock_{bottle.id}",
        category=ReminderCategory.LOW_STOCK,
        trigger_type=TriggerType.INTERVAL,
        fire_at=timezone.now(),
        title='Running low',
        bottle_id=bottle.id,
    )
    return bottle
