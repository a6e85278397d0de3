import pytest
from datetime import datetime
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.bottles.models import Bottle, DrinkingLog


def aware(*args):
    return timezone.make_aware(datetime(*args))


@pytest.fixture
def fixed_now():
    """Mid-June 2025, noon UTC."""
    return aware(2025, 6, 15, 12, 0)


@pytest.fixture
def make_bottle():
    """Build an unsaved bottle."""
    def _make(**kwargs):
        kwargs.setdefault('name', 'Test Bottle')
        kwargs.setdefault('volume', 700)
        kwargs.setdefault('remaining_volume', kwargs['volume'])
        return Bottle(**kwargs)
    return _make


@pytest.fixture
def make_log():
    """Build an unsaved drinking log."""
    def _make(volume, *date_args):
        return DrinkingLog(volume=volume, date=aware(*date_args))
    return _make


# =============================================================================
# API fixtures
# =============================================================================

@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def analytics_user(db):
    return User.objects.create_user(
        email='analytics_user@example.com',
        password='TestPass123!',
        display_name='Analytics User',
    )


@pytest.fixture
def analytics_outsider(db):
    return User.objects.create_user(
        email='analytics_outsider@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def authenticated_client(api_client, analytics_user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(analytics_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def collection(analytics_user, analytics_outsider):
    """Two bottles for the analytics user, one for the outsider."""
    opened = Bottle.objects.create(
        owner=analytics_user,
        name='Bruichladdich Classic Laddie',
        type='Single Malt',
        abv=50.0,
        volume=700,
        remaining_volume=560,
        purchase_price=Decimal('56.00'),
        opened_date=timezone.now(),
    )
    DrinkingLog.objects.create(bottle=opened, volume=140)
    Bottle.objects.create(
        owner=analytics_user,
        name="Maker's Mark",
        type='Bourbon',
        abv=45.0,
        volume=1000,
        remaining_volume=1000,
        purchase_price=Decimal('30.00'),
    )
    Bottle.objects.create(
        owner=analytics_outsider,
        name='Hibiki Harmony',
        type='Blend',
        abv=43.0,
        volume=700,
        remaining_volume=700,
        purchase_price=Decimal('900.00'),
    )
    return opened
