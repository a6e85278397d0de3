import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.bottles.models import Bottle


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(
        email='collector@example.com',
        password='TestPass123!',
        display_name='Collector',
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        email='neighbour@example.com',
        password='OtherPass123!',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def bottle(user):
    """A sealed 700 ml bottle."""
    return Bottle.objects.create(
        owner=user,
        name='Ardbeg 10',
        distillery='Ardbeg',
        region='Islay',
        type='Single Malt',
        abv=46.0,
        volume=700,
        remaining_volume=700,
    )


@pytest.fixture
def nearly_empty_bottle(user):
    return Bottle.objects.create(
        owner=user,
        name='Glenfarclas 15',
        distillery='Glenfarclas',
        type='Single Malt',
        volume=700,
        remaining_volume=20,
        opened_date=timezone.now() - timedelta(days=200),
    )


@pytest.fixture
def other_bottle(other_user):
    return Bottle.objects.create(
        owner=other_user,
        name='Redbreast 12',
        distillery='Midleton',
        type='Single Pot Still',
        volume=700,
        remaining_volume=700,
    )
