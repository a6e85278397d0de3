import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.wishlist.models import WishlistItem


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(
        email='wisher@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        email='otherwisher@example.com',
        password='OtherPass123!',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def wishlist_item(user):
    return WishlistItem.objects.create(
        owner=user,
        name='Port Ellen 40',
        distillery='Port Ellen',
        priority=5,
        target_price=Decimal('3000.00'),
        budget=Decimal('2500.00'),
    )


@pytest.fixture
def low_priority_item(user):
    return WishlistItem.objects.create(
        owner=user,
        name='Kilchoman Machir Bay',
        distillery='Kilchoman',
        priority=1,
        target_price=Decimal('45.00'),
    )


@pytest.fixture
def other_item(other_user):
    return WishlistItem.objects.create(owner=other_user, name='Brora 30')
