import pytest
from io import StringIO
from unittest.mock import patch
from django.core.management import call_command
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User
from apps.bottles.models import Bottle, DrinkingLog
from apps.notifications.models import ScheduledReminder
from apps.wishlist.models import WishlistItem


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client):
        """Successfully register a new user."""
        url = reverse('users:register')
        data = {
            'email': 'newuser@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'display_name': 'New User',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_register_without_display_name(self, api_client):
        """Register without display name (optional field)."""
        url = reverse('users:register')
        data = {
            'email': 'minimal@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED

    def test_register_duplicate_email(self, api_client, user):
        """Cannot register with existing email."""
        url = reverse('users:register')
        data = {
            'email': user.email,
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_register_password_mismatch(self, api_client):
        """Registration fails when passwords don't match."""
        url = reverse('users:register')
        data = {
            'email': 'mismatch@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'DifferentPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data

    def test_register_weak_password(self, api_client):
        """Registration fails with weak password."""
        url = reverse('users:register')
        data = {
            'email': 'weak@example.com',
            'password': '123',
            'password_confirm': '123',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        url = reverse('users:login')
        response = api_client.post(url, {
            'email': 'testuser@example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['email'] == user.email

    def test_login_wrong_password(self, api_client, user):
        url = reverse('users:login')
        response = api_client.post(url, {
            'email': 'testuser@example.com',
            'password': 'WrongPass123!',
        })

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_nonexistent_user(self, api_client):
        url = reverse('users:login')
        response = api_client.post(url, {
            'email': 'nobody@example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, api_client, user_inactive):
        url = reverse('users:login')
        response = api_client.post(url, {
            'email': 'inactive@example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_email_case_insensitive(self, api_client, user):
        response = api_client.post(
            reverse('users:login'),
            {'email': 'TestUser@Example.com', 'password': 'TestPass123!'},
        )

        assert response.status_code == status.HTTP_200_OK

    def test_login_updates_last_login(self, api_client, user):
        assert user.last_login is None
        url = reverse('users:login')
        api_client.post(url, {
            'email': 'testuser@example.com',
            'password': 'TestPass123!',
        })

        user.refresh_from_db()
        assert user.last_login is not None


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestProfile:
    """Tests for the current user endpoints."""

    def test_get_current_user(self, authenticated_client, user):
        response = authenticated_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email

    def test_get_current_user_unauthenticated(self, api_client):
        response = api_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_update_display_name(self, authenticated_client, user):
        response = authenticated_client.patch(
            reverse('users:update-profile'),
            {'display_name': 'Peat Lover'},
        )

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.display_name == 'Peat Lover'

    def test_cannot_update_email(self, authenticated_client, user):
        authenticated_client.patch(
            reverse('users:update-profile'),
            {'email': 'changed@example.com'},
        )

        user.refresh_from_db()
        assert user.email == 'testuser@example.com'


# =============================================================================
# Delete All Data Tests
# =============================================================================

@pytest.mark.django_db
class TestDeleteAllData:
    """Tests for POST /api/auth/delete-all-data/"""

    def test_deletes_bottles_logs_and_wishlist(self, authenticated_client, user, other_user):
        bottle = Bottle.objects.create(owner=user, name='Hakushu 12', volume=700, remaining_volume=650)
        DrinkingLog.objects.create(bottle=bottle, volume=50)
        WishlistItem.objects.create(owner=user, name='Yamazaki 18')
        Bottle.objects.create(owner=other_user, name='Lagavulin 16', volume=700, remaining_volume=700)

        response = authenticated_client.post(reverse('users:delete-all-data'), {'confirm': True})

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'bottles': 1, 'wishlist_items': 1}
        assert not Bottle.objects.filter(owner=user).exists()
        assert not DrinkingLog.objects.exists()
        assert not WishlistItem.objects.filter(owner=user).exists()
        # Other users' data is untouched
        assert Bottle.objects.filter(owner=other_user).count() == 1

    def test_nothing_to_delete(self, authenticated_client):
        response = authenticated_client.post(reverse('users:delete-all-data'), {'confirm': True})

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'bottles': 0, 'wishlist_items': 0}

    def test_reminders_removed(self, authenticated_client, user, stocked_collection):
        response = authenticated_client.post(reverse('users:delete-all-data'), {'confirm': True})

        assert response.status_code == status.HTTP_200_OK
        assert not ScheduledReminder.objects.filter(user=user).exists()

    def test_failure_rolls_back_everything(self, authenticated_client, user, stocked_collection):
        with patch.object(ScheduledReminder.objects, 'filter', side_effect=DatabaseError('locked')):
            response = authenticated_client.post(reverse('users:delete-all-data'), {'confirm': True})

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert Bottle.objects.filter(owner=user).count() == 1
        assert DrinkingLog.objects.count() == 1
        assert WishlistItem.objects.filter(owner=user).count() == 1

    def test_requires_confirmation(self, authenticated_client, user):
        Bottle.objects.create(owner=user, name='Hakushu 12', volume=700, remaining_volume=700)

        response = authenticated_client.post(reverse('users:delete-all-data'), {'confirm': False})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Bottle.objects.filter(owner=user).exists()


# =============================================================================
# Model Tests
# =============================================================================

@pytest.mark.django_db
class TestUserModel:

    def test_create_user(self, db):
        user = User.objects.create_user(email='Model@Example.com', password='TestPass123!')

        assert user.email == 'Model@example.com'
        assert user.check_password('TestPass123!')
        assert not user.is_staff

    def test_create_superuser(self, db):
        admin = User.objects.create_superuser(email='admin@example.com', password='TestPass123!')

        assert admin.is_staff
        assert admin.is_superuser

    def test_get_display_name_falls_back_to_email(self, db):
        user = User.objects.create_user(email='nameless@example.com', password='TestPass123!')

        assert user.get_display_name() == 'nameless'


# =============================================================================
# Sample Data Command
# =============================================================================

@pytest.mark.django_db
class TestCreateSampleData:

    def test_creates_collection(self):
        call_command('create_sample_data', stdout=StringIO())

        alice = User.objects.get(email='alice@example.com')
        assert alice.bottles.count() == 5
        assert alice.wishlist_items.count() == 3
        assert DrinkingLog.objects.filter(bottle__owner=alice).count() == 11
        assert alice.bottles.filter(opened_date__isnull=True).count() == 2

    def test_clear_is_repeatable(self):
        call_command('create_sample_data', stdout=StringIO())
        call_command('create_sample_data', '--clear', stdout=StringIO())

        assert Bottle.objects.count() == 5
