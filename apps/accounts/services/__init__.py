"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    DataDeletionError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .account_management import delete_all_collection_data

__all__ = [
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'DataDeletionError',
    'register_user',
    'authenticate_user',
    'delete_all_collection_data',
]
