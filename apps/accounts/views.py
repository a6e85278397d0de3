import logging

from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema
from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
    DeleteAllDataSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    delete_all_collection_data,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    DataDeletionError,
)

logger = logging.getLogger(__name__)


class TokenPairSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthenticatedUserSerializer(serializers.Serializer):
    """Body returned by register and login."""
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokenPairSerializer()


class DeletedCountsSerializer(serializers.Serializer):
    bottles = serializers.IntegerField()
    wishlist_items = serializers.IntegerField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _token_response(user, message, status_code=status.HTTP_200_OK):
    refresh = RefreshToken.for_user(user)
    tokens = {'refresh': str(refresh), 'access': str(refresh.access_token)}
    return Response(
        {'message': message, 'user': UserSerializer(user).data, 'tokens': tokens},
        status=status_code,
    )


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthenticatedUserSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new user account and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = register_user(**serializer.validated_data)
    except UserRegistrationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return _token_response(user, 'Registration successful', status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthenticatedUserSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    logger.debug("Issued tokens for user %s", user.id)
    return _token_response(user, 'Login successful')


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    return Response(UserSerializer(request.user).data)


@extend_schema(
    request=UserSerializer,
    responses={
        200: UserSerializer,
        400: ErrorResponseSerializer,
    },
    description="Update the current user's display name.",
    tags=['auth'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_profile(request):
    serializer = UserSerializer(request.user, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    serializer.save()
    return Response(serializer.data)


@extend_schema(
    request=DeleteAllDataSerializer,
    responses={
        200: DeletedCountsSerializer,
        400: ErrorResponseSerializer,
        503: ErrorResponseSerializer,
    },
    description="Delete every bottle, drinking log and wishlist item of the current user.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def delete_all_data(request):
    """Wipe the current user's collection."""
    serializer = DeleteAllDataSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        counts = delete_all_collection_data(user=request.user)
    except DataDeletionError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    return Response(counts)
