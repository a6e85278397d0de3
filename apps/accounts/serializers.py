from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from .models import User


def _password_field(**kwargs):
    return serializers.CharField(write_only=True, style={'input_type': 'password'}, **kwargs)


class UserSerializer(serializers.ModelSerializer):
    """Profile of the collection owner. Only the display name is editable."""

    class Meta:
        model = User
        fields = ['id', 'email', 'display_name', 'created_at', 'last_login']
        read_only_fields = ['id', 'email', 'created_at', 'last_login']


class UserRegistrationSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = _password_field(validators=[validate_password])
    password_confirm = _password_field()
    display_name = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError('An account with this email already exists')
        return value

    def validate(self, attrs):
        if attrs['password'] != attrs.pop('password_confirm'):
            raise serializers.ValidationError({'password_confirm': 'Passwords do not match'})
        return attrs


class UserLoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = _password_field()


class DeleteAllDataSerializer(serializers.Serializer):
    """Explicit confirmation required before the collection is wiped."""

    confirm = serializers.BooleanField(help_text="Must be true to confirm deletion")

    def validate_confirm(self, value):
        if not value:
            raise serializers.ValidationError('Confirmation required')
        return value
