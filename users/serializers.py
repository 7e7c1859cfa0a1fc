from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from django.contrib.auth import authenticate


class UserTokenObtainPairSerializer(TokenObtainPairSerializer):
    username_field = 'email'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields[self.username_field] = serializers.CharField()
        self.fields.pop('username', None)

    def validate(self, attrs):
        credentials = {
            'email': attrs.get('email'),
            'password': attrs.get('password')
        }
        user = authenticate(**credentials)

        if user is None:
            raise serializers.ValidationError('Invalid credentials', code='authentication')

        refresh = self.get_token(user)
        return {
            'id': str(user.id),
            'username': user.username,
            'role': user.role,
            'token': {
                'access': str(refresh.access_token),
                'refresh': str(refresh),
            },
        }
