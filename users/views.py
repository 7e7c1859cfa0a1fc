from rest_framework.response import Response
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from .serializers import UserTokenObtainPairSerializer
import logging


logger = logging.getLogger(__name__)


class UserTokenView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        email = request.data.get('email')
        password = request.data.get('password')

        if not email or not password:
            return Response(
                {"error": "Email and password are required"},
                status=status.HTTP_400_BAD_REQUEST
            )

        serializer = UserTokenObtainPairSerializer(data={
            "email": email,
            "password": password
        })
        if serializer.is_valid():
            logger.info(f"Login succeeded for {email}")
            return Response(serializer.validated_data)

        logger.warning(f"Login failed for {email}")
        return Response(serializer.errors, status=status.HTTP_401_UNAUTHORIZED)
