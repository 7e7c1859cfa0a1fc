from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase
from django.contrib.auth import get_user_model


User = get_user_model()


class UserTokenViewTests(APITestCase):

    def setUp(self):
        self.user = User.objects.create_user(
            username='partner', email='partner@example.com', password='testpassword',
            role=User.Role.PARTNER)
        self.url = reverse('token_obtain_pair_email')

    def test_login_returns_tokens_and_role(self):
        response = self.client.post(
            self.url, {'email': 'partner@example.com', 'password': 'testpassword'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['role'], 'partner')
        self.assertIn('access', response.data['token'])
        self.assertIn('refresh', response.data['token'])

    def test_wrong_password(self):
        response = self.client.post(
            self.url, {'email': 'partner@example.com', 'password': 'nope'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_missing_credentials(self):
        response = self.client.post(self.url, {'email': 'partner@example.com'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class UserManagerTests(APITestCase):

    def test_new_users_default_to_driver(self):
        user = User.objects.create_user(username='driver', email='Driver@Example.com', password='pw')
        self.assertEqual(user.role, User.Role.DRIVER)
        self.assertFalse(user.is_partner)
        self.assertEqual(user.email, 'Driver@example.com')

    def test_superuser_is_platform_admin(self):
        admin = User.objects.create_superuser(username='admin', email='admin@example.com', password='pw')
        self.assertEqual(admin.role, User.Role.ADMIN)
        self.assertTrue(admin.is_staff)
        self.assertTrue(admin.is_platform_admin)

    def test_email_is_required(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(username='nobody', email='', password='pw')
