"""Tests for registration, session and profile routes."""

import unittest

from fastapi.testclient import TestClient

from api.dependencies import get_hash_provider, get_token_provider, get_user_repo
from api.main import app
from adapter.fake.hash_provider import FakeHashProvider
from adapter.fake.user_repository import FakeUserRepository
from adapter.jwt.token_provider import JwtTokenProvider
from utils.config import AuthConfig


class RouteTestCase(unittest.TestCase):
    """Wires the app to in-memory adapters and a test signing key."""

    def setUp(self):
        self.client = TestClient(app)
        self.user_repo = FakeUserRepository()
        self.tokens = JwtTokenProvider(AuthConfig(secret='test-secret'))
        app.dependency_overrides[get_user_repo] = lambda: self.user_repo
        app.dependency_overrides[get_hash_provider] = lambda: FakeHashProvider()
        app.dependency_overrides[get_token_provider] = lambda: self.tokens

    def tearDown(self):
        app.dependency_overrides.clear()

    def auth_headers(self, user) -> dict:
        return {"Authorization": f"Bearer {self.tokens.issue(user.id)}"}


class TestCreateUser(RouteTestCase):

    def test_create_user(self):
        response = self.client.post("/users", json={
            "name": "John Doe", "email": "john@example.com", "password": "123456",
        })

        assert response.status_code == 201
        data = response.json()
        assert data['email'] == 'john@example.com'
        assert 'password_hash' not in data
        assert self.user_repo.find_by_email('john@example.com') is not None

    def test_duplicate_email_returns_400(self):
        self.user_repo.create(name='John', email='john@example.com', password_hash='123456')

        response = self.client.post("/users", json={
            "name": "John Doe", "email": "john@example.com", "password": "123456",
        })

        assert response.status_code == 400
        assert response.json() == {"status": "error", "message": "Email address already used."}

    def test_invalid_email_returns_422(self):
        response = self.client.post("/users", json={
            "name": "John Doe", "email": "not-an-email", "password": "123456",
        })

        assert response.status_code == 422


class TestCreateSession(RouteTestCase):

    def setUp(self):
        super().setUp()
        self.user = self.user_repo.create(name='John Doe', email='john@example.com', password_hash='123456')

    def test_login_returns_token_and_user(self):
        response = self.client.post("/sessions", json={"email": "john@example.com", "password": "123456"})

        assert response.status_code == 200
        data = response.json()
        assert self.tokens.verify(data['token']) == self.user.id
        assert data['user']['id'] == self.user.id
        assert 'password_hash' not in data['user']

    def test_wrong_password_and_unknown_email_look_the_same(self):
        wrong = self.client.post("/sessions", json={"email": "john@example.com", "password": "nope"})
        unknown = self.client.post("/sessions", json={"email": "ghost@example.com", "password": "123456"})

        assert wrong.status_code == 401
        assert unknown.status_code == 401
        assert wrong.json() == unknown.json()


class TestProfile(RouteTestCase):

    def setUp(self):
        super().setUp()
        self.user = self.user_repo.create(name='John Doe', email='john@example.com', password_hash='123456')

    def test_requires_token(self):
        response = self.client.get("/profile")

        assert response.status_code == 401
        assert response.json() == {"status": "error", "message": "JWT token is missing"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_rejects_invalid_token(self):
        response = self.client.get("/profile", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401
        assert response.json() == {"status": "error", "message": "Invalid JWT token"}

    def test_show_profile(self):
        response = self.client.get("/profile", headers=self.auth_headers(self.user))

        assert response.status_code == 200
        assert response.json()['name'] == 'John Doe'

    def test_update_profile(self):
        response = self.client.put("/profile", headers=self.auth_headers(self.user), json={
            "name": "Mary", "email": "mary@example.com", "password": "123123", "old_password": "123456",
        })

        assert response.status_code == 200
        assert response.json()['email'] == 'mary@example.com'
        assert self.user_repo.find_by_id(self.user.id).password_hash == '123123'

    def test_update_password_without_old_password_returns_400(self):
        response = self.client.put("/profile", headers=self.auth_headers(self.user), json={
            "name": "Mary", "email": "mary@example.com", "password": "123123",
        })

        assert response.status_code == 400
        assert response.json()['status'] == 'error'
        assert self.user_repo.find_by_id(self.user.id).password_hash == '123456'


if __name__ == '__main__':
    unittest.main()
