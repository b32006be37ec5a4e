import pytest
from django.core.cache import cache

from tests.factories import CustomerFactory, DEFAULT_PASSWORD, UserFactory


@pytest.fixture(autouse=True)
def clear_view_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def password():
    return DEFAULT_PASSWORD


@pytest.fixture
def user(db):
    return UserFactory(username="admin", email="admin@example.com")


@pytest.fixture
def authenticated_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def customer(db):
    return CustomerFactory(name="Evil Rabbit", email="evil@rabbit.com", image_url="/customers/evil-rabbit.png")
