import pytest
from django.contrib.auth import SESSION_KEY
from django.test import RequestFactory

from records.services import AuthError, AuthService, Message, Navigate
from tests.factories import UserFactory


class StubProvider:
    def __init__(self, error):
        self.error = error

    def verify(self, request, credentials):
        raise self.error


class TestAuthenticationClassification:
    def test_credentials_mismatch(self):
        result = AuthService.authenticate(None, {}, provider=StubProvider(AuthError(AuthError.CREDENTIALS_SIGNIN)))
        assert result == Message(message="Invalid credentials.")

    @pytest.mark.parametrize("kind", [AuthError.ACCESS_DENIED, AuthError.CONFIGURATION, "OAuthCallbackError"])
    def test_other_provider_failures(self, kind):
        result = AuthService.authenticate(None, {}, provider=StubProvider(AuthError(kind)))
        assert result == Message(message="Something went wrong.")

    def test_unclassified_fault_propagates(self):
        fault = RuntimeError("identity provider unreachable")
        with pytest.raises(RuntimeError) as exc_info:
            AuthService.authenticate(None, {}, provider=StubProvider(fault))
        assert exc_info.value is fault


class TestRedirectTarget:
    def test_local_path_is_honoured(self):
        request = RequestFactory().post("/login/")
        assert AuthService.redirect_target(request, "/dashboard/invoices/") == "/dashboard/invoices/"

    @pytest.mark.parametrize("requested", [None, "", "https://evil.example.com/", "//evil.example.com/"])
    def test_unsafe_or_missing_target_falls_back(self, requested, settings):
        request = RequestFactory().post("/login/")
        assert AuthService.redirect_target(request, requested) == settings.LOGIN_REDIRECT_URL


@pytest.mark.django_db
class TestLoginView:
    def test_sign_in_by_email(self, client, password):
        user = UserFactory(email="user@nextmail.com")

        response = client.post("/login/", {"email": "user@nextmail.com", "password": password})

        assert response.status_code == 302
        assert response["Location"] == "/dashboard/"
        assert client.session[SESSION_KEY] == str(user.pk)

    def test_sign_in_honours_redirect(self, client, password):
        UserFactory(email="user@nextmail.com")

        response = client.post("/login/", {
            "email": "user@nextmail.com",
            "password": password,
            "redirectTo": "/dashboard/customers/",
        })

        assert response["Location"] == "/dashboard/customers/"

    def test_wrong_password_renders_inline_error(self, client):
        UserFactory(email="user@nextmail.com")

        response = client.post("/login/", {"email": "user@nextmail.com", "password": "nope"})

        assert response.status_code == 200
        assert response.context["state"]["message"] == "Invalid credentials."
        assert SESSION_KEY not in client.session

    def test_missing_fields(self, client):
        response = client.post("/login/", {"email": ""})
        assert response.context["state"]["message"] == "Invalid credentials."

    def test_inactive_account(self, client, password):
        UserFactory(email="gone@nextmail.com", is_active=False)

        response = client.post("/login/", {"email": "gone@nextmail.com", "password": password})

        assert response.context["state"]["message"] == "Something went wrong."

    def test_logout(self, authenticated_client):
        response = authenticated_client.post("/logout/")

        assert response.status_code == 302
        assert response["Location"] == "/login/"
        assert SESSION_KEY not in authenticated_client.session
