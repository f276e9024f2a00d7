from datetime import timedelta

import pytest

from liftlog.core.security import IdentityError, verify_identity_token
from liftlog.services.identity import IdentityResolver
from tests.conftest import add_user, make_token


async def test_resolves_provisioned_user(db):
    user = await add_user(db, "user_abc", user_id=42)
    resolver = IdentityResolver(db)

    assert (await resolver.get_user("user_abc")).id == user.id
    assert await resolver.resolve_user_id("user_abc") == 42


async def test_unknown_subject_is_absent_not_an_error(db):
    await add_user(db, "user_abc")
    resolver = IdentityResolver(db)

    assert await resolver.get_user("user_never_seen") is None
    assert await resolver.resolve_user_id("user_never_seen") is None


async def test_blank_subject_never_matches_a_user(db):
    await add_user(db, "")
    resolver = IdentityResolver(db)

    assert await resolver.get_user("") is None
    assert await resolver.resolve_user_id("") is None


def test_verify_identity_token_returns_subject(identity_settings):
    assert verify_identity_token(make_token("user_abc")) == "user_abc"


def test_expired_token_is_rejected(identity_settings):
    with pytest.raises(IdentityError):
        verify_identity_token(make_token("user_abc", expires_in=timedelta(minutes=-1)))


def test_token_without_subject_is_rejected(identity_settings):
    with pytest.raises(IdentityError):
        verify_identity_token(make_token(None))


def test_tampered_token_is_rejected(identity_settings):
    token = make_token("user_abc")
    with pytest.raises(IdentityError):
        verify_identity_token(token[:-2] + ("AA" if not token.endswith("AA") else "BB"))


def test_issuer_is_checked_when_configured(identity_settings, monkeypatch):
    monkeypatch.setattr(identity_settings, "identity_issuer", "https://id.example.com")
    assert verify_identity_token(make_token("user_abc", iss="https://id.example.com")) == "user_abc"
    with pytest.raises(IdentityError):
        verify_identity_token(make_token("user_abc", iss="https://evil.example.com"))


def test_unconfigured_secret_rejects_everything(identity_settings, monkeypatch):
    monkeypatch.setattr(identity_settings, "identity_secret", "")
    with pytest.raises(IdentityError):
        verify_identity_token(make_token("user_abc"))
