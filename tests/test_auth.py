import base64
import json

from config.auth import _email_from_principal, user_from_env, user_from_headers


def encode_principal(claims):
    return base64.b64encode(json.dumps({"claims": claims}).encode("utf-8")).decode("ascii")


def test_user_from_headers_reads_email_claim():
    principal = encode_principal([
        {"typ": "name", "val": "Alex Rivera"},
        {"typ": "preferred_username", "val": "alex@example.com"},
    ])
    user = user_from_headers({
        "x-ms-client-principal-id": "abc-123",
        "x-ms-client-principal": principal,
    })

    assert user.user_id == "abc-123"
    assert user.email == "alex@example.com"
    assert user.name == "alex@example.com"


def test_user_from_headers_prefers_principal_name():
    user = user_from_headers({
        "x-ms-client-principal-id": "abc-123",
        "x-ms-client-principal-name": "alex@contoso.com",
    })
    assert user.name == "alex@contoso.com"
    assert user.email == "alex@contoso.com"


def test_user_from_headers_without_id():
    assert user_from_headers({"x-ms-client-principal-name": "alex@contoso.com"}) is None


def test_bad_principal_is_ignored():
    assert _email_from_principal("not base64 json!!") is None
    assert _email_from_principal(encode_principal([{"typ": "role", "val": "admin"}])) is None


def test_user_from_env():
    user = user_from_env({
        "DEV_USER_ID": "dev-1",
        "DEV_USER_NAME": "Dev Person",
        "DEV_USER_USERNAME": "devperson",
    })
    assert user.user_id == "dev-1"
    assert user.name == "Dev Person"
    assert user.to_user().username == "devperson"

    assert user_from_env({}) is None
