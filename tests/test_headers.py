import pytest

from supabase_rest.headers import HeaderType, client_info, default_headers


@pytest.mark.parametrize(
    ("wire_name", "member"),
    [
        ("apikey", HeaderType.PROJECT_ACCESS),
        ("Authorization", HeaderType.AUTHORIZATION),
        ("Content-Type", HeaderType.CONTENT_TYPE),
        ("prefer", HeaderType.PREFER),
        ("x_client_info", HeaderType.CLIENT_INFO),
        ("Range", HeaderType.RANGE),
        ("Accept-Profile", HeaderType.ACCEPT_PROFILE),
    ],
)
def test_header_names_match_wire_names(wire_name, member):
    assert HeaderType(wire_name) is member
    assert member.value == wire_name


def test_unknown_header_name_rejected():
    with pytest.raises(ValueError):
        HeaderType("x-not-a-header")


def test_default_headers_keys():
    headers = default_headers("placeholder", "token")
    assert set(headers) == {"apikey", "Authorization", "Content-Type", "x_client_info"}


def test_default_headers_values():
    headers = default_headers("placeholder", "token")
    assert headers["apikey"] == "placeholder"
    assert headers["Authorization"] == "Bearer token"
    assert headers["Content-Type"] == "application/json"
    assert headers["x_client_info"] == client_info()


def test_client_info_has_name_and_version():
    name, version = client_info().split("/")
    assert name
    assert version


def test_default_headers_are_independent_copies():
    first = default_headers("placeholder", "token")
    first["apikey"] = "token"
    second = default_headers("placeholder", "token")
    assert second["apikey"] == "placeholder"