import pytest

from xirc.connection import ConnectionParams
from xirc.errors import ConfigurationError


def test_from_mapping():
    params = ConnectionParams.from_mapping(
        {
            "host": "example.com",
            "port": "5223",
            "username": "phergie",
            "password": "secret",
            "nick": "Phergie",
            "realname": "Phergie the bot",
            "transport": "tcp",
        }
    )

    assert params.port == 5223
    assert params.realname == "Phergie the bot"
    assert params.resource == "Bot"
    assert not params.secure


def test_from_mapping_defaults():
    params = ConnectionParams.from_mapping(
        {"host": "example.com", "username": "phergie", "nick": "Phergie"}
    )

    assert params.port == 5222
    assert params.password == ""
    assert params.secure


def test_from_mapping_missing_keys():
    with pytest.raises(ConfigurationError) as info:
        ConnectionParams.from_mapping({"host": "example.com"})

    assert "username" in str(info.value)
    assert "nick" in str(info.value)


def test_from_mapping_bad_port():
    with pytest.raises(ConfigurationError):
        ConnectionParams.from_mapping(
            {"host": "example.com", "username": "u", "nick": "n", "port": "xmpp"}
        )


def test_params_are_frozen():
    params = ConnectionParams("example.com", "phergie", "Phergie")

    with pytest.raises(AttributeError):
        params.nick = "Other"


def test_node():
    assert ConnectionParams("example.com", "phergie", "Phergie").node == "phergie"
    assert ConnectionParams("example.com", "phergie@example.com", "Phergie").node == "phergie"
