import pytest

from xirc.hostmask import Hostmask, bare_address, hostmask_from_address


@pytest.mark.parametrize(
    "address, kind, expected",
    [
        ("room@conf.example/alice", "groupchat", Hostmask("alice", "room", "conf.example")),
        ("room@conf.example/a/b", "groupchat", Hostmask("a/b", "room", "conf.example")),
        ("room@conf.example", "groupchat", Hostmask("", "room", "conf.example")),
        ("alice@example.com", "chat", Hostmask("alice", "alice", "example.com")),
        (
            "alice@example.com/laptop",
            "normal",
            Hostmask("alice", "alice", "example.com", "laptop"),
        ),
        ("example.com", "result", Hostmask("", "", "example.com")),
        ("", "chat", Hostmask("", "", "")),
    ],
)
def test_hostmask_from_address(address, kind, expected):
    assert hostmask_from_address(address, kind) == expected


def test_str():
    assert str(Hostmask("alice", "room", "conf.example")) == "alice!room@conf.example"


def test_bare_address():
    assert bare_address("room@conf.example/alice/x") == "room@conf.example"
    assert bare_address("example.com") == "example.com"
