"""
The XMPP session boundary.

xirc does not speak XMPP on the wire itself. Stream negotiation,
TLS, SASL and stanza parsing belong to a transport library; this
module only describes what the driver expects of it.
"""

import logging
import typing

# Sessions are built to log emergencies only.
SESSION_LOG_LEVEL = logging.CRITICAL


class XMPPSession(typing.Protocol):
    """
    One authenticated connection to an XMPP server.

    All network-bound operations are awaitable, and are expected to
    raise on failure.
    """

    async def connect(self):
        """Opens the stream."""
        ...

    async def authenticate(self):
        """Authenticates with the credentials given at construction."""
        ...

    async def bind(self):
        """Binds the resource given at construction."""
        ...

    async def establish_session(self):
        """Establishes the IM session."""
        ...

    async def presence(self):
        """Announces availability."""
        ...

    async def message(self, target: str, text: str):
        """Sends a message to an address or MUC."""
        ...

    async def join(self, room: str, nick: str, history: bool):
        """Joins a MUC under the given nickname, optionally asking for its history."""
        ...

    async def ping(self):
        """Sends a <ping/> to the server."""
        ...

    async def disconnect(self):
        """Closes the stream."""
        ...

    async def wait(self) -> typing.Optional[str]:
        """
        Waits for the next stanza, returning its tag name
        ('message', 'presence', 'iq', ...), or None if nothing arrived.
        """
        ...

    def get_message(self) -> typing.Mapping[str, typing.Any]:
        """
        Returns the message stanza the last wait() announced, as
        {'from': str, 'type': str, 'bodies': [{'content': str}, ...]}.
        """
        ...

    def get_iq(self) -> typing.Mapping[str, typing.Any]:
        """
        Returns the iq stanza the last wait() announced, as
        {'from': str, 'type': str}.
        """
        ...


# (username, password, host, secure, log_level, port, resource) -> session
SessionFactory = typing.Callable[
    [str, str, str, bool, int, int, str], typing.Optional[XMPPSession]
]
