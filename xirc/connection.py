"""
Connection parameters.

The host framework fills a ConnectionParams record before
connecting; the driver only ever reads it.
"""

import typing

import attr

from xirc.errors import ConfigurationError

DEFAULT_PORT = 5222
DEFAULT_RESOURCE = "Bot"
PLAIN_TRANSPORT = "tcp"


@attr.s(auto_attribs=True, frozen=True)
class ConnectionParams:
    """
    Everything needed to open and identify an XMPP session.

        >>> params = ConnectionParams('example.com', username='bot', nick='Bot')
        >>> params.secure
        True
        >>> params.port
        5222
    """

    host: str
    username: str
    nick: str
    password: str = ""
    port: int = DEFAULT_PORT
    realname: str = ""
    transport: str = "ssl"
    resource: str = DEFAULT_RESOURCE

    @property
    def secure(self) -> bool:
        """Whether to use TLS. Only an explicit 'tcp' transport turns it off.

            >>> ConnectionParams('h', 'u', 'n', transport='TCP').secure
            False
        """

        return (self.transport or "").lower() != PLAIN_TRANSPORT

    @property
    def node(self) -> str:
        """The local part of the username, without any '@domain' suffix.

            >>> ConnectionParams('h', 'bot@example.com', 'n').node
            'bot'
        """

        return self.username.split("@")[0]

    @classmethod
    def from_mapping(cls, settings: typing.Mapping[str, typing.Any]) -> "ConnectionParams":
        """Builds connection parameters out of a settings mapping,
        as loaded by the host framework.

        Arguments:
            settings {Mapping[str, Any]} -- The connection settings.

        Raises:
            ConfigurationError: A required key is missing, or the port is not a number.

        Returns:
            ConnectionParams -- The parameters.
        """

        missing = [key for key in ("host", "username", "nick") if not settings.get(key)]

        if missing:
            raise ConfigurationError(
                "Missing connection settings: {}".format(", ".join(missing))
            )

        try:
            port = int(settings.get("port") or DEFAULT_PORT)

        except (TypeError, ValueError) as err:
            raise ConfigurationError(
                "Invalid port: {!r}".format(settings.get("port"))
            ) from err

        return cls(
            host=str(settings["host"]),
            username=str(settings["username"]),
            nick=str(settings["nick"]),
            password=str(settings.get("password") or ""),
            port=port,
            realname=str(settings.get("realname") or ""),
            transport=str(settings.get("transport") or "ssl"),
            resource=str(settings.get("resource") or DEFAULT_RESOURCE),
        )
