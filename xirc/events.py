"""
Normalized events, as handed to the host framework.

A driver produces at most one event per poll: either a server
response (identified by an IRC numeric), or a request (an IRC
command together with its arguments and the sender's hostmask).
"""

import typing

import attr

from xirc.hostmask import Hostmask

# IRC numerics
ERR_NOMOTD = 422

PRIVMSG = "privmsg"
PONG = "pong"


@attr.s(auto_attribs=True, frozen=True)
class ResponseEvent:
    """
    A server response. XMPP servers don't send these, so the
    driver only ever synthesizes them.

        >>> ResponseEvent(ERR_NOMOTD).kind
        '_NUMERIC'
    """

    code: int
    description: str = ""

    @property
    def kind(self) -> str:
        return "_NUMERIC"


@attr.s(auto_attribs=True, frozen=True)
class RequestEvent:
    """
    A command sent to the bot by someone else.

        >>> from xirc.hostmask import hostmask_from_address
        >>> event = RequestEvent(
        ...     'privmsg', ('alice@example.com', 'hello'),
        ...     hostmask_from_address('alice@example.com', 'chat'),
        ... )
        >>> event.kind, event.source, event.text
        ('PRIVMSG', 'alice@example.com', 'hello')
    """

    command: str
    arguments: typing.Tuple[str, ...] = attr.ib(converter=tuple)
    hostmask: Hostmask

    @property
    def kind(self) -> str:
        return self.command.upper()

    @property
    def source(self) -> typing.Optional[str]:
        """Where replies should go; always the first argument."""

        return self.arguments[0] if self.arguments else None

    @property
    def text(self) -> typing.Optional[str]:
        """The trailing text argument, if there is one past the source."""

        return self.arguments[-1] if len(self.arguments) > 1 else None


Event = typing.Union[ResponseEvent, RequestEvent]
