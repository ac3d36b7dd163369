"""
Inbound stanza shapes.

The transport tells us which kind of stanza is waiting by its tag,
then hands it over as a plain mapping. These classes are the only
place that mapping gets picked apart; each one keeps just the
fields the event translator reads.
"""

import typing
from collections.abc import Mapping, Sequence

import attr

from xirc.errors import MalformedStanzaError

MESSAGE = "message"
PRESENCE = "presence"
IQ = "iq"


def _sender(raw: typing.Any) -> str:
    if not isinstance(raw, Mapping):
        raise MalformedStanzaError("Stanza is not a mapping: {!r}".format(raw))

    sender = raw.get("from")

    if not isinstance(sender, str):
        raise MalformedStanzaError("Stanza has no usable sender: {!r}".format(sender))

    return sender


@attr.s(auto_attribs=True, frozen=True)
class Body:
    """A single message body."""

    content: str
    lang: typing.Optional[str] = None


@attr.s(auto_attribs=True, frozen=True)
class MessageStanza:
    """A <message/> stanza."""

    sender: str
    kind: str
    bodies: typing.Tuple[Body, ...] = ()

    @classmethod
    def from_raw(cls, raw: typing.Any) -> "MessageStanza":
        """
        Builds a MessageStanza from the transport's representation.

            >>> stanza = MessageStanza.from_raw({
            ...     'from': 'alice@example.com', 'type': 'chat',
            ...     'bodies': [{'content': 'hi'}],
            ... })
            >>> stanza.bodies[0].content
            'hi'

        Raises:
            MalformedStanzaError: The stanza does not look like a message.
        """

        sender = _sender(raw)
        raw_bodies = raw.get("bodies") or ()

        if isinstance(raw_bodies, (str, bytes)) or not isinstance(raw_bodies, Sequence):
            raise MalformedStanzaError("Bodies are not a list: {!r}".format(raw_bodies))

        bodies = []

        for raw_body in raw_bodies:
            if not isinstance(raw_body, Mapping) or not isinstance(raw_body.get("content"), str):
                raise MalformedStanzaError("Unusable message body: {!r}".format(raw_body))

            bodies.append(Body(raw_body["content"], raw_body.get("lang")))

        return cls(sender, str(raw.get("type") or "normal"), tuple(bodies))


@attr.s(auto_attribs=True, frozen=True)
class PresenceStanza:
    """A <presence/> stanza. Nothing in it is ever read."""


@attr.s(auto_attribs=True, frozen=True)
class IqStanza:
    """An <iq/> stanza."""

    sender: str
    kind: str

    @classmethod
    def from_raw(cls, raw: typing.Any) -> "IqStanza":
        """
        Builds an IqStanza from the transport's representation.

        Raises:
            MalformedStanzaError: The stanza does not look like an iq.
        """

        return cls(_sender(raw), str(raw.get("type") or "get"))


@attr.s(auto_attribs=True, frozen=True)
class OtherStanza:
    """Any stanza tag the driver does not know about."""

    tag: str


Stanza = typing.Union[MessageStanza, PresenceStanza, IqStanza, OtherStanza]
