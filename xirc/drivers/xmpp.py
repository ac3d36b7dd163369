"""
The XMPP driver.

Lets an IRC-minded bot connect to an XMPP server instead. Outgoing
IRC commands are mapped onto XMPP operations where an equivalent
exists and silently absorbed where none does; incoming stanzas are
turned back into IRC-like events.
"""

import logging
import typing

import trio

from xirc.connection import ConnectionParams
from xirc.driver import Driver
from xirc.errors import (
    AlreadyConnectedError,
    ConnectionAttemptFailed,
    MalformedStanzaError,
    NotConnectedError,
)
from xirc.events import ERR_NOMOTD, PONG, PRIVMSG, Event, RequestEvent, ResponseEvent
from xirc.hostmask import GROUPCHAT, bare_address, hostmask_from_address
from xirc.session import SESSION_LOG_LEVEL, SessionFactory, XMPPSession
from xirc.stanzas import (
    IQ,
    MESSAGE,
    PRESENCE,
    IqStanza,
    MessageStanza,
    OtherStanza,
    PresenceStanza,
    Stanza,
)


class XMPPDriver(Driver):
    """An XMPP driver. Used in order to run IRC-style bots on XMPP."""

    def __init__(
        self,
        params: ConnectionParams,
        session_factory: SessionFactory,
        logger: typing.Optional[logging.Logger] = None,
    ):
        """Sets up an XMPP driver. Nothing is connected until connect is awaited.

            >>> driver = XMPPDriver(ConnectionParams('example.com', 'bot', 'Bot'), None)
            >>> driver.connected()
            False

        Arguments:
            params {ConnectionParams} -- Where to connect, and as whom.
            session_factory {SessionFactory} -- Builds the underlying XMPP session.

        Keyword Arguments:
            logger {logging.Logger} -- The logger to use. (default: the module logger)
        """

        super().__init__()

        self.params = params
        self.session_factory = session_factory
        self.logger = logger or logging.getLogger(__name__)
        self.session = None  # type: typing.Optional[XMPPSession]

        # XMPP servers have no MOTD; one 'no MOTD' response is faked
        # before anything else, for plugins waiting on the MOTD.
        self.motd_faked = False

    def connected(self) -> bool:
        return self.session is not None

    def _require_session(self) -> XMPPSession:
        if self.session is None:
            raise NotConnectedError("Not connected to {}".format(self.params.host))

        return self.session

    async def connect(self):
        """
        Builds the session, then goes through the XMPP handshake:
        connect, authenticate, bind, establish the session, and
        announce presence. Any failure along the way is raised as is.

        Raises:
            ConnectionAttemptFailed: The session could not be built.
            AlreadyConnectedError: There already is a session.
        """

        if self.session is not None:
            raise AlreadyConnectedError("Already connected to {}".format(self.params.host))

        params = self.params

        self.logger.info(
            "Connecting to %s:%d as %s (%s)",
            params.host,
            params.port,
            params.username,
            "TLS" if params.secure else "plain",
        )

        try:
            session = self.session_factory(
                params.username,
                params.password,
                params.host,
                params.secure,
                SESSION_LOG_LEVEL,
                params.port,
                params.resource,
            )

        # The factory belongs to the transport library, which may fail
        # in any way it sees fit.
        # pylint: disable=broad-except
        except Exception as err:
            raise ConnectionAttemptFailed("Unable to connect.") from err

        if session is None:
            raise ConnectionAttemptFailed("Unable to connect.")

        try:
            await session.connect()
            await session.authenticate()
            await session.bind()
            await session.establish_session()
            await session.presence()

        except BaseException:
            await self._close_quietly(session)
            raise

        self.session = session
        self.logger.info("Session established with %s", params.host)

    async def _close_quietly(self, session: XMPPSession):
        # The handshake error is what gets raised; this one is only logged.
        with trio.CancelScope(shield=True):
            try:
                await session.disconnect()

            # pylint: disable=broad-except
            except Exception:
                self.logger.debug("Could not close half-open session", exc_info=True)

    # === Supported commands ===

    async def action(self, target: str, text: str):
        # There is no XMPP action, but most clients render a leading
        # '/me' the same way.
        await self.privmsg(target, "/me " + text)

    async def notice(self, target: str, text: str):
        await self.privmsg(target, text)

    async def privmsg(self, target: str, text: str):
        await self._require_session().message(target, text)

    async def join(self, channels: str, keys: typing.Optional[str] = None):
        # MUCs have no keys, so those are ignored.
        session = self._require_session()

        for muc in channels.split(","):
            muc = muc.strip()

            if muc:
                await session.join(muc, self.params.nick, True)

    async def ping(self, nick: typing.Optional[str] = None, hash: typing.Optional[str] = None):
        # Nick and hash are IRC handshake tokens; XMPP pings take neither.
        await self._require_session().ping()

    async def quit(self, reason: typing.Optional[str] = None):
        # The reason only makes sense on IRC.
        session = self._require_session()
        self.session = None

        await session.disconnect()
        self.logger.info("Disconnected from %s", self.params.host)

    # === Unsupported commands ===

    def _unsupported(self, command: str):
        self.logger.debug("Ignoring %s, which has no XMPP equivalent", command)

    async def part(self, channels: str):
        self._unsupported("part")

    async def pong(self, daemon: typing.Optional[str] = None):
        self._unsupported("pong")

    async def finger(self, nick: str, finger: typing.Optional[str] = None):
        self._unsupported("finger")

    async def invite(self, nick: str, channel: str):
        self._unsupported("invite")

    async def kick(self, nick: str, channel: str, reason: typing.Optional[str] = None):
        self._unsupported("kick")

    async def list_mucs(self, channels: typing.Optional[str] = None):
        self._unsupported("list")

    async def mode(
        self, target: str, mode: typing.Optional[str] = None, param: typing.Optional[str] = None
    ):
        self._unsupported("mode")

    async def names(self, channels: str):
        self._unsupported("names")

    async def nick(self, nick: str):
        self._unsupported("nick")

    async def raw(self, command: str):
        self._unsupported("raw")

    async def time(self, nick: str, time: typing.Optional[str] = None):
        self._unsupported("time")

    async def topic(self, channel: str, topic: typing.Optional[str] = None):
        self._unsupported("topic")

    async def version(self, nick: str, version: typing.Optional[str] = None):
        self._unsupported("version")

    async def whois(self, nick: str):
        self._unsupported("whois")

    # === Events ===

    def _read_stanza(self, session: XMPPSession, tag: str) -> Stanza:
        if tag == MESSAGE:
            return MessageStanza.from_raw(session.get_message())

        if tag == PRESENCE:
            return PresenceStanza()

        if tag == IQ:
            return IqStanza.from_raw(session.get_iq())

        return OtherStanza(tag)

    def _is_echo(self, event: RequestEvent, kind: str) -> bool:
        """
        XMPP servers send a client's own stanzas back to it; eg. a message
        to a MUC reaches every occupant, sender included.
        """

        hostmask = event.hostmask

        return (
            kind == GROUPCHAT and hostmask.nick == self.params.nick
        ) or hostmask.username == self.params.node

    def translate(self, stanza: Stanza) -> typing.Optional[RequestEvent]:
        """Turns a stanza into a request event, if it amounts to one.

        Arguments:
            stanza {Stanza} -- The stanza.

        Returns:
            Optional[RequestEvent] -- The event, or None.
        """

        if isinstance(stanza, MessageStanza):
            if not stanza.bodies:
                return None

            # Prepend the source, so plugins know who to reply to. In a
            # MUC, that is the room, not the occupant.
            if stanza.kind == GROUPCHAT:
                source = bare_address(stanza.sender)

            else:
                source = stanza.sender

            # Only the first body is looked at, even if there are more.
            event = RequestEvent(
                PRIVMSG,
                (source, stanza.bodies[0].content),
                hostmask_from_address(stanza.sender, stanza.kind),
            )

        elif isinstance(stanza, IqStanza):
            event = RequestEvent(
                PONG, (stanza.sender,), hostmask_from_address(stanza.sender, stanza.kind)
            )

        else:
            return None

        if self._is_echo(event, stanza.kind):
            self.logger.debug("Dropping own %s from %s", event.command, stanza.sender)
            return None

        return event

    async def next_event(self) -> typing.Optional[Event]:
        """Listens for an event on the current connection.

        The very first call never touches the network; it returns
        a faked 'no MOTD' response instead.

        Returns:
            Optional[Event] -- The event, or None if nothing (usable) arrived.
        """

        if not self.motd_faked:
            self.motd_faked = True
            return ResponseEvent(ERR_NOMOTD, "")

        session = self.session

        if session is None:
            return None

        tag = await session.wait()

        if not tag:
            return None

        try:
            stanza = self._read_stanza(session, tag)

        except MalformedStanzaError as err:
            self.logger.debug("Ignoring malformed %s stanza: %s", tag, err)
            return None

        return self.translate(stanza)
