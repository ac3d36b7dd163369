"""
The Driver class.

The base class of all xirc drivers is here defined. A driver gives
an IRC-minded bot framework a uniform surface: connect, IRC-shaped
commands, and a stream of normalized events.
"""

import typing

import trio

from xirc.errors import UnknownCommandError
from xirc.events import Event

Listener = typing.Callable[[str, Event], typing.Awaitable[None]]

# IRC command name -> driver method name
COMMANDS = {
    "action": "action",
    "finger": "finger",
    "invite": "invite",
    "join": "join",
    "kick": "kick",
    "list": "list_mucs",
    "mode": "mode",
    "names": "names",
    "nick": "nick",
    "notice": "notice",
    "part": "part",
    "ping": "ping",
    "pong": "pong",
    "privmsg": "privmsg",
    "quit": "quit",
    "raw": "raw",
    "time": "time",
    "topic": "topic",
    "version": "version",
    "whois": "whois",
}


class Driver:
    """
    Dummy driver implementation superclass.

    Actual xirc drivers are supposed to subclass the Driver class, which
    nonetheless provides the utilities expected by the host framework:
    listeners, command dispatch by name, and a poll loop.
    """

    def __init__(self):
        self._listeners = {}  # type: typing.Dict[str, typing.Set[Listener]]
        self._global_listeners = set()  # type: typing.Set[Listener]

        self._stop_scope = None  # type: typing.Optional[trio.CancelScope]

    def listen(self, name: str = "_"):
        """Adds a listener for a specific kind of event.
        Use as a decorator generating method.

        Keyword Arguments:
            name {str} -- The kind of event to listen for, eg. 'PRIVMSG' (default: {'_'})

        Returns:
            function -- The decorator method.
        """

        def _decorator(func):
            self._listeners.setdefault(name, set()).add(func)
            return func

        return _decorator

    def listen_all(self):
        """Adds a listener for all events received by this driver.
        Use as a decorator generating method.

        Returns:
            function -- The decorator method.
        """

        def _decorator(func):
            self._global_listeners.add(func)
            return func

        return _decorator

    async def receive_event(self, event: Event):
        """Hands an event over to every interested listener.
        Used either by the run loop or to 'simulate' events.

            >>> import trio
            >>> from xirc.events import ResponseEvent, ERR_NOMOTD
            >>> dummy_driver = Driver()
            ...
            >>> @dummy_driver.listen('_NUMERIC')
            ... async def on_numeric(kind, event):
            ...     print(kind, event.code)
            ...
            >>> trio.run(dummy_driver.receive_event, ResponseEvent(ERR_NOMOTD))
            _NUMERIC 422

        Arguments:
            event {Event} -- The event.
        """

        kind = event.kind
        lists = self._listeners.get(kind, set()) | self._global_listeners

        for listener in lists:
            await listener(kind, event)

    def running(self) -> bool:
        """Returns whether the run loop is active."""

        return self._stop_scope is not None

    async def run(self):
        """
        Connects, if need be, then polls events and dispatches them
        to listeners until the driver disconnects or is stopped.
        """

        if not self.connected():
            await self.connect()

        with trio.CancelScope() as scope:
            self._stop_scope = scope

            try:
                while self.connected():
                    event = await self.next_event()

                    if event is not None:
                        await self.receive_event(event)

                    else:
                        await trio.sleep(0)

            finally:
                self._stop_scope = None

    async def stop(self, reason: typing.Optional[str] = None):
        """Quits, then ends the run loop, if any."""

        if self.connected():
            await self.quit(reason)

        if self._stop_scope is not None:
            self._stop_scope.cancel()

    async def send_command(self, name: str, *args):
        """Issues an IRC-shaped command by name.

        Arguments:
            name {str} -- The command, eg. 'privmsg' or 'join'.
            *args -- The command's arguments.

        Raises:
            UnknownCommandError: The command is not known to any driver.
        """

        method = COMMANDS.get(name.lower())

        if method is None:
            raise UnknownCommandError("Unknown command: {}".format(name))

        await getattr(self, method)(*args)

    # === Connection ===

    def connected(self) -> bool:
        """Returns whether there is an established connection."""

        raise NotImplementedError("Please subclass and implement!")

    async def connect(self):
        """Initiates a connection with the server."""

        raise NotImplementedError("Please subclass and implement!")

    async def next_event(self) -> typing.Optional[Event]:
        """Listens for an event on the current connection.

        Returns:
            Optional[Event] -- The event, or None if nothing happened.
        """

        raise NotImplementedError("Please subclass and implement!")

    # === Commands ===

    async def action(self, target: str, text: str):
        """Performs an action (like /me) at a target.

        Arguments:
            target {str} -- Channel name or user nick.
            text {str} -- Text of the action to perform.
        """

        raise NotImplementedError("Please subclass and implement!")

    async def notice(self, target: str, text: str):
        """Sends a notice to a channel or nick."""

        raise NotImplementedError("Please subclass and implement!")

    async def privmsg(self, target: str, text: str):
        """Sends a message to a channel or nick."""

        raise NotImplementedError("Please subclass and implement!")

    async def join(self, channels: str, keys: typing.Optional[str] = None):
        """Joins one or more channels.

        Arguments:
            channels {str} -- Comma-delimited list of channels to join.

        Keyword Arguments:
            keys {Optional[str]} -- Comma-delimited list of channel keys. (default: {None})
        """

        raise NotImplementedError("Please subclass and implement!")

    async def part(self, channels: str):
        """Leaves one or more channels (comma-delimited)."""

        raise NotImplementedError("Please subclass and implement!")

    async def ping(self, nick: typing.Optional[str] = None, hash: typing.Optional[str] = None):
        """Tests the responsiveness of the server or a user."""

        raise NotImplementedError("Please subclass and implement!")

    async def pong(self, daemon: typing.Optional[str] = None):
        """Responds to a server test of client responsiveness."""

        raise NotImplementedError("Please subclass and implement!")

    async def quit(self, reason: typing.Optional[str] = None):
        """Terminates the connection with the server."""

        raise NotImplementedError("Please subclass and implement!")

    async def finger(self, nick: str, finger: typing.Optional[str] = None):
        """Sends a CTCP FINGER request or response to a user."""

        raise NotImplementedError("Please subclass and implement!")

    async def invite(self, nick: str, channel: str):
        """Invites a user to an invite-only channel."""

        raise NotImplementedError("Please subclass and implement!")

    async def kick(self, nick: str, channel: str, reason: typing.Optional[str] = None):
        """Kicks a user from a channel."""

        raise NotImplementedError("Please subclass and implement!")

    async def list_mucs(self, channels: typing.Optional[str] = None):
        """Obtains a list of available channels (IRC LIST)."""

        raise NotImplementedError("Please subclass and implement!")

    async def mode(
        self, target: str, mode: typing.Optional[str] = None, param: typing.Optional[str] = None
    ):
        """Retrieves or changes a channel or user mode."""

        raise NotImplementedError("Please subclass and implement!")

    async def names(self, channels: str):
        """Obtains the nicks present in one or more channels."""

        raise NotImplementedError("Please subclass and implement!")

    async def nick(self, nick: str):
        """Changes the client nick."""

        raise NotImplementedError("Please subclass and implement!")

    async def raw(self, command: str):
        """Sends a raw command to the server."""

        raise NotImplementedError("Please subclass and implement!")

    async def time(self, nick: str, time: typing.Optional[str] = None):
        """Sends a CTCP TIME request or response to a user."""

        raise NotImplementedError("Please subclass and implement!")

    async def topic(self, channel: str, topic: typing.Optional[str] = None):
        """Retrieves or changes a channel topic."""

        raise NotImplementedError("Please subclass and implement!")

    async def version(self, nick: str, version: typing.Optional[str] = None):
        """Sends a CTCP VERSION request or response to a user."""

        raise NotImplementedError("Please subclass and implement!")

    async def whois(self, nick: str):
        """Retrieves information about a nick."""

        raise NotImplementedError("Please subclass and implement!")
