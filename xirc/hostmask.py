"""
Hostmasks for XMPP addresses.

IRC plugins identify senders by nick!username@host. XMPP addresses
(JIDs) look like node@domain/resource, and mean different things
depending on whether they come from a MUC or from a direct chat.
"""

import attr

GROUPCHAT = "groupchat"


@attr.s(auto_attribs=True, frozen=True)
class Hostmask:
    """The normalized identity of whoever sent a stanza."""

    nick: str
    username: str
    host: str
    resource: str = ""

    def __str__(self) -> str:
        return "{}!{}@{}".format(self.nick, self.username, self.host)


def bare_address(address: str) -> str:
    """Strips the resource (or in-room nickname) off an address.

        >>> bare_address('room@conf.example/alice')
        'room@conf.example'
        >>> bare_address('alice@example.com')
        'alice@example.com'
    """

    return address.split("/")[0]


def hostmask_from_address(address: str, kind: str) -> Hostmask:
    """Parses an XMPP address into a Hostmask.

    In a MUC, the resource is the in-room nickname and the node is the
    room itself. Everywhere else, the node is the user.

        >>> print(hostmask_from_address('room@conf.example/alice', 'groupchat'))
        alice!room@conf.example

        >>> print(hostmask_from_address('alice@example.com/laptop', 'chat'))
        alice!alice@example.com

        >>> hostmask_from_address('example.com', 'get').host
        'example.com'

    Arguments:
        address {str} -- The sender address of the stanza.
        kind {str} -- The stanza's type attribute.

    Returns:
        Hostmask -- The parsed hostmask.
    """

    address = address or ""
    bare, _, resource = address.partition("/")

    if "@" in bare:
        node, _, domain = bare.partition("@")

    else:
        node, domain = "", bare

    if kind == GROUPCHAT:
        return Hostmask(nick=resource, username=node, host=domain)

    return Hostmask(nick=node, username=node, host=domain, resource=resource)
