"""
# IRC-shaped bots over XMPP.

Bot frameworks built around IRC expect a driver they can tell to
connect, join channels and send messages, and then poll for events.
xirc provides such a driver for XMPP.

## Outgoing

IRC commands with an XMPP counterpart (messages, actions, notices,
joins, pings, quitting) are translated one to one. The rest are
accepted and dropped, so that plugins using them keep working.

## Incoming

Messages become PRIVMSG requests, iqs become PONG requests, and
everything else is ignored. The bot's own stanzas, which XMPP
servers echo back, are never surfaced.
"""
