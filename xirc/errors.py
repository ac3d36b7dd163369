class XircError(Exception):
    """
    A common superclass for all
    exceptions regarding xirc.
    """
    pass

class ConfigurationError(XircError):
    """
    Raised when connection settings supplied
    by the host framework are incomplete or
    cannot be understood.
    """
    pass

class MalformedStanzaError(XircError):
    """
    Raised when a stanza handed over by the
    transport does not have the expected shape.
    Never escapes the event poll loop.
    """
    pass

# == Driver errors ==

class XircDriverError(XircError):
    """
    A common superclass for all exceptions
    involving xirc.driver.Driver and
    subclasses thereof.
    """
    pass

class ConnectionAttemptFailed(XircDriverError):
    """
    Raised when the underlying session could not
    even be constructed. The driver does not retry;
    that is up to the host framework.
    """
    pass

class AlreadyConnectedError(XircDriverError):
    """
    Raised when connect is called on a driver
    that already holds a session.
    """
    pass

class NotConnectedError(XircDriverError):
    """
    Raised when a command that needs the session
    is issued while the driver is disconnected.
    """
    pass

class UnknownCommandError(XircDriverError):
    """
    Raised by send_command when the command name
    is not part of the driver's command surface.
    """
    pass
