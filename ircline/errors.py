class IrclineError(Exception):
    """Base class for client errors."""


class InputSourceError(IrclineError):
    """The raw input stream could not be read. Fatal for the process."""


class NoConnectionError(IrclineError):
    def __init__(self) -> None:
        super().__init__("Not connected to any server.")
