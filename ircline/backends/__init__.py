from ircline.backends.base import Connector, IrcConnection
from ircline.backends.loopback import LoopbackConnection

__all__ = ["Connector", "IrcConnection", "LoopbackConnection"]
