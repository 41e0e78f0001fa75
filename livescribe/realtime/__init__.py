from .bridge import UpstreamBridge
from .session import RelaySession
from .listener import UpstreamListener
from .adapter import UpstreamSessionAdapter

__all__ = ["RelaySession", "UpstreamBridge", "UpstreamListener", "UpstreamSessionAdapter"]
