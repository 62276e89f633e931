from .core.errors import LedgerError
from .core.events import Event, EventLog, EventSink
from .core.ledger import Ledger
from .core.config import LedgerConfig

__version__ = "0.1.0"
