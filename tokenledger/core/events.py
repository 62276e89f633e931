# tokenledger/core/events.py

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional


@dataclass(frozen=True)
class Event:
    """A notification emitted after a successful ledger operation."""
    name: str
    params: Dict[str, Any]


class EventSink(ABC):
    """
    Receiver for ledger notifications. The ledger only ever calls ``emit``
    after an operation has fully committed.
    """
    @abstractmethod
    def emit(self, event: Event) -> None:
        pass


class EventLog(EventSink):
    """Maintains a log of all events in the system."""
    def __init__(self):
        self._events: List[Event] = []

    def emit(self, event: Event) -> None:
        """Add an event to the log."""
        self._events.append(event)

    def get_events(self, event_name: Optional[str] = None) -> List[Event]:
        """
        Retrieve events from the log.
        If event_name is provided, only returns events with that name.
        """
        if event_name is None:
            return self._events.copy()
        return [e for e in self._events if e.name == event_name]

    def last(self) -> Optional[Event]:
        return self._events[-1] if self._events else None

    def clear(self):
        """Clear all events from the log."""
        self._events = []

    def __len__(self) -> int:
        return len(self._events)


# Ledger event factories
def create_token_minted_event(token_id: int, who: Hashable) -> Event:
    return Event(
        name="TokenMinted",
        params={
            "token_id": token_id,
            "who": who
        }
    )

def create_transferred_event(from_account: Hashable, to_account: Hashable,
                             amount: int) -> Event:
    return Event(
        name="Transferred",
        params={
            "from": from_account,
            "to": to_account,
            "amount": amount
        }
    )

def create_approved_event(token_id: int, owner: Hashable, spender: Hashable,
                          amount: int) -> Event:
    return Event(
        name="Approved",
        params={
            "token_id": token_id,
            "owner": owner,
            "spender": spender,
            "amount": amount
        }
    )

def create_transferred_from_event(spender: Hashable, from_account: Hashable,
                                  to_account: Hashable, amount: int) -> Event:
    return Event(
        name="TransferredFrom",
        params={
            "spender": spender,
            "from": from_account,
            "to": to_account,
            "amount": amount
        }
    )
