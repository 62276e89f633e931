# tokenledger/core/journal.py

from typing import Any, Callable, List, MutableMapping, Optional

_MISSING = object()


class Journal:
    """
    Undo log shared by the ledger's stores.

    While a transaction is open every store write records how to restore the
    previous value. ``rollback`` replays those records newest-first, leaving
    the stores exactly as they were at ``begin``.
    """
    def __init__(self):
        self._undo: Optional[List[Callable[[], None]]] = None

    @property
    def active(self) -> bool:
        return self._undo is not None

    def begin(self):
        if self._undo is not None:
            raise RuntimeError("transaction already open")
        self._undo = []

    def commit(self):
        self._undo = None

    def rollback(self):
        undo, self._undo = self._undo or [], None
        for restore in reversed(undo):
            restore()

    def record_item(self, mapping: MutableMapping, key: Any):
        """Remember ``mapping[key]`` (or its absence) before it is overwritten."""
        if self._undo is None:
            return
        old = mapping.get(key, _MISSING)

        def restore():
            if old is _MISSING:
                mapping.pop(key, None)
            else:
                mapping[key] = old

        self._undo.append(restore)

    def record_attr(self, obj: Any, attr: str):
        if self._undo is None:
            return
        old = getattr(obj, attr)
        self._undo.append(lambda: setattr(obj, attr, old))
