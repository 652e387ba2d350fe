import threading
from typing import Any, Dict, Tuple


class SingletonCache:
    """Name-keyed store of live bean instances.

    Entries are only ever added: :meth:`put` never replaces an existing
    instance and returns whichever instance ended up stored. ``lock`` is the
    re-entrant lock the container holds while creating beans.
    """

    def __init__(self) -> None:
        self._instances: Dict[str, Any] = {}
        self.lock = threading.RLock()

    def get(self, name: str, default: Any = None) -> Any:
        return self._instances.get(name, default)

    def put(self, name: str, instance: Any) -> Any:
        with self.lock:
            return self._instances.setdefault(name, instance)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._instances)

    def __contains__(self, name: object) -> bool:
        return name in self._instances

    def __len__(self) -> int:
        return len(self._instances)
