"""
In-memory record stores.

Every collection (users, students, courses, enrollments) sits behind the
``Repository`` interface so handlers and services never touch a raw list.
``InMemoryRepository`` keeps records in insertion order and serialises each
operation with a lock. Records are plain dicts keyed by ``id``; callers
always receive copies.

Multi-step operations (check for a duplicate, then insert) are not atomic
across calls, and nothing here is shared between processes.
"""

import copy
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Optional

from scholarbase.core.seed import seed_records

Record = Dict[str, Any]
Predicate = Callable[[Record], bool]


class Repository(ABC):
    """Storage contract used by the services"""

    @abstractmethod
    def get(self, record_id: str) -> Optional[Record]:
        ...

    @abstractmethod
    def list(self) -> List[Record]:
        ...

    @abstractmethod
    def find(self, predicate: Predicate) -> List[Record]:
        ...

    @abstractmethod
    def find_one(self, predicate: Predicate) -> Optional[Record]:
        ...

    @abstractmethod
    def insert(self, record: Record) -> Record:
        ...

    @abstractmethod
    def update(self, record_id: str, changes: Record) -> Optional[Record]:
        ...

    @abstractmethod
    def delete(self, record_id: str) -> Optional[Record]:
        ...

    @abstractmethod
    def delete_one(self, predicate: Predicate) -> Optional[Record]:
        ...

    @abstractmethod
    def count(self, predicate: Optional[Predicate] = None) -> int:
        ...

    @abstractmethod
    def replace_all(self, records: Iterable[Record]) -> None:
        ...


class InMemoryRepository(Repository):
    """List-backed repository guarded by a single mutex"""

    def __init__(self, name: str, records: Optional[Iterable[Record]] = None):
        self.name = name
        self._lock = threading.Lock()
        self._records: List[Record] = [copy.deepcopy(r) for r in records or []]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _index_of(self, predicate: Predicate) -> int:
        for index, record in enumerate(self._records):
            if predicate(record):
                return index
        return -1

    def get(self, record_id: str) -> Optional[Record]:
        return self.find_one(lambda r: r.get("id") == record_id)

    def list(self) -> List[Record]:
        with self._lock:
            return copy.deepcopy(self._records)

    def find(self, predicate: Predicate) -> List[Record]:
        with self._lock:
            return [copy.deepcopy(r) for r in self._records if predicate(r)]

    def find_one(self, predicate: Predicate) -> Optional[Record]:
        with self._lock:
            index = self._index_of(predicate)
            return copy.deepcopy(self._records[index]) if index >= 0 else None

    def insert(self, record: Record) -> Record:
        if not record.get("id"):
            raise ValueError(f"Cannot insert into {self.name} without an id")
        with self._lock:
            self._records.append(copy.deepcopy(record))
            return copy.deepcopy(record)

    def update(self, record_id: str, changes: Record) -> Optional[Record]:
        with self._lock:
            index = self._index_of(lambda r: r.get("id") == record_id)
            if index < 0:
                return None
            updated = {**self._records[index], **copy.deepcopy(changes)}
            self._records[index] = updated
            return copy.deepcopy(updated)

    def delete(self, record_id: str) -> Optional[Record]:
        return self.delete_one(lambda r: r.get("id") == record_id)

    def delete_one(self, predicate: Predicate) -> Optional[Record]:
        with self._lock:
            index = self._index_of(predicate)
            if index < 0:
                return None
            return self._records.pop(index)

    def count(self, predicate: Optional[Predicate] = None) -> int:
        with self._lock:
            if predicate is None:
                return len(self._records)
            return sum(1 for r in self._records if predicate(r))

    def replace_all(self, records: Iterable[Record]) -> None:
        with self._lock:
            self._records = [copy.deepcopy(r) for r in records]


class Store:
    """The four process-wide collections"""

    def __init__(self):
        self.users: Repository = InMemoryRepository("users")
        self.students: Repository = InMemoryRepository("students")
        self.courses: Repository = InMemoryRepository("courses")
        self.enrollments: Repository = InMemoryRepository("enrollments")

    def load(self, data: Dict[str, Iterable[Record]]) -> None:
        """Replace the contents of each named collection"""
        for name, records in data.items():
            getattr(self, name).replace_all(records)

    def clear(self) -> None:
        for repository in (self.users, self.students, self.courses, self.enrollments):
            repository.replace_all([])

    def reset(self) -> None:
        """Restore the seed data"""
        self.load(seed_records())


store = Store()
