# storefront/repos/base.py
import threading
from typing import Generic, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

from storefront.domain.errors import NotFoundError

T = TypeVar("T", bound=BaseModel)


class InMemoryRepo(Generic[T]):
    """
    List-backed store shared by the concrete repositories.

    Reads return None for a missing id, writes raise NotFoundError.
    Records go in and come out as copies, so a stored record only changes
    through the repository's own methods. Every access goes through one
    lock per store.
    """

    entity_name = "Record"

    def __init__(self, records: Iterable[T] = ()):
        self._records: List[T] = [r.model_copy(deep=True) for r in records]
        self._lock = threading.RLock()

    @staticmethod
    def _copy(record: Optional[T]) -> Optional[T]:
        return record.model_copy(deep=True) if record is not None else None

    def _next_id(self) -> int:
        #max + 1, or 1 for an empty store
        return max((r.id for r in self._records), default=0) + 1

    def _index_of(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return -1

    def _find(self, predicate) -> Optional[T]:
        with self._lock:
            return self._copy(next((r for r in self._records if predicate(r)), None))

    def _filter(self, predicate) -> List[T]:
        with self._lock:
            return [self._copy(r) for r in self._records if predicate(r)]

    def get_all(self) -> List[T]:
        return self._filter(lambda r: True)

    def get_by_id(self, record_id: int) -> Optional[T]:
        with self._lock:
            index = self._index_of(record_id)
            return self._copy(self._records[index]) if index >= 0 else None

    def create(self, record: T) -> T:
        with self._lock:
            stored = record.model_copy(update={"id": self._next_id()}, deep=True)
            self._records.append(stored)
            return self._copy(stored)

    def update(self, record: T) -> T:
        with self._lock:
            index = self._index_of(record.id)
            if index == -1:
                raise NotFoundError(self.entity_name, record.id)
            self._records[index] = self._copy(record)
            return self._copy(record)

    def delete(self, record_id: int) -> None:
        with self._lock:
            index = self._index_of(record_id)
            if index == -1:
                raise NotFoundError(self.entity_name, record_id)
            del self._records[index]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
