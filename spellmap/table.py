from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .hashing import DEFAULT_HASH_CODE, HashCode, hash_key, parse_hash_code
from .shared import lowercase, trim


class PreconditionError(Exception):
    pass


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Stats:
    size: int
    inserts: int
    load_factor: float
    collisions: int
    max_bucket: int


@dataclass
class HashTable:
    buckets: list[list[str]] = field(default_factory=list)
    inserts: list[int] = field(default_factory=list)
    hash_code: HashCode = DEFAULT_HASH_CODE

    def size(self) -> int:
        return len(self.buckets)

    def set_hash_code(self, name: str) -> bool:
        # existing keys keep their buckets until the next rehash
        method = parse_hash_code(name)
        if method is None:
            return False
        self.hash_code = method
        return True

    def find(self, key: str) -> int | NotFound:
        index = self._bucket_index(key)
        if key in self.buckets[index]:
            return index
        return NotFound()

    def put(self, key: str) -> bool:
        if not isinstance(self.find(key), NotFound):
            return False

        index = self._bucket_index(key)
        self.buckets[index].append(key)
        self.inserts[index] += 1
        return True

    def erase(self, key: str) -> bool:
        index = self.find(key)
        if isinstance(index, NotFound):
            return False

        # inserts[index] is cumulative, leave it alone
        self.buckets[index].remove(key)
        return True

    def resize(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise PreconditionError(f"table size must be an integer, got {capacity!r}")
        if capacity <= 0:
            raise PreconditionError(f"table size must be positive, got {capacity!r}")

        old_buckets = self.buckets
        self.buckets = [[] for _ in range(capacity)]
        self.inserts = [0] * capacity

        for chain in old_buckets:
            for key in chain:
                self.put(key)

    def rehash(self):
        self._check_sized()
        self.resize(self.size())

    def load(self, lines: Iterable[str]):
        self._check_sized()
        for line in lines:
            key = trim(lowercase(line))
            if not key:
                continue
            self.put(key)

    def stats(self) -> Stats:
        self._check_sized()
        total = sum(self.inserts)
        return Stats(
            size=self.size(),
            inserts=total,
            load_factor=total / self.size(),
            collisions=sum(max(count - 1, 0) for count in self.inserts),
            max_bucket=max(self.inserts),
        )

    def keys(self) -> Iterator[str]:
        for chain in self.buckets:
            yield from chain

    def __len__(self) -> int:
        return sum(len(chain) for chain in self.buckets)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or self.size() == 0:
            return False
        return not isinstance(self.find(key), NotFound)

    def _bucket_index(self, key: str) -> int:
        self._check_sized()
        return hash_key(self.hash_code, key, self.size())

    def _check_sized(self):
        if self.size() == 0:
            raise PreconditionError("table has no buckets, resize it first")
