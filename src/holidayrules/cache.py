from collections import OrderedDict
from typing import Any, Generic, Hashable, Optional, TypeVar

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')

_MISSING = object()


class LRUCache(Generic[K, V]):
    '''
    Fixed-capacity mapping evicting the least recently used key.
    get() promotes a key, set() evicts one entry when full and the key is new.
    '''
    def __init__(self, max_size: int = 1000):
        if max_size < 1:
            raise ValueError(f'max_size must be at least 1. Got {max_size}')
        self.max_size = max_size
        self.hits = 0
        self.misses = 0
        self._data: OrderedDict[K, V] = OrderedDict()

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        value = self._data.get(key, _MISSING)
        if value is _MISSING:
            self.misses += 1
            return default
        self._data.move_to_end(key)
        self.hits += 1
        return value

    def set(self, key: K, value: V) -> None:
        if key in self._data:
            self._data.move_to_end(key)
        elif len(self._data) >= self.max_size:
            self._data.popitem(last=False)
        self._data[key] = value

    def delete(self, key: K) -> bool:
        return self._data.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        self._data.clear()
        self.hits = 0
        self.misses = 0

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return 0.0 if total == 0 else self.hits / total

    def stats(self) -> dict[str, Any]:
        return {
            'size': len(self._data),
            'max_size': self.max_size,
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': self.hit_rate,
        }

    def __repr__(self) -> str:
        return f'LRUCache(size={len(self._data)}, max_size={self.max_size}, hits={self.hits}, misses={self.misses})'
