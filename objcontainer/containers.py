from types import MappingProxyType
from typing import Generic, TypeVar
from collections.abc import Mapping, MutableMapping, MutableSequence, MutableSet

from .config import ContainerConfig
from . import reports


T = TypeVar("T")

_MISSING = object()

_MUTABLE_TYPES = (MutableMapping, MutableSequence, MutableSet, bytearray)


def strictly_equal(stored, value):
    if stored is value:
        return True
    # Mutable containers are compared by identity only, never deeply
    if isinstance(stored, _MUTABLE_TYPES) or isinstance(value, _MUTABLE_TYPES):
        return False
    if isinstance(stored, bool) != isinstance(value, bool):
        return False
    return bool(stored == value)


class Container(Generic[T]):
    """A string-keyed mapping that optionally lowercases keys and string values."""

    def __init__(self, data=None, config=None, **options):
        self._config: ContainerConfig = ContainerConfig.from_options(config, **options)
        self._entries: dict = {}
        if data:
            for key, value in dict(data).items():
                self._entries[self._check_key(key)] = value
        self.prepare_data()


    @property
    def config(self) -> ContainerConfig:
        return self._config


    @staticmethod
    def _check_key(key):
        if not isinstance(key, str):
            raise reports.InvalidKeyError(key)
        return key


    def normalize_key(self, key: str) -> str:
        self._check_key(key)
        if self.config.lowercase_keys:
            return key.lower()
        return key


    def normalize_value(self, value):
        if self.config.lowercase_values and isinstance(value, str):
            return value.lower()
        return value


    def prepare_data(self):
        if not self.config.normalizes:
            return

        entries = self._normalized(self._entries)
        self._entries.clear()
        self._entries.update(entries)


    def _normalized(self, values):
        entries = {}
        origins = {}
        for key, value in dict(values).items():
            normalized_key = self.normalize_key(key)
            if normalized_key in origins:
                reports.warning(
                    "key-collision",
                    f"Keys {origins[normalized_key]!r} and {key!r} both normalize to {normalized_key!r}; the value of {key!r} is kept"
                )
            origins[normalized_key] = key
            entries[normalized_key] = self.normalize_value(value)
        return entries


    def has(self, key: str, value=_MISSING) -> bool:
        key = self.normalize_key(key)

        if key not in self._entries:
            return False

        if value is _MISSING:
            return True

        return strictly_equal(self._entries[key], self.normalize_value(value))


    def contains(self, key: str) -> bool:
        return self.has(key)


    def contains_value(self, key: str, value) -> bool:
        return self.has(key, value)


    def get(self, key: str, default=None):
        return self._entries.get(self.normalize_key(key), default)


    def put(self, key: str, value) -> "Container[T]":
        self._entries[self.normalize_key(key)] = self.normalize_value(value)
        return self


    def put_if_not_exists(self, key: str, value) -> bool:
        if self.has(key):
            return False

        self.put(key, value)
        return True


    def forget(self, key: str) -> "Container[T]":
        self._entries.pop(self.normalize_key(key), None)
        return self


    def remove(self, key: str) -> "Container[T]":
        return self.forget(key)


    def clear(self) -> "Container[T]":
        self._entries.clear()
        return self


    def items(self) -> Mapping:
        # Live, but cannot be written through; see borrow()
        return MappingProxyType(self._entries)


    def all(self) -> Mapping:
        return self.items()


    def borrow(self) -> dict:
        # Writes through this bypass normalization
        return self._entries


    def to_dict(self) -> dict:
        return dict(self._entries)


    def keys(self) -> list:
        return list(self._entries)


    def values(self) -> list:
        return list(self._entries.values())


    def empty(self) -> bool:
        return not self._entries


    def populate(self, values) -> "Container[T]":
        entries = self._normalized(values)
        self._entries.clear()
        self._entries.update(entries)
        return self


    def __contains__(self, key):
        return isinstance(key, str) and self.has(key)


    def __getitem__(self, key):
        try:
            return self._entries[self.normalize_key(key)]
        except KeyError:
            raise KeyError(key) from None


    def __setitem__(self, key, value):
        self.put(key, value)


    def __delitem__(self, key):
        try:
            del self._entries[self.normalize_key(key)]
        except KeyError:
            raise KeyError(key) from None


    def __iter__(self):
        return iter(self._entries)


    def __len__(self):
        return len(self._entries)


    def __bool__(self):
        return not self.empty()


    def __eq__(self, rhs):
        if isinstance(rhs, Container):
            return self._entries == rhs._entries
        if isinstance(rhs, Mapping):
            return self._entries == dict(rhs)
        return NotImplemented


    __hash__ = None


    def __repr__(self):
        return f"Container({self._entries!r}, {self.config!r})"
