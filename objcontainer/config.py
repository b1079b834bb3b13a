from collections import namedtuple

from . import reports


option_aliases = {
    "lowercase_keys": "lowercase_keys",
    "lowercaseKeys": "lowercase_keys",
    "convertAllKeysToLowerCase": "lowercase_keys",
    "lowercase_values": "lowercase_values",
    "lowercaseValues": "lowercase_values",
    "convertAllValuesToLowerCase": "lowercase_values",
}


class ContainerConfig(namedtuple("ContainerConfig", ["lowercase_keys", "lowercase_values"], defaults=[False, False])):
    __slots__ = ()


    @classmethod
    def from_options(cls, options=None, **kwargs):
        if isinstance(options, cls) and not kwargs:
            return options

        if isinstance(options, cls):
            merged = options._asdict()
        elif options is None:
            merged = {}
        else:
            merged = {}
            for name, value in dict(options).items():
                cls._merge_option(merged, name, value)

        for name, value in kwargs.items():
            cls._merge_option(merged, name, value)

        return cls(**merged)


    @staticmethod
    def _merge_option(merged, name, value):
        field = option_aliases.get(name)
        if field is None:
            reports.warning(
                "unknown-option",
                f"Unknown container option {name!r} is ignored. Known options: lowercase_keys, lowercase_values"
            )
            return
        merged[field] = bool(value)


    @property
    def normalizes(self):
        return bool(self.lowercase_keys or self.lowercase_values)


    def __repr__(self):
        return f"ContainerConfig(lowercase_keys={self.lowercase_keys!r}, lowercase_values={self.lowercase_values!r})"
