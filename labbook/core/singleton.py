from typing import Any, Dict, Tuple, Type


class ValueSingletonMeta(type):
    def __new__(
        mcs: Type["ValueSingletonMeta"],
        name: str,
        bases: Tuple[Type],
        dct: Dict[str, Any],
    ) -> Type:
        dct["__instances__"] = {}
        dct.setdefault("__slots__", ())
        new_type = type.__new__(mcs, name, bases, dct)
        return new_type

    def __call__(cls, value: Any, *args, **kwargs) -> Any:
        if isinstance(value, cls):
            return value

        key = str(value).strip().lower()
        if key not in cls.__instances__:
            value_instance = type.__call__(cls, value, *args, **kwargs)
            cls.__instances__[getattr(value_instance, cls.attr)] = value_instance
        return cls.__instances__[key]


class UniqueName(metaclass=ValueSingletonMeta):
    """Base class to create singletons from strings.

    A subclass of :class:`UniqueName` defines a namespace.
    """

    __slots__ = ("_hash", "__name")
    attr = "name"

    def __init__(self, name: str) -> None:
        self.__name = str(name).strip().lower()
        self._hash = hash(self.__name)

    @property
    def name(self) -> str:
        return self.__name

    @classmethod
    def get(cls, name: str, default: Any = None) -> Any:
        """Return the registered instance named `name`, without creating
        it."""
        return cls.__instances__.get(str(name).strip().lower(), default)

    def __repr__(self):
        return f"{self.__class__.__name__}({repr(self.name)})"

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, self.__class__):
            return self._hash == other._hash
        return self.__name == str(other)

    def __hash__(self) -> int:
        return self._hash
