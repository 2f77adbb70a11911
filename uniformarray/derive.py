"""Class decorator that gives uniformly typed dataclasses array-like access.

A dataclass whose fields all share one type can be decorated with
:func:`uniform_array`. The class then has a length, and its fields can be
read and written by position. Fields named ``_0``, ``_1``, ... are treated as
positional (tuple-like) fields.

Slice-backed construction and live sequence views (``from_slice``,
``from_mut_slice``, ``as_ref`` and ``as_mut``) are added only when the
class's ``safety_gate`` is among the enabled ``features``.
"""

from __future__ import annotations

import dataclasses
import operator
import re
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

__all__ = ["UniformArrayError", "uniform_array", "uniform_fields"]

_POSITIONAL_NAME = re.compile(r"_\d+")

_CORE_MEMBERS = ("__len__", "is_empty")
_INDEX_MEMBERS = ("__getitem__", "__setitem__")
_GATED_MEMBERS = ("from_slice", "from_mut_slice", "as_ref", "as_mut")


class UniformArrayError(TypeError):
    """Raised when a class cannot be turned into a uniform array."""


def _type_name(annotation: Any) -> str:
    """Return a comparable name for a field annotation."""
    if isinstance(annotation, str):
        return annotation.strip()
    if isinstance(annotation, TypeVar):
        return annotation.__name__
    if isinstance(annotation, type) and getattr(annotation, "__origin__", None) is None:
        return annotation.__qualname__
    return repr(annotation)


def uniform_fields(cls: type) -> tuple[str, ...]:
    """Return the field names of a dataclass whose fields share one type.

    Raises :class:`UniformArrayError` if ``cls`` is not a dataclass or if a
    field's type differs from the type of the first field.
    """
    if not isinstance(cls, type) or not dataclasses.is_dataclass(cls):
        raise UniformArrayError(
            f"{cls!r} is not a dataclass; only dataclasses can be uniform arrays"
        )

    fields = dataclasses.fields(cls)
    if not fields:
        return ()

    expected = _type_name(fields[0].type)
    for index, field in enumerate(fields):
        found = _type_name(field.type)
        if found == expected:
            continue
        if _POSITIONAL_NAME.fullmatch(field.name):
            location = f".{index}"
        else:
            location = f'"{field.name}"'
        raise UniformArrayError(
            f'Struct "{cls.__name__}" has fields of different types. '
            f"Expected uniform use of {expected}, found {found} in field {location}."
        )
    return tuple(field.name for field in fields)


class _FieldView(Sequence):
    """A live, fixed-length sequence over the fields of an instance."""

    __slots__ = ("_owner", "_names", "_writable")

    def __init__(self, owner: Any, names: tuple[str, ...], writable: bool) -> None:
        self._owner = owner
        self._names = names
        self._writable = writable

    def __len__(self) -> int:
        return len(self._names)

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return [getattr(self._owner, name) for name in self._names[index]]
        return getattr(self._owner, self._names[index])

    def __setitem__(self, index: int, value: Any) -> None:
        if not self._writable:
            raise TypeError("read-only field view does not support item assignment")
        setattr(self._owner, self._names[index], value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def _install(cls: type, members: dict[str, Callable[..., Any]]) -> None:
    for name, member in members.items():
        function = member.__func__ if isinstance(member, classmethod) else member
        function.__name__ = name
        function.__qualname__ = f"{cls.__qualname__}.{name}"
        function.__module__ = cls.__module__
        setattr(cls, name, member)


def _core_members(names: tuple[str, ...]) -> dict[str, Callable[..., Any]]:
    count = len(names)

    def length(self: Any) -> int:
        """Return the number of fields."""
        return count

    def is_empty(self: Any) -> bool:
        """Indicate whether the type has no fields."""
        return count == 0

    return {"__len__": length, "is_empty": is_empty}


def _index_members(names: tuple[str, ...]) -> dict[str, Callable[..., Any]]:
    count = len(names)

    def field_name(index: Any) -> str:
        position = operator.index(index)
        if 0 <= position < count:
            return names[position]
        raise IndexError(
            f"Index out of bounds: Invalid access of index {position} "
            f"for type with {count} fields."
        )

    def getitem(self: Any, index: Any) -> Any:
        """Return the field at ``index``."""
        return getattr(self, field_name(index))

    def setitem(self: Any, index: Any, value: Any) -> None:
        """Assign the field at ``index``."""
        setattr(self, field_name(index), value)

    return {"__getitem__": getitem, "__setitem__": setitem}


def _slice_backed_class(cls: type, names: tuple[str, ...]) -> type:
    """Build a subclass of ``cls`` whose fields live in an external sequence."""

    def field_property(position: int) -> property:
        def fget(self: Any) -> Any:
            return self._uniform_storage[position]

        def fset(self: Any, value: Any) -> None:
            if not self._uniform_writable:
                raise AttributeError(
                    f"field {names[position]!r} of a read-only slice view cannot be assigned"
                )
            self._uniform_storage[position] = value

        return property(fget, fset)

    namespace: dict[str, Any] = {
        name: field_property(position) for position, name in enumerate(names)
    }
    namespace["__module__"] = cls.__module__
    namespace["__doc__"] = f"A {cls.__name__} whose fields are stored in a sequence."
    return type(cls)(f"{cls.__name__}SliceView", (cls,), namespace)


def _gated_members(cls: type, names: tuple[str, ...]) -> dict[str, Callable[..., Any]]:
    count = len(names)
    view_class = _slice_backed_class(cls, names)

    def attach(values: Sequence[Any], writable: bool) -> Any:
        if len(values) != count:
            raise ValueError(
                f"slice of length {len(values)} does not match the "
                f"{count} fields of {cls.__name__}"
            )
        instance = object.__new__(view_class)
        object.__setattr__(instance, "_uniform_storage", values)
        object.__setattr__(instance, "_uniform_writable", writable)
        return instance

    def from_slice(klass: type, values: Sequence[Any]) -> Any:
        """Return a read-only instance backed by ``values``."""
        return attach(values, writable=False)

    def from_mut_slice(klass: type, values: Sequence[Any]) -> Any:
        """Return an instance backed by ``values``; writes go to ``values``."""
        return attach(values, writable=True)

    def as_ref(self: Any) -> Sequence[Any]:
        """Return a read-only live sequence view of the fields."""
        return _FieldView(self, names, writable=False)

    def as_mut(self: Any) -> Sequence[Any]:
        """Return a writable live sequence view of the fields."""
        return _FieldView(self, names, writable=True)

    return {
        "from_slice": classmethod(from_slice),
        "from_mut_slice": classmethod(from_mut_slice),
        "as_ref": as_ref,
        "as_mut": as_mut,
    }


def uniform_array(
    cls: type | None = None,
    *,
    safety_gate: str = "",
    features: Iterable[str] = (),
) -> Any:
    """Make a uniformly typed dataclass indexable by field position.

    Usable as ``@uniform_array`` or ``@uniform_array(safety_gate=..., features=...)``.
    The slice-backed members are added only if ``safety_gate`` is one of the
    enabled ``features``; classes without fields get only the length members.
    """
    enabled = frozenset((features,) if isinstance(features, str) else features)

    def decorate(klass: type) -> type:
        names = uniform_fields(klass)
        gated = bool(names) and safety_gate in enabled

        wanted = list(_CORE_MEMBERS)
        if names:
            wanted.extend(_INDEX_MEMBERS)
        if gated:
            wanted.extend(_GATED_MEMBERS)
        conflicts = [name for name in wanted if name in vars(klass)]
        if conflicts:
            raise UniformArrayError(
                f'Struct "{klass.__name__}" already defines {", ".join(conflicts)}'
            )

        _install(klass, _core_members(names))
        if names:
            _install(klass, _index_members(names))
        if gated:
            _install(klass, _gated_members(klass, names))
        return klass

    if cls is None:
        return decorate
    return decorate(cls)