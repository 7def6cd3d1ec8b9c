"""Property selection for configuration objects.

A selector names one property of a configuration object. It is either
the attribute name itself or a callable doing a single attribute access
on its argument::

    accessor = PropertyAccessor(config)
    accessor.get_name_and_value(lambda c: c.some_name)   # ("some_name", "...")
    accessor.get_name_and_value("some_name")             # same

Plain functions must compile to exactly one attribute load on their
single argument. Other callables, such as ``operator.attrgetter``, are
resolved against a recording probe instead of the real object.
"""

from __future__ import annotations

import dis
import inspect
from collections.abc import Callable
from types import FunctionType
from typing import Any, Generic, TypeVar, Union

from configuration_validation.exceptions import InvalidSelectorError

__all__ = ["PropertySelector", "PropertyAccessor", "resolve_member_name"]

TConfig = TypeVar("TConfig")

PropertySelector = Union[str, Callable[[Any], Any]]

_SELECTOR_HINT = (
    "Can validate only configuration member expressions. "
    "Please use configuration property in form lambda c: c.property"
)


class _MemberAccess:
    """Result of reading an attribute from a probe."""

    __slots__ = ("_member_name", "_member_depth")

    def __init__(self, name: str, depth: int) -> None:
        self._member_name = name
        self._member_depth = depth

    def __getattr__(self, name: str) -> _MemberAccess:
        return _MemberAccess(name, self._member_depth + 1)

    def __bool__(self) -> bool:
        raise TypeError("member access used as a condition")

    def __iter__(self) -> Any:
        raise TypeError("member access used as an iterable")

    __hash__ = None  # type: ignore[assignment]


# Bookkeeping opcodes emitted around a function body on some interpreters
_IGNORED_OPCODES = frozenset({"RESUME", "NOP", "CACHE", "EXTENDED_ARG", "COPY_FREE_VARS"})


def _member_from_bytecode(selector: FunctionType) -> str:
    code = selector.__code__
    variadic = code.co_flags & (inspect.CO_VARARGS | inspect.CO_VARKEYWORDS)
    if code.co_argcount != 1 or code.co_kwonlyargcount or variadic:
        raise InvalidSelectorError(_SELECTOR_HINT)

    instructions = [
        (ins.opname, ins.argval)
        for ins in dis.get_instructions(code)
        if ins.opname not in _IGNORED_OPCODES
    ]
    if len(instructions) != 3:
        raise InvalidSelectorError(_SELECTOR_HINT)

    (load, argument), (attribute, name), (ret, _) = instructions
    if (
        not load.startswith("LOAD_FAST")
        or argument != code.co_varnames[0]
        or attribute != "LOAD_ATTR"
        or ret != "RETURN_VALUE"
        or not isinstance(name, str)
    ):
        raise InvalidSelectorError(_SELECTOR_HINT)
    return name


class _SelectorProbe:
    """Stand-in for the configuration object while resolving a selector."""

    __slots__ = ()

    def __getattr__(self, name: str) -> _MemberAccess:
        return _MemberAccess(name, 1)


def resolve_member_name(selector: PropertySelector) -> str:
    """Get the property name a selector points to.

    Args:
        selector: Attribute name or callable such as ``lambda c: c.name``.

    Returns:
        The selected property name.

    Raises:
        InvalidSelectorError: If the selector is not a direct member access.
    """
    if isinstance(selector, str):
        if not selector.isidentifier():
            raise InvalidSelectorError(f"{selector!r} is not a property name. {_SELECTOR_HINT}")
        return selector

    if not callable(selector):
        raise InvalidSelectorError(f"{selector!r} is not a selector. {_SELECTOR_HINT}")

    if isinstance(selector, FunctionType):
        return _member_from_bytecode(selector)

    try:
        selected = selector(_SelectorProbe())
    except Exception as e:
        raise InvalidSelectorError(_SELECTOR_HINT) from e

    if not isinstance(selected, _MemberAccess) or selected._member_depth != 1:
        raise InvalidSelectorError(_SELECTOR_HINT)
    return selected._member_name


class PropertyAccessor(Generic[TConfig]):
    """Reads named properties of one configuration instance.

    Reading is side-effect free. Malformed selectors raise
    ``InvalidSelectorError`` and missing properties raise
    ``AttributeError``, neither is turned into a validation failure.
    """

    def __init__(self, instance: TConfig) -> None:
        self._instance = instance

    @property
    def instance(self) -> TConfig:
        """The configuration object being read."""
        return self._instance

    def get_name_and_value(self, selector: PropertySelector) -> tuple[str, Any]:
        """Get the selected property's name and current value."""
        name = resolve_member_name(selector)
        return name, getattr(self._instance, name)
