import logging
import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar

from utm.constants import SEPARATOR
from utm.exceptions import UnsupportedTypeException

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UnsignedInt(int):
    """
    An int that can not be negative. Marks a value as unsigned for route_type,
    plain ints are routed as signed.
    """

    def __new__(cls, value: Any = 0):
        number = super().__new__(cls, value)
        if number < 0:
            raise ValueError(f"{cls.__name__} can not be negative, got {int(number)}")
        return number


class Option(ABC):
    @abstractmethod
    def render(self) -> str:
        """
        Returns the contribution of this option to the serialized string.
        Empty when the option has nothing to emit.
        """

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, repr=False)
class ScalarOption(Option, Generic[T]):
    """
    A single valued option, omitted from the output while its value equals
    the default.

    equals and to_text must match the type of value. They are stored as
    given, so a new scalar type only needs a new constructor supplying them.
    """

    param: str
    value: T
    default_value: T
    equals: Callable[[T, T], bool]
    to_text: Callable[[T], str]

    def render(self) -> str:
        if self.equals(self.value, self.default_value):
            return ""
        return f"{self.param}{SEPARATOR}{self.to_text(self.value)}{SEPARATOR}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.param}, {self.value!r})"


@dataclass(frozen=True, repr=False)
class StringArray(Option):
    """
    Emits the param once for every value, in order. There is no default, an
    empty array emits nothing.

    values takes any iterable of str except a bare str, which would be split
    into characters.
    """

    param: str
    values: tuple[str, ...] = ()

    def __post_init__(self):
        if isinstance(self.values, str):
            raise UnsupportedTypeException(type(self.values).__name__, self.param)
        object.__setattr__(self, "values", tuple(self.values))

    def render(self) -> str:
        return "".join(
            f"{self.param}{SEPARATOR}{value}{SEPARATOR}" for value in self.values
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.param}, {list(self.values)!r})"


def _decimal(value: int) -> str:
    return format(int(value), "d")


def _identity(value: str) -> str:
    return value


def uint_option(
    param: str, value: int, default_value: int = 0
) -> ScalarOption[int]:
    """
    value and default_value are not checked, pass UnsignedInt or non-negative
    ints. A negative int is formatted with its sign.
    """
    return ScalarOption(param, value, default_value, operator.eq, _decimal)


def int_option(param: str, value: int, default_value: int = 0) -> ScalarOption[int]:
    return ScalarOption(param, value, default_value, operator.eq, _decimal)


def string_option(
    param: str, value: str, default_value: str = ""
) -> ScalarOption[str]:
    return ScalarOption(param, value, default_value, operator.eq, _identity)


# (value type, accepted default type, constructor). Order matters,
# UnsignedInt is an int and has to be matched first.
# New scalar types need an entry here.
SCALAR_HANDLERS = (
    (UnsignedInt, int, uint_option),
    (str, str, string_option),
    (int, int, int_option),
)


def _is_string_array(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(
        isinstance(item, str) for item in value
    )


def route_type(param: str, value: Any, default_value: Any) -> Option:
    """
    Builds the option matching the type of value.

    Supported types are str, UnsignedInt, int and a list or tuple of str.
    The default of a scalar must be of the same kind as its value, an
    unsigned value also needs a non-negative default. The default of an
    array is ignored.

    Raises:
        UnsupportedTypeException: If value, or the default of a scalar, has
                                  any other type. bool is not an int here.
    """
    if _is_string_array(value):
        logger.debug(f"Routing {param} to {StringArray.__name__}")
        return StringArray(param, value)

    if not isinstance(value, bool):
        for value_type, default_type, handler in SCALAR_HANDLERS:
            if not isinstance(value, value_type):
                continue
            if isinstance(default_value, bool) or not isinstance(
                default_value, default_type
            ):
                raise UnsupportedTypeException(type(default_value).__name__, param)
            if value_type is UnsignedInt and default_value < 0:
                raise UnsupportedTypeException(type(default_value).__name__, param)
            logger.debug(f"Routing {param} to {handler.__name__}")
            return handler(param, value, default_value)

    raise UnsupportedTypeException(type(value).__name__, param)


def make_options(values: Iterable[tuple[str, Any, Any]]) -> list[Option]:
    """
    Routes every (param, value, default) triple, keeping their order.
    """
    return [route_type(param, value, default) for param, value, default in values]
