from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar, final

from .errors import EmptyValueAccess

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Option(Generic[T]):
    """A value of type ``T`` that is either Present or Absent.

    The only variants are :class:`Present` and :class:`Absent`. Every
    combinator is defined for both; callbacks only ever receive a Present
    payload, and any chain collapses to Absent as soon as one operand is
    Absent.

    The eager forms (``and_``, ``or_``, ``unwrap_or``, ``map_or``) take a
    value the caller has already computed. The lazy forms (``and_then``,
    ``or_else``, ``unwrap_or_else``, ``map_or_else``) take a callable that is
    only invoked on the branch that needs it.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("Option has exactly two variants: Present and Absent")

    # -- queries ---------------------------------------------------------

    def is_present(self) -> bool: raise NotImplementedError
    def is_absent(self) -> bool: return not self.is_present()

    def is_present_and(self, predicate: Callable[[T], bool]) -> bool:
        return self.is_present() and bool(predicate(self.value))  # type: ignore[attr-defined]

    # -- combination -----------------------------------------------------

    def and_(self, other: "Option[U]") -> "Option[U]":
        """Returns ``other`` if this option is Present, otherwise Absent.

        ``other`` is evaluated by the caller regardless; use :meth:`and_then`
        when computing it is expensive or has side effects.
        """
        if self.is_present():
            return other
        return ABSENT

    def and_then(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_present():
            return f(self.value)  # type: ignore[attr-defined]
        return ABSENT

    def or_(self, other: "Option[T]") -> "Option[T]":
        """Returns this option if Present, otherwise ``other``.

        ``other`` is evaluated by the caller regardless; use :meth:`or_else`
        to compute the alternative only when needed.
        """
        if self.is_present():
            return self
        return other

    def or_else(self, f: Callable[[], "Option[T]"]) -> "Option[T]":
        if self.is_present():
            return self
        return f()

    def xor(self, other: "Option[T]") -> "Option[T]":
        """Returns whichever option is Present when exactly one of them is.

        Two Present options, like two Absent ones, give Absent.
        """
        if self.is_present() and other.is_absent():
            return self
        if self.is_absent() and other.is_present():
            return other
        return ABSENT

    # -- transformation --------------------------------------------------

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_present():
            return Present(f(self.value))  # type: ignore[attr-defined]
        return ABSENT

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        if self.is_present() and predicate(self.value):  # type: ignore[attr-defined]
            return self
        return ABSENT

    def inspect(self, f: Callable[[T], Any]) -> "Option[T]":
        """Calls ``f`` with the payload for its side effect; returns ``self``."""
        if self.is_present():
            f(self.value)  # type: ignore[attr-defined]
        return self

    # -- extraction ------------------------------------------------------

    def unwrap(self) -> T:
        """Returns the payload.

        Raises:
            EmptyValueAccess: with no message, if the option is Absent.
                Prefer :meth:`unwrap_or`, :meth:`unwrap_or_else` or
                :meth:`expect`.
        """
        if self.is_present():
            return self.value  # type: ignore[attr-defined]
        raise EmptyValueAccess()

    def expect(self, message: str) -> T:
        """Returns the payload, raising ``EmptyValueAccess(message)`` if Absent."""
        if self.is_present():
            return self.value  # type: ignore[attr-defined]
        raise EmptyValueAccess(message)

    def unwrap_or(self, default: T) -> T:
        return self.value if self.is_present() else default  # type: ignore[attr-defined]

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self.value if self.is_present() else f()  # type: ignore[attr-defined]

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return f(self.value) if self.is_present() else default  # type: ignore[attr-defined]

    def map_or_else(self, default_f: Callable[[], U], f: Callable[[T], U]) -> U:
        return f(self.value) if self.is_present() else default_f()  # type: ignore[attr-defined]

    # -- pairing ---------------------------------------------------------

    def zip(self, other: "Option[U]") -> "Option[Tuple[T, U]]":
        if self.is_present() and other.is_present():
            return Present((self.value, other.value))  # type: ignore[attr-defined]
        return ABSENT

    def zip_with(self, other: "Option[U]", f: Callable[[T, U], R]) -> "Option[R]":
        if self.is_present() and other.is_present():
            return Present(f(self.value, other.value))  # type: ignore[attr-defined]
        return ABSENT


@final
@dataclass(frozen=True, repr=False)
class Present(Option[T]):
    value: T
    def is_present(self) -> bool: return True
    def __repr__(self) -> str: return f"Present({self.value!r})"


@final
@dataclass(frozen=True, repr=False)
class Absent(Option[T]):
    def is_present(self) -> bool: return False
    def __repr__(self) -> str: return "Absent"


ABSENT: Option[Any] = Absent()


def present(value: T) -> Option[T]:
    return Present(value)


def absent() -> Option[Any]:
    return ABSENT


def from_nullable(v: Optional[T]) -> Option[T]:
    return Present(v) if v is not None else ABSENT


def to_nullable(o: Option[T]) -> Optional[T]:
    return o.unwrap_or(None)  # type: ignore[arg-type]


def flatten(o: Option[Option[T]]) -> Option[T]:
    """Collapses one level of nesting: ``Present(Present(x))`` -> ``Present(x)``."""
    if o.is_absent():
        return ABSENT
    inner = o.unwrap()
    if not isinstance(inner, Option):
        raise TypeError(f"flatten expects Option[Option[T]], got payload {type(inner).__name__}")
    return inner
