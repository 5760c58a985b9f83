"""Specification pattern – composable boolean rules over a single record.

A composed specification is the *predicate* of a catalog query: one tree of
AND / OR / NOT nodes over single-field leaves, evaluated identically for
counting and for fetching a page.
"""

from __future__ import annotations

import abc
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """Abstract base for specifications – provides operator overloads.

    Subclass this and implement ``is_satisfied_by``.

    Example::

        class InStock(BaseSpecification[Product]):
            def is_satisfied_by(self, candidate: Product) -> bool:
                return candidate.stock > 0

        spec = InStock() & ~IsArchived()
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    def select(self, candidates: Iterable[T]) -> list[T]:
        """Return the candidates that satisfy this specification, in order."""
        return [c for c in candidates if self.is_satisfied_by(c)]

    def count(self, candidates: Iterable[T]) -> int:
        return sum(1 for c in candidates if self.is_satisfied_by(c))

    # Named combinators ------------------------------------------------
    def and_(self, other: "BaseSpecification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)

    def or_(self, other: "BaseSpecification[T]") -> "OrSpecification[T]":
        return OrSpecification(self, other)

    def not_(self) -> "NotSpecification[T]":
        return NotSpecification(self)

    # Operator overloads -----------------------------------------------
    def __and__(self, other: "BaseSpecification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: "BaseSpecification[T]") -> "OrSpecification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        return NotSpecification(self)


Specification = BaseSpecification  # type: ignore[misc]


class AndSpecification(BaseSpecification[T]):
    """Conjunction of two specifications."""

    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)


class OrSpecification(BaseSpecification[T]):
    """Disjunction of two specifications."""

    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) or self._right.is_satisfied_by(candidate)


class NotSpecification(BaseSpecification[T]):
    """Negation of a specification."""

    def __init__(self, spec: BaseSpecification[T]) -> None:
        self._spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._spec.is_satisfied_by(candidate)


class AllOf(BaseSpecification[T]):
    """N-ary conjunction. Short-circuits on the first failing child.

    An empty ``AllOf`` is satisfied by every candidate.
    """

    def __init__(self, *specs: BaseSpecification[T]) -> None:
        self.specs: tuple[BaseSpecification[T], ...] = specs

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(s.is_satisfied_by(candidate) for s in self.specs)

    def __len__(self) -> int:
        return len(self.specs)


class AnyOf(BaseSpecification[T]):
    """N-ary disjunction. Short-circuits on the first passing child.

    An empty ``AnyOf`` is satisfied by nothing.
    """

    def __init__(self, *specs: BaseSpecification[T]) -> None:
        self.specs: tuple[BaseSpecification[T], ...] = specs

    def is_satisfied_by(self, candidate: T) -> bool:
        return any(s.is_satisfied_by(candidate) for s in self.specs)

    def __len__(self) -> int:
        return len(self.specs)


class MatchAll(BaseSpecification[T]):
    """Satisfied by every candidate."""

    def is_satisfied_by(self, candidate: T) -> bool:  # noqa: ARG002
        return True


class LambdaSpecification(BaseSpecification[T]):
    """Wraps a plain callable as a ``Specification``.

    Example::

        heavy = LambdaSpecification(lambda p: p.weight > 50, name="heavy")
        assert heavy.is_satisfied_by(product)
    """

    def __init__(
        self,
        predicate: Callable[[T], bool],
        *,
        name: str = "",
    ) -> None:
        self._predicate = predicate
        self.name: str = name or getattr(predicate, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._predicate(candidate))

    def __repr__(self) -> str:  # pragma: no cover
        return f"LambdaSpecification({self.name!r})"


__all__ = [
    "AllOf",
    "AndSpecification",
    "AnyOf",
    "BaseSpecification",
    "LambdaSpecification",
    "MatchAll",
    "NotSpecification",
    "OrSpecification",
    "Specification",
]
