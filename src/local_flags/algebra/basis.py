from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, Callable, Optional

from local_flags.flags.base import Flag
from local_flags.utils.canonical import canonical, canonical_typed

if TYPE_CHECKING:
    from local_flags.algebra.operators import MulAndUnlabel
    from local_flags.algebra.qflag import QFlag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Type:
    """
    A labelled flag used as a root for counting extensions.

    flag_cls: the flag class
    size:     number of labelled vertices
    id:       index of the flag in Basis(flag_cls, size).get()
    """

    flag_cls: type
    size: int
    id: int

    @classmethod
    def empty(cls, flag_cls: type) -> "Type":
        return cls(flag_cls, 0, 0)

    @classmethod
    def new(cls, flag_cls: type, size: int, id: int) -> "Type":
        return cls(flag_cls, size, id)

    @classmethod
    def from_flag(cls, flag: Flag) -> "Type":
        """Type whose flag is the canonical form of *flag*."""
        flag_cls = type(flag)
        if flag.size == 0:
            return cls.empty(flag_cls)
        basis = Basis(flag_cls, flag.size)
        return cls(flag_cls, flag.size, basis.index(canonical(flag)))

    @classmethod
    def types_with_size(cls, flag_cls: type, size: int) -> list["Type"]:
        if size == 0:
            return [cls.empty(flag_cls)]
        return [cls(flag_cls, size, i) for i in range(len(Basis(flag_cls, size)))]

    def is_empty(self) -> bool:
        return self.size == 0

    def flag(self) -> Flag:
        if self.size == 0:
            return self.flag_cls.empty()
        return Basis(self.flag_cls, self.size).get()[self.id]

    def print_concise(self) -> str:
        return self.flag().print_concise()

    def __repr__(self) -> str:
        return f"Type({self.flag_cls.name}, size={self.size}, id={self.id})"


@dataclass(frozen=True)
class Basis:
    """
    All flags of *size* vertices rooted at the type *t*.

    The flags are canonical under permutations of the unlabelled vertices,
    and their first t.size vertices induce exactly t.flag().
    """

    flag_cls: type
    size: int
    t: Optional[Type] = field(default=None)

    def __post_init__(self) -> None:
        if self.t is None:
            object.__setattr__(self, "t", Type.empty(self.flag_cls))
        if self.t.flag_cls is not self.flag_cls:
            raise ValueError(f"type {self.t!r} does not belong to {self.flag_cls.name}")
        if self.size < self.t.size:
            raise ValueError(f"basis size {self.size} is smaller than its type ({self.t.size})")

    @classmethod
    def new(cls, flag_cls: type, size: int) -> "Basis":
        return cls(flag_cls, size)

    def with_type(self, t: Type) -> "Basis":
        return Basis(self.flag_cls, self.size, t)

    def get(self) -> list[Flag]:
        return _generate(self.flag_cls, self.size, self.t)

    def __len__(self) -> int:
        return len(self.get())

    def lookup(self, flag: Flag) -> int | None:
        """Index of a flag already in canonical typed form, or None."""
        return _index(self).get(flag)

    def index(self, flag: Flag) -> int:
        i = self.lookup(canonical_typed(flag, self.t.size))
        if i is None:
            raise ValueError(f"{flag!r} is not a flag of {self.print_concise()}")
        return i

    def __mul__(self, other: "Basis") -> "Basis":
        if other.flag_cls is not self.flag_cls or other.t != self.t:
            raise ValueError(f"cannot multiply {self.print_concise()} by {other.print_concise()}")
        return Basis(self.flag_cls, self.size + other.size - self.t.size, self.t)

    def print_concise(self) -> str:
        if self.t.is_empty():
            return f"{self.flag_cls.name}[{self.size}]"
        return f"{self.flag_cls.name}[{self.size}; {{{self.t.print_concise()}}}]"

    # ------------------------------------------------------------------
    # Building vectors
    # ------------------------------------------------------------------

    def qflag_from_coeff(self, f: Callable[[Flag, int], float]) -> "QFlag":
        """Vector whose coefficient on g is f(g, type_size)."""
        from local_flags.algebra.qflag import QFlag

        k = self.t.size
        return QFlag(self, [float(f(g, k)) for g in self.get()])

    def qflag_from_indicator(self, f: Callable[[Flag, int], bool]) -> "QFlag":
        """Vector with coefficient 1 on every g with f(g, type_size), else 0."""
        return self.qflag_from_coeff(lambda g, k: 1.0 if f(g, k) else 0.0)

    from_coeff = qflag_from_coeff
    from_indicator = qflag_from_indicator

    def all_cs(self) -> list["MulAndUnlabel"]:
        """Every Cauchy-Schwarz product that lands in this (untyped) basis.

        One per type of size k with n - k even and k <= n - 2, pairing
        Basis((n + k) / 2, type) with itself.
        """
        from local_flags.algebra.operators import MulAndUnlabel

        if not self.t.is_empty():
            raise ValueError("Cauchy-Schwarz inequalities need an untyped basis")
        n = self.size
        res = []
        for k in range(n % 2, n - 1, 2):
            m = (n + k) // 2
            for t in Type.types_with_size(self.flag_cls, k):
                res.append(MulAndUnlabel(Basis(self.flag_cls, m, t), self))
        return res


@lru_cache(maxsize=None)
def _generate(flag_cls: type, size: int, t: Type) -> list[Flag]:
    """Generate the flags of Basis(flag_cls, size, t) by vertex extension."""
    k = t.size
    layer = {t.flag()}
    for _ in range(size - k):
        nxt: set[Flag] = set()
        for f in layer:
            for g in f.extensions():
                if flag_cls.hereditary and not flag_cls.is_member(g):
                    continue
                nxt.add(canonical_typed(g, k))
        layer = nxt
    flags = sorted(g for g in layer if flag_cls.is_member(g))
    logger.debug("Generated %d flags of %s on %d vertices (type size %d)", len(flags), flag_cls.name, size, k)
    return flags


@lru_cache(maxsize=None)
def _index(basis: Basis) -> dict[Flag, int]:
    return {g: i for i, g in enumerate(basis.get())}
