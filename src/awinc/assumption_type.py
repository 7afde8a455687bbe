"""Alternative numbering.

Alternatives ``1 .. num_trustees`` are Trustees Report alternatives whose
values live in the assumption store. The numbers after them (starting at
``flat``) name other kinds of assumptions (flat, other, specified) whose
values are supplied elsewhere in the engine; the store only knows their
titles.
"""

from dataclasses import dataclass

from .published import PublishedAssumptions
from .series import RangeError

DEFAULT_NON_TR_TITLES = (
    "Flat average wage increases",
    "Average wage increases from other assumptions",
    "Average wage increases from specified assumptions",
)


@dataclass(frozen=True)
class AssumptionType:
    """Which alternative numbers are Trustees Report alternatives."""

    num_trustees: int
    non_tr_titles: tuple[str, ...] = DEFAULT_NON_TR_TITLES

    @classmethod
    def for_published(
        cls,
        published: PublishedAssumptions,
        non_tr_titles: tuple[str, ...] = DEFAULT_NON_TR_TITLES,
    ) -> "AssumptionType":
        return cls(num_trustees=published.num_alternatives, non_tr_titles=non_tr_titles)

    @property
    def flat(self) -> int:
        """First non-Trustees-Report alternative number."""
        return self.num_trustees + 1

    @property
    def max_alt_num(self) -> int:
        return self.num_trustees + len(self.non_tr_titles)

    def is_tr(self, alt_num: int) -> bool:
        return 1 <= alt_num <= self.num_trustees

    def is_not_tr(self, alt_num: int) -> bool:
        return self.num_trustees < alt_num <= self.max_alt_num

    def check(self, alt_num: int) -> None:
        if not 1 <= alt_num <= self.max_alt_num:
            raise RangeError(f"alternative {alt_num} outside 1-{self.max_alt_num}")

    def non_tr_title(self, alt_num: int) -> str:
        if not self.is_not_tr(alt_num):
            raise RangeError(f"alternative {alt_num} is not a non-Trustees-Report alternative")
        return self.non_tr_titles[alt_num - self.flat]
