"""Left join of partners with their solutions on the normalised partner name."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Sequence

from .records import PartnerSolution, RawPartner, RawSolution, Solution


def group_solutions(solutions: Iterable[RawSolution]) -> dict[str, list[Solution]]:
    """Map normalised partner name to its solutions; blank names are skipped."""

    grouped: dict[str, list[Solution]] = defaultdict(list)
    for raw in solutions:
        if not raw.joinable:
            continue
        grouped[raw.join_key].append(Solution.from_raw(raw))
    return dict(grouped)


def join(partners: Sequence[RawPartner], solutions: Iterable[RawSolution]) -> list[PartnerSolution]:
    """Emit one :class:`PartnerSolution` per partner, in input order.

    Duplicate partner names each receive the full matching solution set.
    Solutions whose partner is absent are dropped.
    """

    by_name = group_solutions(solutions)
    joined: list[PartnerSolution] = []
    for partner in partners:
        matches = by_name.get(partner.join_key, ())
        joined.append(
            PartnerSolution(
                partner_name=partner.name,
                partner_id=partner.id,
                partner_level=partner.partner_level,
                partner_type=partner.partner_type,
                short_description=partner.short_description,
                company_overview=partner.company_overview,
                solutions=tuple(matches),
            )
        )
    return joined


__all__ = ["group_solutions", "join"]
