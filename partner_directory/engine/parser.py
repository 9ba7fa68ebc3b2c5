"""Navigation of the upstream JSON envelope.

Both endpoints wrap every record the same way::

    {"total": "563",
     "results": {"assets": [{"contentJson": {"Partners": {"Partner": {...}}}}]}}

Solutions use ``Solutions`` / ``Solution`` as wrapper keys. Any level can be
missing or of the wrong type; such assets are dropped, unknown keys ignored.
"""

from __future__ import annotations

import json
from typing import Any, Iterator

from ..errors import EnvelopeError
from .records import RawPartner, RawSolution

PARTNER_WRAPPER = ("Partners", "Partner")
SOLUTION_WRAPPER = ("Solutions", "Solution")


def _text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    return None


class EnvelopeParser:
    """Turn upstream envelopes into raw partner and solution records."""

    def parse_json(self, payload: str) -> dict[str, Any]:
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise EnvelopeError(f"Malformed JSON body: {exc}") from exc
        if not isinstance(data, dict):
            raise EnvelopeError("Envelope must be a JSON object")
        return data

    def parse_total(self, envelope: dict[str, Any]) -> int | None:
        """Return the advertised record count, or ``None`` when absent or malformed."""

        raw = envelope.get("total")
        if raw is None or isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            return raw if raw >= 0 else None
        if isinstance(raw, float):
            return int(raw) if raw.is_integer() and raw >= 0 else None
        if isinstance(raw, str):
            try:
                value = int(raw.strip())
            except ValueError:
                return None
            return value if value >= 0 else None
        return None

    def extract_partners(self, envelope: dict[str, Any]) -> list[RawPartner]:
        partners: list[RawPartner] = []
        for item in self._iter_records(envelope, PARTNER_WRAPPER):
            partners.append(
                RawPartner(
                    id=_text(item.get("Id")),
                    name=_text(item.get("Name")),
                    partner_level=_text(item.get("PartnerLevel__c")),
                    partner_type=_text(item.get("PartnerType__c")),
                    short_description=_text(item.get("Short_Description")),
                    company_overview=_text(item.get("PartnerCompanyOverview__c")),
                )
            )
        return partners

    def extract_solutions(self, envelope: dict[str, Any]) -> list[RawSolution]:
        solutions: list[RawSolution] = []
        for item in self._iter_records(envelope, SOLUTION_WRAPPER):
            solutions.append(
                RawSolution(
                    partner_name=_text(item.get("solutionpartnername")),
                    display_name=_text(item.get("solutiondisplayname")),
                    short_description=_text(item.get("urlsolutionshortdescription")),
                )
            )
        return solutions

    @staticmethod
    def _iter_records(
        envelope: dict[str, Any], wrapper: tuple[str, str]
    ) -> Iterator[dict[str, Any]]:
        results = envelope.get("results")
        if not isinstance(results, dict):
            return
        assets = results.get("assets")
        if not isinstance(assets, list):
            return
        outer_key, inner_key = wrapper
        for asset in assets:
            if not isinstance(asset, dict):
                continue
            content = asset.get("contentJson")
            if not isinstance(content, dict):
                continue
            outer = content.get(outer_key)
            if not isinstance(outer, dict):
                continue
            record = outer.get(inner_key)
            if isinstance(record, dict):
                yield record


__all__ = ["EnvelopeParser", "PARTNER_WRAPPER", "SOLUTION_WRAPPER"]
