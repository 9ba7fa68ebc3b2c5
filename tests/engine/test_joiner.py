from __future__ import annotations

from partner_directory.engine import RawPartner, RawSolution, Solution, join, normalize_name
from partner_directory.engine.joiner import group_solutions


def _partner(name, pid="P1") -> RawPartner:
    return RawPartner(id=pid, name=name, partner_level="Gold", partner_type="ISV")


def test_join_matches_case_insensitively_and_trimmed() -> None:
    joined = join([_partner("Acme")], [RawSolution(partner_name="ACME ", display_name="Rocket")])
    assert joined[0].solutions == (Solution(display_name="Rocket", short_description=None),)


def test_join_is_left_join_in_partner_order() -> None:
    partners = [_partner("Beta", "P2"), _partner("Alpha", "P1"), _partner("Gamma", "P3")]
    solutions = [
        RawSolution(partner_name="alpha", display_name="A1"),
        RawSolution(partner_name="Nobody", display_name="Dropped"),
        RawSolution(partner_name="Alpha", display_name="A2"),
        RawSolution(partner_name="beta", display_name="B1"),
    ]
    joined = join(partners, solutions)
    assert len(joined) == len(partners)
    assert [item.partner_id for item in joined] == ["P2", "P1", "P3"]
    assert [s.display_name for s in joined[0].solutions] == ["B1"]
    assert [s.display_name for s in joined[1].solutions] == ["A1", "A2"]
    assert joined[2].solutions == ()
    names = {s.display_name for item in joined for s in item.solutions}
    assert "Dropped" not in names


def test_join_solutions_equal_exactly_the_matching_set() -> None:
    partners = [_partner("Acme", "P1"), _partner("Initech", "P2")]
    solutions = [
        RawSolution(partner_name=name, display_name=f"S{i}")
        for i, name in enumerate(["acme", "INITECH", " Acme", "Umbrella", "initech "])
    ]
    for partner, record in zip(partners, join(partners, solutions)):
        expected = [
            s.display_name for s in solutions if normalize_name(s.partner_name) == normalize_name(partner.name)
        ]
        assert [s.display_name for s in record.solutions] == expected


def test_blank_partner_names_never_joined() -> None:
    partners = [_partner("", "P1"), _partner(None, "P2"), _partner("Acme", "P3")]
    solutions = [
        RawSolution(partner_name=None, display_name="None"),
        RawSolution(partner_name="", display_name="Empty"),
        RawSolution(partner_name="   ", display_name="Spaces"),
        RawSolution(partner_name="acme", display_name="Real"),
    ]
    joined = join(partners, solutions)
    assert joined[0].solutions == ()
    assert joined[1].solutions == ()
    assert [s.display_name for s in joined[2].solutions] == ["Real"]
    assert "" not in group_solutions(solutions)


def test_duplicate_partner_names_each_receive_all_matches() -> None:
    partners = [_partner("Acme", "P1"), _partner("acme", "P2")]
    solutions = [RawSolution(partner_name="ACME", display_name="X"), RawSolution(partner_name="Acme", display_name="Y")]
    joined = join(partners, solutions)
    assert len(joined) == 2
    assert joined[0].solutions == joined[1].solutions
    assert len(joined[0].solutions) == 2


def test_join_copies_partner_fields() -> None:
    partner = RawPartner(
        id="P9",
        name="Acme",
        partner_level="Platinum",
        partner_type="ISV",
        short_description="<p>Short</p>",
        company_overview="<div>Long</div>",
    )
    (record,) = join([partner], [])
    assert record.partner_name == "Acme"
    assert record.partner_id == "P9"
    assert record.partner_level == "Platinum"
    assert record.partner_type == "ISV"
    assert record.short_description == "Short"
    assert record.company_overview == "Long"
    assert not record.has_solutions


def test_join_empty_inputs() -> None:
    assert join([], [RawSolution(partner_name="Acme", display_name="X")]) == []
