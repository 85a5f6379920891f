from common.utils import filter_matches, sort_matches
from models.match_model import Match


def _match(mid, home=None, away=None, comp=None, code=None, when=None):
    return Match.from_json({
        "id": mid,
        "utcDate": when,
        "homeTeam": {"id": 1, "name": home} if home else None,
        "awayTeam": {"id": 2, "name": away} if away else None,
        "competition": {"id": 3, "name": comp, "code": code} if comp or code else None,
    })


MATCHES = [
    _match(1, "Chelsea FC", "Arsenal FC", "Premier League", "PL", "2024-05-03T12:00:00Z"),
    _match(2, "Real Madrid CF", "FC Barcelona", "Primera Division", "PD", "2024-05-01T12:00:00Z"),
    _match(3, None, "Chelsea FC", None, None, None),
    _match(4, "Bayern", "Dortmund", "Bundesliga", "BL1", "2024-05-02T12:00:00Z"),
]


def test_short_queries_return_the_same_list():
    assert filter_matches(MATCHES, "") is MATCHES
    assert filter_matches(MATCHES, None) is MATCHES
    assert filter_matches(MATCHES, "a") is MATCHES


def test_case_insensitive_team_search_keeps_order():
    assert [m.id for m in filter_matches(MATCHES, "CHELSEA")] == [1, 3]


def test_search_by_competition_name_and_code():
    assert [m.id for m in filter_matches(MATCHES, "primera")] == [2]
    assert [m.id for m in filter_matches(MATCHES, "bl1")] == [4]


def test_no_hits():
    assert filter_matches(MATCHES, "zz") == []


def test_sort_puts_undated_last():
    assert [m.id for m in sort_matches(MATCHES)] == [2, 4, 1, 3]
    assert [m.id for m in sort_matches(MATCHES, descending=True)] == [1, 4, 2, 3]


def test_non_string_names_are_searchable():
    matches = [
        Match.from_json({"id": 5, "homeTeam": {"name": 1860}, "competition": {"name": "Bundesliga", "code": 2}}),
        Match.from_json({"id": 6, "awayTeam": {"name": ["odd"]}, "competition": {"name": {"x": 1}}}),
    ]

    assert [m.id for m in filter_matches(matches, "bundes")] == [5]
    assert [m.id for m in filter_matches(matches, "1860")] == [5]
    assert filter_matches(matches, "odd") == []
