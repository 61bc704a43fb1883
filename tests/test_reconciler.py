import pytest

from recovery.errors import InsufficientPoints, NoConsensus
from recovery.lagrange import Point
from recovery.numeral import decode
from recovery.reconciler import combinations, reconstruct, subsets, tally


def pts(*pairs):
    return [Point(x, y) for x, y in pairs]


def test_combinations_order():
    assert list(combinations(4, 3)) == [(0, 1, 2), (0, 1, 3), (0, 2, 3), (1, 2, 3)]


def test_combinations_counts():
    assert len(list(combinations(10, 7))) == 120
    assert len(set(combinations(10, 7))) == 120
    assert list(combinations(3, 3)) == [(0, 1, 2)]
    assert list(combinations(2, 3)) == []
    assert list(combinations(3, 0)) == []


def test_subsets_follow_point_order():
    points = pts((1, 1), (2, 2), (3, 3))
    assert [[p.x for p in s] for s in subsets(points, 2)] == [[1, 2], [1, 3], [2, 3]]


def test_all_subsets_agree():
    points = pts((1, 4), (2, 7), (3, 12), (6, 39))
    votes = tally(points, 3)
    assert votes.counts == {3: 4}
    assert votes.evaluated == 4
    assert votes.skipped == 0
    assert reconstruct(points, 3) == 3


def test_majority_outvotes_corrupted_share():
    # f(x) = x^2 + 3x + 5, share 5 is off by one (45 -> 46)
    points = pts((1, 9), (2, 15), (3, 23), (4, 33), (5, 46))
    votes = tally(points, 3)
    assert votes.evaluated == 10
    assert votes.skipped == 3
    assert votes.counts == {5: 4, 6: 2, 11: 1}
    assert votes.winner() == 5


def test_duplicate_abscissa_subsets_are_skipped():
    points = pts((1, 4), (1, 9), (2, 7), (3, 12), (4, 19))
    votes = tally(points, 3)
    assert votes.evaluated == 10
    assert votes.skipped >= 3
    assert votes.winner() == 3


def test_tie_breaks_on_first_seen_candidate():
    assert reconstruct(pts((1, 5), (2, 7), (3, 7), (4, 5)), 1) == 5
    assert reconstruct(pts((1, 7), (2, 5), (3, 5), (4, 7)), 1) == 7


def test_single_subset_is_authoritative():
    assert reconstruct(pts((1, 4), (2, 7), (3, 12)), 3) == 3


def test_insufficient_points():
    with pytest.raises(InsufficientPoints) as exc:
        reconstruct(pts((1, 4), (2, 7)), 3)
    assert exc.value.available == 2
    assert exc.value.k == 3


def test_invalid_threshold():
    with pytest.raises(ValueError):
        reconstruct(pts((1, 4)), 0)


def test_no_consensus_when_nothing_is_integer():
    with pytest.raises(NoConsensus) as exc:
        reconstruct(pts((1, 0), (3, 1)), 2)
    assert exc.value.candidates == 0


def test_no_consensus_when_no_two_subsets_agree():
    with pytest.raises(NoConsensus) as exc:
        reconstruct(pts((1, 1), (2, 5), (3, 2)), 2)
    assert exc.value.subsets_evaluated == 3
    assert exc.value.candidates == 2


LARGE_BASES = [6, 15, 15, 16, 8, 3, 3, 6, 12, 7]
LARGE_COEFFS = [
    79836264049851,
    913421475326754391,
    4817723194481573,
    26457817410992,
    915773028149,
    1283731949,
    7364821,
]


def test_large_base_shares(make_document):
    doc = make_document(LARGE_COEFFS, list(zip(range(1, 11), LARGE_BASES)))
    lengths = [len(doc[str(x)]["value"]) for x in range(1, 11)]
    assert min(lengths) >= 15

    points = [Point(x, decode(int(doc[str(x)]["base"]), doc[str(x)]["value"])) for x in range(1, 11)]
    votes = tally(points, 7)
    assert votes.evaluated == 120
    assert votes.counts == {LARGE_COEFFS[0]: 120}


def test_large_base_shares_with_corruption(make_document):
    doc = make_document(LARGE_COEFFS, list(zip(range(1, 11), LARGE_BASES)), corrupt={9: 12345})
    points = [Point(x, decode(int(doc[str(x)]["base"]), doc[str(x)]["value"])) for x in range(1, 11)]
    votes = tally(points, 7)
    # only the C(9, 7) subsets without share 9 reproduce the secret
    assert votes.counts[LARGE_COEFFS[0]] == 36
    assert votes.winner() == LARGE_COEFFS[0]


def test_huge_values_skip_non_integer_subsets():
    a = 10**5000
    points = pts((1, a + 1), (2, a + 2), (3, a + 3), (4, a + 5))
    votes = tally(points, 2)
    assert votes.skipped == 2
    assert votes.counts == {a: 3, a - 3: 1}
    assert reconstruct(points, 2) == a
