from streamcompare.algorithms.combinations import count_combinations, k_combinations


def test_pairs_in_index_order() -> None:
    assert list(k_combinations(["a", "b", "c"], 2)) == [("a", "b"), ("a", "c"), ("b", "c")]


def test_triples_of_eight_match_binomial() -> None:
    combos = list(k_combinations(range(8), 3))
    assert len(combos) == 56 == count_combinations(8, 3)
    assert len(set(combos)) == 56
    assert all(a < b < c for a, b, c in combos)


def test_size_larger_than_pool_yields_nothing() -> None:
    assert list(k_combinations([1, 2], 3)) == []
    assert count_combinations(2, 3) == 0


def test_zero_and_negative_sizes() -> None:
    assert list(k_combinations([1, 2, 3], 0)) == [()]
    assert list(k_combinations([1, 2, 3], -1)) == []


def test_size_four_needs_no_special_case() -> None:
    combos = list(k_combinations("abcde", 4))
    assert len(combos) == 5
    assert combos[0] == ("a", "b", "c", "d")


def test_generators_are_independent() -> None:
    first = k_combinations([1, 2, 3], 2)
    second = k_combinations([1, 2, 3], 2)
    assert next(first) == (1, 2)
    assert list(second) == [(1, 2), (1, 3), (2, 3)]
    assert list(first) == [(1, 3), (2, 3)]
