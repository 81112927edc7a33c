import pytest

from storymatch.matching import SimilarityMatrix, build_similarity_matrix, jaccard_similarity, pair_key


def test_jaccard_value():
    assert jaccard_similarity({"a", "b", "c"}, {"b", "c", "d"}) == pytest.approx(0.5)


def test_jaccard_edge_cases():
    assert jaccard_similarity(set(), set()) == 1
    assert jaccard_similarity({"a"}, set()) == 0
    assert jaccard_similarity(set(), {"a"}) == 0
    assert jaccard_similarity({"a", "b"}, {"c", "d"}) == 0


def test_jaccard_identity_and_symmetry():
    a = {"storm", "sto", "tor", "orm"}
    b = {"storm", "coast", "sto"}
    assert jaccard_similarity(a, a) == 1
    assert jaccard_similarity(a, b) == jaccard_similarity(b, a)
    assert 0.0 <= jaccard_similarity(a, b) <= 1.0


def test_pair_key_is_order_independent():
    assert pair_key("item_2", "item_10") == pair_key("item_10", "item_2")
    assert pair_key("b", "a") == ("a", "b")


def test_matrix_lookup_is_order_independent():
    matrix = SimilarityMatrix({("b", "a"): 0.4})
    assert matrix.get("a", "b") == 0.4
    assert matrix.get("b", "a") == 0.4
    assert ("a", "b") in matrix
    assert ("b", "a") in matrix


def test_matrix_unknown_pair_scores_zero():
    matrix = SimilarityMatrix({})
    assert matrix.get("a", "b") == 0.0
    assert matrix.get("a", "a") == 1.0


def test_build_records_every_pair_including_zero_scores():
    fingerprints = {
        "x": frozenset({"a", "b"}),
        "y": frozenset({"c"}),
        "z": frozenset({"a", "b", "c"}),
    }
    matrix = build_similarity_matrix(fingerprints)

    assert len(matrix) == 3
    assert ("x", "y") in matrix
    assert matrix.get("x", "y") == 0.0
    assert matrix.get("x", "z") == pytest.approx(2 / 3)
    assert matrix.get("z", "y") == pytest.approx(1 / 3)


def test_matrix_is_read_only():
    matrix = build_similarity_matrix({"x": frozenset({"a"}), "y": frozenset({"a"})})
    with pytest.raises(TypeError):
        matrix._scores[("x", "y")] = 0.0
