import pytest

from algokit.strings import (
    all_unique,
    all_unique_sorted,
    insertion_sorted,
    remove_duplicates,
)

SAMPLE = "acazergkpjzhpkjrhtezmlkrjtmlzekjrmlkdb"


def test_sample_has_duplicates():
    assert all_unique(SAMPLE) is False
    assert all_unique_sorted(SAMPLE) is False


@pytest.mark.parametrize("text", ["", "a", "abc", "aa", "abca", "xyzq", SAMPLE])
def test_both_checks_agree(text):
    assert all_unique(text) == all_unique_sorted(text)
    assert all_unique(text) == (len(set(text)) == len(text))


@pytest.mark.parametrize("text", ["", "b", "dcba", SAMPLE, "zzaayy"])
def test_insertion_sort_sorts(text):
    assert insertion_sorted(text) == "".join(sorted(text))


def test_remove_duplicates_single():
    assert remove_duplicates("a") == "a"


def test_remove_duplicates_invariants():
    result = remove_duplicates(SAMPLE)
    assert all_unique(result)
    assert set(result) == set(SAMPLE)
    assert sorted(result, key=SAMPLE.index) == list(result)


def test_remove_duplicates_keeps_unique_text():
    assert remove_duplicates("abcdef") == "abcdef"