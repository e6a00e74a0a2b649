import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from secret_recovery.errors import (
    DecodeError,
    InsufficientSharesError,
    InvalidThresholdError,
    MalformedRecordError,
    MissingSourceError,
    NonIntegralSecretError,
)
from secret_recovery.records import (
    Point,
    RawShare,
    TestCase,
    decode_points,
    find_constant_term,
    load_record,
    parse_test_case,
    select_points,
)

REFERENCE_RECORD = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


def test_reference_record():
    # points (1,4), (2,7), (3,12) lie on x**2 + 3
    assert find_constant_term(REFERENCE_RECORD) == 3
    assert find_constant_term(REFERENCE_RECORD, division="exact") == 3


def test_parse_test_case_collects_shares():
    case = parse_test_case(REFERENCE_RECORD)
    assert (case.n, case.k) == (4, 3)
    assert case.shares[6] == RawShare(base="4", value="213")
    assert set(case.shares) == {1, 2, 3, 6}


def test_parse_ignores_non_index_keys():
    record = dict(REFERENCE_RECORD, comment="ignored", **{"01": "odd", "0": 5})
    assert set(parse_test_case(record).shares) == {1, 2, 3, 6}


def test_decode_points_skips_absent_and_out_of_range():
    case = parse_test_case(
        {
            "keys": {"n": 5, "k": 2},
            "5": {"base": "16", "value": "ff"},
            "2": {"base": "10", "value": "9"},
            "9": {"base": "10", "value": "1"},
        }
    )
    assert decode_points(case) == [Point(2, 9), Point(5, 255)]


def test_select_points_takes_lowest_indices():
    points = [Point(1, 1), Point(3, 3), Point(4, 4)]
    assert select_points(points, 2) == [Point(1, 1), Point(3, 3)]


def test_accepts_parsed_test_case():
    case = TestCase(n=2, k=1, shares={2: RawShare("10", "77")})
    assert find_constant_term(case) == 77


def test_single_share_returns_value():
    record = {"keys": {"n": 3, "k": 1}, "3": {"base": "16", "value": "1A"}}
    assert find_constant_term(record) == 26


def test_counts_may_be_strings():
    record = dict(REFERENCE_RECORD, keys={"n": "4", "k": "3"})
    assert find_constant_term(record) == 3


def test_threshold_greater_than_n():
    with pytest.raises(InvalidThresholdError) as excinfo:
        find_constant_term({"keys": {"n": 2, "k": 3}})
    assert (excinfo.value.n, excinfo.value.k) == (2, 3)


def test_zero_threshold_is_invalid():
    with pytest.raises(InvalidThresholdError):
        find_constant_term({"keys": {"n": 2, "k": 0}})


def test_insufficient_shares():
    record = {"keys": {"n": 4, "k": 3}, "1": {"base": "10", "value": "1"}, "4": {"base": "10", "value": "2"}}
    with pytest.raises(InsufficientSharesError) as excinfo:
        find_constant_term(record)
    assert (excinfo.value.required, excinfo.value.available) == (3, 2)


def test_shares_beyond_n_do_not_count():
    record = {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "10", "value": "1"},
        "3": {"base": "10", "value": "2"},
    }
    with pytest.raises(InsufficientSharesError):
        find_constant_term(record)


def test_bad_value_raises_decode_error():
    record = dict(REFERENCE_RECORD)
    record["2"] = {"base": "2", "value": "121"}
    with pytest.raises(DecodeError) as excinfo:
        find_constant_term(record)
    assert excinfo.value.value == "121"
    assert excinfo.value.base == "2"


def test_exact_mode_surfaces_non_integral_secret():
    record = {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "1"},
        "2": {"base": "10", "value": "0"},
        "4": {"base": "10", "value": "0"},
    }
    assert find_constant_term(record) == 2
    with pytest.raises(NonIntegralSecretError):
        find_constant_term(record, division="exact")


@pytest.mark.parametrize(
    "record",
    [
        [],
        {},
        {"keys": []},
        {"keys": {"k": 1}},
        {"keys": {"n": 1}},
        {"keys": {"n": "one", "k": 1}},
        {"keys": {"n": True, "k": 1}},
        {"keys": {"n": 1, "k": 1}, "1": "10:4"},
        {"keys": {"n": 1, "k": 1}, "1": {"value": "4"}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": 4}},
    ],
)
def test_malformed_records(record):
    with pytest.raises(MalformedRecordError):
        find_constant_term(record)


def test_load_record(tmp_path):
    path = tmp_path / "case.json"
    path.write_text(json.dumps(REFERENCE_RECORD), encoding="utf-8")
    assert load_record(path) == REFERENCE_RECORD
    assert load_record(str(path)) == REFERENCE_RECORD


def test_load_record_missing(tmp_path):
    missing = tmp_path / "missing.json"
    with pytest.raises(MissingSourceError) as excinfo:
        load_record(missing)
    assert excinfo.value.path == str(missing)


def test_load_record_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(MalformedRecordError):
        load_record(path)


def test_result_independent_of_key_order():
    reordered = {key: REFERENCE_RECORD[key] for key in reversed(list(REFERENCE_RECORD))}
    assert find_constant_term(reordered) == find_constant_term(REFERENCE_RECORD)
    assert find_constant_term(REFERENCE_RECORD) == find_constant_term(REFERENCE_RECORD)


@given(st.integers(min_value=1, max_value=50), st.integers(min_value=1, max_value=50))
def test_threshold_invariant(n, extra):
    with pytest.raises(InvalidThresholdError):
        find_constant_term({"keys": {"n": n, "k": n + extra}, "1": {"base": "10", "value": "1"}})


@given(st.data())
def test_insufficiency_invariant(data):
    n = data.draw(st.integers(min_value=1, max_value=30))
    k = data.draw(st.integers(min_value=1, max_value=n))
    present = data.draw(st.sets(st.integers(min_value=1, max_value=n), max_size=k - 1))
    record = {"keys": {"n": n, "k": k}}
    for x in present:
        record[str(x)] = {"base": "10", "value": str(x)}
    with pytest.raises(InsufficientSharesError):
        find_constant_term(record)


@given(st.permutations(["keys", "1", "2", "3", "6"]))
def test_selection_determinism(order):
    record = {key: REFERENCE_RECORD[key] for key in order}
    assert find_constant_term(record) == 3


def test_entries_beyond_n_are_not_inspected():
    record = {"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "5"}, "5": "junk"}
    assert find_constant_term(record) == 5
    assert set(parse_test_case(record).shares) == {1}


def test_huge_n_with_sparse_shares():
    record = {
        "keys": {"n": "9" * 5000, "k": "2"},
        "1": {"base": "10", "value": "5"},
        "3": {"base": "16", "value": "b"},
    }
    assert find_constant_term(record) == 2


def test_threshold_message_with_huge_counts():
    with pytest.raises(InvalidThresholdError, match="cannot be greater than"):
        find_constant_term({"keys": {"n": "1", "k": "9" * 5000}})


@pytest.mark.parametrize("count", ["1_0", " 4", "4 ", "4.0", ""])
def test_counts_use_strict_decimal_strings(count):
    with pytest.raises(MalformedRecordError):
        find_constant_term({"keys": {"n": count, "k": 1}, "1": {"base": "10", "value": "1"}})


def test_load_record_not_utf8(tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes(b"{\"keys\": \xff}")
    with pytest.raises(MalformedRecordError):
        load_record(path)
