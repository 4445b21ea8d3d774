"""
Test the example value builders used by the demo and documentation.
"""

import datetime

from structclone.examples import (
    build_deep_chain,
    build_matrix,
    build_mutual_cycle,
    build_nested_list,
    build_profile,
    build_self_referencing_list,
    build_shared_rows,
)


def test_matrix():
    assert build_matrix() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert build_matrix(2, 2) == [[1, 2], [3, 4]]


def test_nested_list():
    assert build_nested_list() == [1, 2, 3, 4, [5, 6, 7]]


def test_shared_rows():
    rows = build_shared_rows(3)
    assert len(rows) == 3
    assert rows[0] is rows[1] is rows[2]


def test_self_reference():
    items = build_self_referencing_list()
    assert items[2] is items


def test_mutual_cycle():
    pair = build_mutual_cycle()
    assert pair["left"]["peer"] is pair["right"]
    assert pair["right"]["peer"] is pair["left"]


def test_deep_chain():
    chain = build_deep_chain(2)
    assert chain == [[[0]]]


def test_profile():
    profile = build_profile()
    assert profile["joined"] == datetime.date(2020, 1, 15)
    assert "greet" not in profile

    with_callable = build_profile(include_callable=True)
    assert with_callable["greet"]() == "Hello, Ada"
