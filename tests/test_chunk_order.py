"""Tests for chunk filename ordering."""

import logging
import random

from assembly_worker.chunk_order import MALFORMED_ORDER_KEY, order_key, sort_chunks


def test_order_key_first_digit_run() -> None:
    assert order_key("chunk_12.chunk") == 12
    assert order_key("part7_of_9.chunk") == 7
    assert order_key("007.chunk") == 7


def test_order_key_uses_basename_not_directory() -> None:
    assert order_key("/uploads/42/chunk_3.chunk") == 3


def test_order_key_without_digits_is_sentinel() -> None:
    assert order_key("chunk_abc.chunk") == MALFORMED_ORDER_KEY
    assert order_key("/uploads/99/chunk.chunk") == MALFORMED_ORDER_KEY
    assert MALFORMED_ORDER_KEY < order_key("chunk_0.chunk")


def test_sort_chunks_numeric_not_lexical() -> None:
    result = sort_chunks(["chunk_2", "chunk_10", "chunk_1"])
    assert [p.name for p in result] == ["chunk_1", "chunk_2", "chunk_10"]


def test_sort_chunks_malformed_first_and_warns(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="assembly_worker.chunk_order"):
        result = sort_chunks(["chunk_2", "chunk_abc", "chunk_1"])
    assert [p.name for p in result] == ["chunk_abc", "chunk_1", "chunk_2"]
    assert "chunk_abc" in caplog.text


def test_sort_chunks_ties_broken_by_name() -> None:
    result = sort_chunks(["b_1", "a_1", "zzz", "yyy"])
    assert [p.name for p in result] == ["yyy", "zzz", "a_1", "b_1"]


def test_sort_chunks_is_stable_under_resorting() -> None:
    names = [f"chunk_{i}.chunk" for i in range(30)] + ["x.chunk", "y.chunk", "chunk_5b.chunk"]
    random.Random(7).shuffle(names)
    once = sort_chunks(names)
    assert sort_chunks(once) == once
    assert sort_chunks(reversed(once)) == once
