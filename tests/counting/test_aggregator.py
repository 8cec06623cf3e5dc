"""Tests for per-file counting and corpus aggregation."""

import dataclasses

import pytest

from csloc.counting.aggregator import Aggregator, count_lines
from csloc.counting.models import CorpusTotals, FileMetrics, Language

SAMPLE = [
    "/**",
    " * Adds numbers.",
    " */",
    "int add(int a, int b) {",
    "",
    "  // sum them",
    "  return a + b;  // trailing",
    "}",
    "   ",
    "/* unterminated",
]


class TestCountLines:
    def test_counts_each_category(self):
        m = count_lines("add.c", Language.C, SAMPLE)
        assert m.doc_comment_count == 3
        assert m.code_count == 3
        assert m.comment_count == 2
        assert m.blank_count == 2

    def test_total_equals_number_of_lines(self):
        m = count_lines("add.c", Language.C, SAMPLE)
        assert m.total_lines == len(SAMPLE)
        assert (
            m.blank_count + m.comment_count + m.doc_comment_count + m.code_count
            == m.total_lines
        )

    def test_rerun_gives_identical_metrics(self):
        first = count_lines("add.c", Language.C, SAMPLE)
        second = count_lines("add.c", Language.C, SAMPLE)
        assert first == second

    def test_state_does_not_leak_between_files(self):
        count_lines("a.c", Language.C, ["/* never closed"])
        m = count_lines("b.c", Language.C, ["int x;"])
        assert m.code_count == 1
        assert m.comment_count == 0

    def test_block_comment_file_has_no_code(self):
        m = count_lines("c.c", Language.C, ["/* start", "end */"])
        assert m.comment_count == 2
        assert m.code_count == 0

    def test_empty_file(self):
        m = count_lines("empty.h", Language.H, [])
        assert m.total_lines == 0
        assert m.percent(m.code_count) == 0.0

    def test_keeps_path_and_language(self):
        m = count_lines("src/x.hpp", Language.HPP, ["int x;"])
        assert m.path == "src/x.hpp"
        assert m.language is Language.HPP


class TestFileMetrics:
    def test_total_lines_is_derived(self):
        m = FileMetrics("a.c", Language.C, blank_count=1, comment_count=2, doc_comment_count=3, code_count=4)
        assert m.total_lines == 10

    def test_total_lines_cannot_be_passed(self):
        with pytest.raises(TypeError):
            FileMetrics("a.c", Language.C, total_lines=5)

    def test_is_immutable(self):
        m = FileMetrics("a.c", Language.C, code_count=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            m.code_count = 2

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            FileMetrics("a.c", Language.C, code_count=-1)

    def test_percent(self):
        m = FileMetrics("a.c", Language.C, blank_count=1, code_count=3)
        assert m.percent(m.code_count) == pytest.approx(75.0)

    def test_to_dict(self):
        m = FileMetrics("a.cpp", Language.CPP, comment_count=1, code_count=2)
        assert m.to_dict() == {
            "path": "a.cpp",
            "language": "C++",
            "blank_count": 0,
            "comment_count": 1,
            "doc_comment_count": 0,
            "code_count": 2,
            "total_lines": 3,
        }


class TestAggregator:
    def test_preserves_insertion_order(self):
        agg = Aggregator()
        agg.add("z.c", Language.C, ["int z;"])
        agg.add("a.c", Language.C, ["int a;"])
        agg.add("m.h", Language.H, ["int m;"])
        assert [m.path for m in agg] == ["z.c", "a.c", "m.h"]
        assert len(agg) == 3

    def test_totals_are_element_wise_sums(self):
        agg = Aggregator()
        agg.add("a.c", Language.C, ["int a;", "", "// c"])
        agg.add("b.c", Language.C, ["/// d", "int b;", "int c;"])
        totals = agg.totals()
        assert totals == CorpusTotals(
            file_count=2, blank_count=1, comment_count=1, doc_comment_count=1, code_count=3
        )
        assert totals.total_lines == 6

    def test_totals_follow_new_records(self):
        agg = Aggregator()
        agg.add("a.c", Language.C, ["int a;"])
        assert agg.totals().code_count == 1
        agg.record(FileMetrics("b.c", Language.C, code_count=4))
        assert agg.totals().code_count == 5

    def test_files_is_a_snapshot(self):
        agg = Aggregator()
        agg.add("a.c", Language.C, ["int a;"])
        snapshot = agg.files
        agg.add("b.c", Language.C, ["int b;"])
        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    def test_empty_totals(self):
        totals = Aggregator().totals()
        assert totals.file_count == 0
        assert totals.total_lines == 0
        assert totals.percent(0) == 0.0

    def test_sorted_delegates_without_reordering_records(self):
        agg = Aggregator()
        agg.add("a.c", Language.C, ["int a;"])
        agg.add("b.c", Language.C, ["int b;", "int c;"])
        assert [m.path for m in agg.sorted("code_count", descending=True)] == ["b.c", "a.c"]
        assert [m.path for m in agg] == ["a.c", "b.c"]
