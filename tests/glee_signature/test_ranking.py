# -*- coding: utf-8 -*-
"""编辑距离、排序与截断测试"""

from glee.glee_signature.function_record import RankedResult
from glee.glee_signature.ranking import edit_distance
from glee.glee_signature.ranking import rank
from glee.glee_signature.ranking import truncate


class TestEditDistance:
    """测试 Levenshtein 距离"""

    def test_identical(self):
        for s in ["", "a", "( int ) -> ( bool )"]:
            assert edit_distance(s, s) == 0

    def test_single_change(self):
        assert edit_distance("kitten", "kitton") == 1
        assert edit_distance("kitten", "kittens") == 1
        assert edit_distance("kitten", "itten") == 1

    def test_known_values(self):
        assert edit_distance("kitten", "sitting") == 3
        assert edit_distance("", "abc") == 3
        assert edit_distance("abc", "") == 3
        assert edit_distance("flaw", "lawn") == 2

    def test_symmetric(self):
        assert edit_distance("abcdef", "azced") == edit_distance("azced", "abcdef")


class TestRank:
    """测试排序"""

    def test_exact_signature_first(self, make_record):
        records = [
            make_record(args=["string"], rets=["int"], name="Other"),
            make_record(args=["int", "string"], rets=["bool", "error"], name="Foo"),
        ]
        ranked = rank(records, "( int, string ) -> ( bool, error )")
        assert ranked[0].record.name == "Foo"
        assert ranked[0].distance == 0

    def test_stable_ties(self, make_record):
        first = make_record(args=["int"], name="first")
        second = make_record(args=["int"], name="second")
        far = make_record(args=["map[string]interface{}"], name="far")
        ranked = rank([far, first, second], "( int ) -> (  )")
        assert [r.record.name for r in ranked] == ["first", "second", "far"]
        assert ranked[0].distance == ranked[1].distance

    def test_empty(self):
        assert rank([], "(int) -> (bool)") == []


def _results(distances, make_record):
    return [
        RankedResult(record=make_record(name=str(i)), distance=d)
        for i, d in enumerate(distances)
    ]


class TestTruncate:
    """测试截断启发式"""

    def test_stops_after_index_eleven_when_far(self, make_record):
        results = _results([40] * 15, make_record)
        emitted = list(truncate(results))
        # 索引 11（第12项）触发截断且自身被输出
        assert len(emitted) == 12
        assert emitted[-1] is results[11]

    def test_close_results_not_truncated(self, make_record):
        results = _results([5] * 20, make_record)
        assert len(list(truncate(results))) == 20

    def test_stops_at_first_far_entry_after_index_ten(self, make_record):
        results = _results([1] * 14 + [31, 40, 50], make_record)
        emitted = list(truncate(results))
        assert len(emitted) == 15
        assert emitted[-1].distance == 31

    def test_threshold_is_strict(self, make_record):
        results = _results([30] * 13, make_record)
        assert len(list(truncate(results))) == 13

    def test_short_list(self, make_record):
        results = _results([100] * 5, make_record)
        assert len(list(truncate(results))) == 5
