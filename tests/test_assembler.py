"""ResultAssembler, percentages and the relationship matrix."""

import json

import pytest

from millops.services.transitions.assembler import ResultAssembler, percentage
from millops.services.transitions.grouping import GroupingDimension
from millops.services.transitions.matrix import build_matrix
from millops.services.transitions.ranker import Transition


class TestPercentage:

    @pytest.mark.parametrize("count, total, expected", [
        (1, 3, 33.3),
        (2, 3, 66.7),
        (1, 8, 12.5),
        (1, 16, 6.3),     # 6.25 rounds half-up
        (1, 400, 0.3),    # 0.25 rounds half-up
        (3, 3, 100.0),
        (0, 5, 0.0),
    ])
    def test_rounding(self, count, total, expected):
        assert percentage(count, total) == expected

    def test_zero_total(self):
        assert percentage(0, 0) == 0.0


class TestAssemble:

    def test_rows_and_other(self):
        kept = [Transition("X", "X", 1)]
        other = Transition("other", "other", 2)
        result = ResultAssembler.assemble(
            GroupingDimension.REASON, kept, other, total=3, distinct_nodes=3,
        )
        body = result.to_dict()
        assert body["grouping"] == "reason"
        assert body["totalTransitions"] == 3
        assert body["distinctNodeCount"] == 3
        assert body["transitions"] == [
            {"from": "X", "to": "X", "count": 1, "percentage": 33.3},
        ]
        assert body["other"] == {"count": 2, "percentage": 66.7}
        assert "eventPairs" not in body
        assert [r.count for r in result.rows] == [1, 2]

    def test_no_other_key_when_not_truncated(self):
        kept = [Transition("X", "Y", 1)]
        body = ResultAssembler.assemble(
            GroupingDimension.CATEGORY, kept, None, total=1, distinct_nodes=2,
        ).to_dict()
        assert "other" not in body
        assert body["grouping"] == "category"

    def test_zero_total_is_empty(self):
        result = ResultAssembler.assemble(
            GroupingDimension.EQUIPMENT, [], None, total=0, distinct_nodes=0,
        )
        assert result.to_dict() == {
            "grouping": "equipment",
            "totalTransitions": 0,
            "distinctNodeCount": 0,
            "transitions": [],
            "matrix": {"rows": [], "cols": [], "data": []},
        }

    def test_empty_with_pairs(self):
        body = ResultAssembler.empty(GroupingDimension.REASON, with_pairs=True).to_dict()
        assert body["eventPairs"] == []

    def test_serializes_to_json(self):
        result = ResultAssembler.assemble(
            GroupingDimension.REASON, [Transition("X", "Y", 2)], None,
            total=2, distinct_nodes=2,
        )
        assert json.loads(json.dumps(result.to_dict()))["transitions"][0]["percentage"] == 100.0


class TestMatrix:

    COUNTS = {
        ("A", "B"): 4,
        ("A", "C"): 1,
        ("B", "C"): 3,
        ("C", "A"): 2,
    }

    def test_full_matrix(self):
        matrix = build_matrix(self.COUNTS, top_n=10)
        # outgoing totals: A=5, B=3, C=2 ; incoming: C=4, B=4, A=2
        assert matrix.rows == ["A", "B", "C"]
        assert matrix.cols == ["B", "C", "A"]
        assert matrix.data == [
            [4, 1, 0],
            [0, 3, 0],
            [0, 0, 2],
        ]

    def test_matrix_limited_to_top_n(self):
        matrix = build_matrix(self.COUNTS, top_n=2)
        assert matrix.rows == ["A", "B"]
        assert matrix.cols == ["B", "C"]
        assert matrix.data == [[4, 1], [0, 3]]

    def test_empty_counts(self):
        assert build_matrix({}, top_n=5).to_dict() == {"rows": [], "cols": [], "data": []}
