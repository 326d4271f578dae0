"""
Tests for operation counters and the outcome record
"""

import dataclasses

import pytest

from fastmatmul import Matrix, MultiplicationOutcome, OperationCounters, Strategy, multiply


class TestOperationCounters:
    def test_counts_and_reset(self):
        c = OperationCounters()
        c.count_multiplications()
        c.count_multiplications(4)
        c.count_additions(10)
        assert (c.multiplications, c.additions, c.total) == (5, 10, 15)
        c.reset()
        assert (c.multiplications, c.additions) == (0, 0)

    def test_instances_are_independent(self):
        a, b = OperationCounters(), OperationCounters()
        a.count_additions(3)
        assert b.additions == 0


class TestMultiplicationOutcome:
    @pytest.fixture
    def outcome(self):
        a = Matrix.from_grid([[1, 2], [3, 4]])
        b = Matrix.from_grid([[5, 6], [7, 8]])
        return multiply(a, b, Strategy.STRASSEN)

    def test_is_frozen(self, outcome):
        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.additions = 0

    def test_derived_fields(self, outcome):
        assert outcome.total_operations == 12
        assert not outcome.padded

    def test_as_dict_grid(self, outcome):
        d = outcome.as_dict(render="grid")
        assert d["strategy"] == "strassen"
        assert d["result"] == [[19.0, 22.0], [43.0, 50.0]]
        assert d["shape"] == [2, 2]
        assert (d["multiplications"], d["additions"], d["total_operations"]) == (8, 4, 12)
        assert d["original_size"] == d["actual_size"] == 2

    def test_as_dict_text(self, outcome):
        assert outcome.as_dict(render="full")["result"] == "   19.00    22.00\n   43.00    50.00"
        assert outcome.as_dict()["result"] == outcome.result.render_short()

    def test_as_dict_unknown_render(self, outcome):
        with pytest.raises(ValueError):
            outcome.as_dict(render="html")

    def test_padded_flag(self):
        out = MultiplicationOutcome(Matrix(3, 3), 1.0, Strategy.WINOGRAD_STRASSEN, 1, 2, 3, 4)
        assert out.padded
