"""Tests for the structural metrics counter."""

import pytest

from complex_lint.config import AnalysisConfig
from complex_lint.metrics import StructuralCounter, StructuralMetrics, count_structure


def _count(function_body, statements):
    return count_structure(function_body(statements))


class TestEmptyBodies:
    def test_empty_body(self, function_body):
        assert _count(function_body, "") == StructuralMetrics(0, 0, 0)

    def test_missing_body(self):
        assert count_structure(None) == StructuralMetrics(0, 0, 0)


class TestBranchingFactor:
    """Each decision construct counts once."""

    def test_loop_with_two_nested_conditionals(self, function_body):
        metrics = _count(
            function_body,
            """
	for _, x := range xs {
		if x > 0 {
			if x > 10 {
				return
			}
		}
	}
""",
        )
        assert metrics.branching_factor == 3
        assert metrics.operational_complexity == 2

    def test_if_else_is_one(self, function_body):
        metrics = _count(function_body, "if ok {\n\treturn\n} else {\n\treturn\n}")
        assert metrics.branching_factor == 1

    def test_else_if_chain_counts_each_if(self, function_body):
        metrics = _count(function_body, "if a {\n} else if b {\n} else {\n}")
        assert metrics.branching_factor == 2

    def test_switch_with_many_cases_is_one(self, function_body):
        metrics = _count(
            function_body,
            """
	switch v {
	case 1:
	case 2:
	case 3:
	case 4:
	default:
	}
""",
        )
        assert metrics.branching_factor == 1

    def test_type_switch(self, function_body):
        metrics = _count(function_body, "switch x.(type) {\ncase int:\ncase string:\n}")
        assert metrics.branching_factor == 1

    def test_counted_loop(self, function_body):
        metrics = _count(function_body, "for i := 0; i < n; i++ {\n}")
        assert metrics.branching_factor == 1
        assert metrics.operational_complexity == 2
        assert metrics.local_assignment_count == 1

    def test_select_is_not_a_branch_by_default(self, function_body):
        metrics = _count(function_body, "select {\ncase <-done:\ndefault:\n}")
        assert metrics.branching_factor == 0


class TestOperationalComplexity:
    """Binary operations, calls and assignments, nested ones included."""

    def test_nested_expression(self, function_body):
        metrics = _count(function_body, "x := f(a+b) * g(c)")
        assert metrics.operational_complexity == 5
        assert metrics.local_assignment_count == 1

    def test_compound_assignment(self, function_body):
        metrics = _count(function_body, "total += v")
        assert metrics.operational_complexity == 1
        assert metrics.local_assignment_count == 1

    def test_multi_assignment_is_one_statement(self, function_body):
        metrics = _count(function_body, "a, b = b, a")
        assert metrics.operational_complexity == 1
        assert metrics.local_assignment_count == 1

    def test_increment_and_var_declaration_not_counted(self, function_body):
        metrics = _count(function_body, "var n int\nn++")
        assert metrics == StructuralMetrics(0, 0, 0)

    def test_function_literals_are_traversed(self, function_body):
        metrics = _count(function_body, "go func() {\n\ty = y + 1\n}()")
        assert metrics.operational_complexity == 3
        assert metrics.local_assignment_count == 1

    def test_logical_operators_are_binary(self, function_body):
        metrics = _count(function_body, "ok := a > 0 && b < 10")
        assert metrics.operational_complexity == 4

    def test_composite_type_conversion_is_an_operation(self, function_body):
        metrics = _count(function_body, "b := []byte(s)")
        assert metrics.operational_complexity == 2
        assert metrics.local_assignment_count == 1

    def test_conversions_count_like_calls(self, function_body):
        metrics = _count(function_body, "b := []byte(s)\nn := int64(k)")
        assert metrics.operational_complexity == 4
        assert metrics.local_assignment_count == 2


class TestImplicitBindings:
    """Bindings in type switch headers and select cases are assignments."""

    def test_type_switch_binding(self, function_body):
        metrics = _count(function_body, "switch v := x.(type) {\ncase int:\n\t_ = v\n}")
        assert metrics == StructuralMetrics(1, 2, 2)

    def test_type_switch_without_binding(self, function_body):
        metrics = _count(function_body, "switch x.(type) {\ncase int:\n}")
        assert metrics == StructuralMetrics(1, 0, 0)

    def test_select_receive_binding(self, function_body):
        metrics = _count(function_body, "select {\ncase v := <-ch:\n\t_ = v\n}")
        assert metrics == StructuralMetrics(0, 2, 2)

    def test_select_receive_assignment(self, function_body):
        metrics = _count(function_body, "select {\ncase v = <-ch:\n}")
        assert metrics == StructuralMetrics(0, 1, 1)

    def test_select_receive_without_binding(self, function_body):
        metrics = _count(function_body, "select {\ncase <-done:\n}")
        assert metrics == StructuralMetrics(0, 0, 0)

    def test_not_counted_without_assignment_types(self, function_body):
        counter = StructuralCounter(
            branch_types=["type_switch_statement"],
            operation_types=[],
            assignment_types=[],
        )
        metrics = counter.count(function_body("switch v := x.(type) {\ncase int:\n\t_ = v\n}"))
        assert metrics == StructuralMetrics(1, 0, 0)


class TestAssignmentsAreOperations:
    @pytest.mark.parametrize(
        "statements",
        [
            "",
            "x := 1",
            "a, b = f(), g()",
            "for i := 0; i < 3; i++ {\n\ts += i\n}",
            "if v, ok := m[k]; ok {\n\tv = v * 2\n}",
            "switch v := x.(type) {\ncase int:\n}",
            "select {\ncase v := <-ch:\n}",
        ],
    )
    def test_local_assignments_bounded_by_operations(self, function_body, statements):
        metrics = _count(function_body, statements)
        assert metrics.local_assignment_count <= metrics.operational_complexity


class TestConfiguredNodeTypes:
    def test_extra_branch_type(self, function_body):
        counter = StructuralCounter(
            branch_types=["select_statement"],
            operation_types=[],
            assignment_types=[],
        )
        metrics = counter.count(function_body("select {\ncase <-done:\n}"))
        assert metrics.branching_factor == 1

    def test_from_config(self, function_body):
        config = AnalysisConfig(branch_node_types=["for_statement"])
        counter = StructuralCounter.from_config(config)
        metrics = counter.count(function_body("if a {\n}\nfor {\n}"))
        assert metrics.branching_factor == 1
