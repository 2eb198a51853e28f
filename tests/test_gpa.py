import unittest

from services.gpa import (
    GRADE_POINTS,
    InvalidGradeError,
    ResultRecord,
    cumulative_gpa,
    grade_distribution,
    grade_to_point,
    group_by_semester,
    plan_target,
    point_to_grades,
    required_future_gpa,
    semester_gpa,
    semester_sort_key,
    semester_trend_series,
    summarize_results,
    target_difficulty,
)


def rec(grade_point, credit, semester="Y1S1", grade=None):
    return ResultRecord(grade_point=grade_point, credit=credit, semester=semester, grade=grade)


class GradeTableTests(unittest.TestCase):
    def test_table_values(self):
        self.assertEqual(grade_to_point("A+"), 4.0)
        self.assertEqual(grade_to_point("A"), 4.0)
        self.assertEqual(grade_to_point("A-"), 3.67)
        self.assertEqual(grade_to_point("B+"), 3.33)
        self.assertEqual(grade_to_point("B"), 3.0)
        self.assertEqual(grade_to_point("B-"), 2.67)
        self.assertEqual(grade_to_point("C+"), 2.33)
        self.assertEqual(grade_to_point("C"), 2.0)
        self.assertEqual(grade_to_point("F"), 0.0)
        self.assertEqual(len(GRADE_POINTS), 9)

    def test_lookup_is_case_and_space_insensitive(self):
        self.assertEqual(grade_to_point(" b+ "), 3.33)

    def test_unknown_grade_raises(self):
        for bad in ("D", "E", "", "A++"):
            with self.assertRaises(InvalidGradeError):
                grade_to_point(bad)

    def test_non_string_grade_raises(self):
        with self.assertRaises(InvalidGradeError):
            grade_to_point(None)

    def test_invalid_grade_is_value_error(self):
        self.assertTrue(issubclass(InvalidGradeError, ValueError))

    def test_reverse_lookup(self):
        self.assertEqual(point_to_grades(4.0), ["A+", "A"])
        self.assertEqual(point_to_grades(2.67), ["B-"])
        self.assertEqual(point_to_grades(1.5), [])


class AggregationTests(unittest.TestCase):
    def test_empty_cgpa_is_zero(self):
        self.assertEqual(cumulative_gpa([]), 0.0)

    def test_zero_credits_is_zero(self):
        self.assertEqual(cumulative_gpa([rec(4.0, 0)]), 0.0)
        self.assertEqual(semester_gpa([rec(3.0, 0)]), 0.0)

    def test_single_result_cgpa_equals_grade_point(self):
        for gp in GRADE_POINTS.values():
            self.assertAlmostEqual(cumulative_gpa([rec(gp, 3)]), gp, places=2)

    def test_semester_gpa_example(self):
        results = [rec(4.0, 3, grade="A"), rec(3.0, 2, grade="B")]
        # (4.0*3 + 3.0*2) / 5
        self.assertAlmostEqual(semester_gpa(results), 3.60, places=2)

    def test_semester_and_cumulative_agree_on_one_semester(self):
        results = [rec(3.67, 3), rec(2.33, 4), rec(4.0, 2)]
        self.assertEqual(semester_gpa(results), cumulative_gpa(results))

    def test_cgpa_weights_by_credit_not_by_semester(self):
        results = [rec(4.0, 1, "Y1S1"), rec(2.0, 3, "Y1S2")]
        self.assertAlmostEqual(cumulative_gpa(results), 2.5, places=2)

    def test_cgpa_uses_unrounded_sums(self):
        # each semester alone rounds to 3.33 / 2.67, the exact cumulative is 3.0
        results = [rec(3.33, 3, "Y1S1"), rec(2.67, 3, "Y1S2")]
        self.assertEqual(cumulative_gpa(results), 3.0)
        results = [rec(3.67, 1, "Y1S1"), rec(3.33, 2, "Y1S2")]
        self.assertEqual(cumulative_gpa(results), round((3.67 + 6.66) / 3, 2))

    def test_aggregations_are_idempotent(self):
        results = [rec(4.0, 3, "Y1S1"), rec(2.67, 3, "Y1S2"), rec(3.33, 4, "Y2S1")]
        self.assertEqual(cumulative_gpa(results), cumulative_gpa(results))
        self.assertEqual(semester_trend_series(results), semester_trend_series(results))
        self.assertEqual(group_by_semester(results), group_by_semester(results))

    def test_accepts_generators(self):
        self.assertAlmostEqual(cumulative_gpa(rec(3.0, c) for c in (1, 2, 3)), 3.0)


class GroupingTests(unittest.TestCase):
    def test_groups_preserve_insertion_order(self):
        a, b, c = rec(4.0, 3, "Y1S2"), rec(3.0, 3, "Y1S1"), rec(2.0, 3, "Y1S2")
        groups = group_by_semester([a, b, c])
        self.assertEqual(list(groups), ["Y1S2", "Y1S1"])
        self.assertEqual(groups["Y1S2"], [a, c])

    def test_missing_semester_goes_to_unknown(self):
        groups = group_by_semester([rec(4.0, 3, None), rec(3.0, 3, "")])
        self.assertEqual(list(groups), ["Unknown"])
        self.assertEqual(len(groups["Unknown"]), 2)


class TrendTests(unittest.TestCase):
    def test_trend_same_up_same(self):
        results = [rec(3.0, 3, "Y1S1"), rec(3.5, 3, "Y1S2"), rec(3.5, 3, "Y1S3")]
        series = semester_trend_series(results)
        self.assertEqual([s.trend for s in series], ["same", "up", "same"])
        self.assertIsNone(series[0].prev_gpa)
        self.assertEqual(series[1].prev_gpa, 3.0)

    def test_trend_down(self):
        series = semester_trend_series([rec(4.0, 3, "Y1S1"), rec(2.0, 3, "Y1S2")])
        self.assertEqual(series[1].trend, "down")

    def test_sorted_lexicographically_by_default(self):
        results = [rec(3.0, 3, "Y2S1"), rec(3.0, 3, "Y1S2"), rec(3.0, 3, "Y10S1"), rec(3.0, 3, "Y1S1")]
        self.assertEqual(
            [s.semester for s in semester_trend_series(results)],
            ["Y10S1", "Y1S1", "Y1S2", "Y2S1"],
        )

    def test_numeric_ordering_is_opt_in(self):
        results = [rec(3.0, 3, "Y2S1"), rec(3.0, 3, "Y10S1"), rec(3.0, 3, "Y1S1"), rec(3.0, 3, None)]
        self.assertEqual(
            [s.semester for s in semester_trend_series(results, numeric=True)],
            ["Y1S1", "Y2S1", "Y10S1", "Unknown"],
        )

    def test_sort_key(self):
        self.assertEqual(semester_sort_key("Y1S2"), "Y1S2")
        self.assertLess(semester_sort_key("Y2S1", numeric=True), semester_sort_key("Y10S1", numeric=True))

    def test_empty_series(self):
        self.assertEqual(semester_trend_series([]), [])


class TargetPlanningTests(unittest.TestCase):
    def test_required_gpa_example(self):
        self.assertAlmostEqual(required_future_gpa(36, 10, 3.8, 1, 10), 4.0, places=2)

    def test_zero_remaining_semesters_is_zero(self):
        self.assertEqual(required_future_gpa(36, 10, 3.8, 0, 10), 0.0)
        self.assertEqual(required_future_gpa(36, 10, 3.8, 2, 0), 0.0)
        self.assertEqual(required_future_gpa(36, 10, 3.8, -1, 10), 0.0)

    def test_required_gpa_from_scratch_is_target(self):
        self.assertAlmostEqual(required_future_gpa(0, 0, 3.2, 4, 15), 3.2, places=2)

    def test_difficulty_thresholds(self):
        self.assertEqual(target_difficulty(4.2), "not achievable")
        self.assertEqual(target_difficulty(4.0), "challenging")
        self.assertEqual(target_difficulty(3.51), "challenging")
        self.assertEqual(target_difficulty(3.5), "moderate")
        self.assertEqual(target_difficulty(3.0), "achievable")
        self.assertEqual(target_difficulty(-0.5), "achievable")

    def test_plan_target(self):
        results = [rec(4.0, 5, "Y1S1"), rec(3.2, 5, "Y1S2")]  # 36 points / 10 credits
        plan = plan_target(results, 3.8, 1, 10)
        self.assertEqual(plan.current_cgpa, 3.6)
        self.assertEqual(plan.current_credits, 10)
        self.assertEqual(plan.remaining_credits, 10)
        self.assertAlmostEqual(plan.required_gpa, 4.0)
        self.assertTrue(plan.achievable)
        self.assertTrue(plan.applicable)
        self.assertEqual(plan.difficulty, "challenging")

    def test_plan_target_out_of_reach(self):
        plan = plan_target([rec(2.0, 30)], 3.9, 1, 10)
        self.assertFalse(plan.achievable)
        self.assertEqual(plan.difficulty, "not achievable")

    def test_plan_target_labels_use_unrounded_requirement(self):
        # each required value rounds onto a cut-off but sits just above it
        plan = plan_target([rec(3.596, 10, "Y1S1")], 3.8, 1, 10)  # needs 4.004
        self.assertEqual(plan.required_gpa, 4.0)
        self.assertFalse(plan.achievable)
        self.assertEqual(plan.difficulty, "not achievable")

        plan = plan_target([rec(3.497, 10, "Y1S1")], 3.5, 1, 10)  # needs 3.503
        self.assertEqual(plan.required_gpa, 3.5)
        self.assertTrue(plan.achievable)
        self.assertEqual(plan.difficulty, "challenging")

        plan = plan_target([rec(2.996, 10, "Y1S1")], 3.0, 1, 10)  # needs 3.004
        self.assertEqual(plan.required_gpa, 3.0)
        self.assertEqual(plan.difficulty, "moderate")

    def test_plan_target_not_applicable(self):
        plan = plan_target([rec(3.0, 10)], 3.5, 0, 10)
        self.assertFalse(plan.applicable)
        self.assertEqual(plan.required_gpa, 0.0)
        self.assertEqual(plan.remaining_credits, 0)


class SummaryTests(unittest.TestCase):
    def test_summary(self):
        results = [rec(4.0, 3, "Y1S2"), rec(3.0, 2, "Y1S1"), rec(2.0, 1, None)]
        summary = summarize_results(results)
        self.assertEqual(summary.total_credits, 6)
        self.assertEqual(summary.total_points, 20.0)
        self.assertEqual(summary.cgpa, 3.33)
        self.assertEqual([s.semester for s in summary.semesters], ["Unknown", "Y1S1", "Y1S2"])
        self.assertEqual(set(summary.grouped), {"Y1S1", "Y1S2", "Unknown"})

    def test_grade_distribution_sorted(self):
        self.assertEqual(grade_distribution(["B+", "A", "B+", "F"]), {"A": 1, "B+": 2, "F": 1})
        self.assertEqual(grade_distribution([]), {})


if __name__ == "__main__":
    unittest.main()
