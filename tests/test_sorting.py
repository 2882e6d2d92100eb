# -*- coding: utf-8 -*-
"""
Unit tests for Electre-TRI sorting.

Tests cover:
- Pessimistic, optimistic and interval assignment rules
- End-to-end sorting of a problem, with and without vetoes
- Coalition checks run before any outranking computation
- Progressive pessimistic assignment from interval evaluations
- Standard form of profiles on discrete scales and profile distances
"""

import pytest
import numpy as np
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))


def _relation(cells):
    """Outranking relation over x and the two profiles pBM < pMG."""
    from outranking_mcda import RelationMatrix

    return RelationMatrix.from_dict({
        'x': {'pBM': cells['x>pBM'], 'pMG': cells['x>pMG']},
        'pBM': {'x': cells['pBM>x']},
        'pMG': {'x': cells['pMG>x']},
    })


def _cats():
    from outranking_mcda import CatsAndProfs

    return CatsAndProfs(['bad', 'medium', 'good'], ['pBM', 'pMG'])


class TestAssigner:
    """Test assignment rules on a given binary relation."""

    def test_pessimistic_between_profiles(self):
        from outranking_mcda import SortingAssigner, Category

        relation = _relation({'x>pBM': 1.0, 'x>pMG': 0.0, 'pBM>x': 0.0, 'pMG>x': 0.0})
        assignments = SortingAssigner().pessimistic(['x'], relation, _cats())
        assert assignments.get('x') == Category('medium')

    def test_optimistic_incomparable(self):
        from outranking_mcda import SortingAssigner, Category

        relation = _relation({'x>pBM': 1.0, 'x>pMG': 0.0, 'pBM>x': 0.0, 'pMG>x': 0.0})
        assignments = SortingAssigner().optimistic(['x'], relation, _cats())
        # x is incomparable to pMG, so nothing stops it below the best category
        assert assignments.get('x') == Category('good')

    def test_optimistic_stopped_by_preferred_profile(self):
        from outranking_mcda import SortingAssigner, Category

        relation = _relation({'x>pBM': 1.0, 'x>pMG': 0.0, 'pBM>x': 0.0, 'pMG>x': 1.0})
        assignments = SortingAssigner().optimistic(['x'], relation, _cats())
        assert assignments.get('x') == Category('medium')

    def test_worst_and_best_catch_the_rest(self):
        from outranking_mcda import SortingAssigner, Category

        below = _relation({'x>pBM': 0.0, 'x>pMG': 0.0, 'pBM>x': 1.0, 'pMG>x': 1.0})
        above = _relation({'x>pBM': 1.0, 'x>pMG': 1.0, 'pBM>x': 0.0, 'pMG>x': 0.0})
        assigner = SortingAssigner()
        assert assigner.pessimistic(['x'], below, _cats()).get('x') == Category('bad')
        assert assigner.optimistic(['x'], below, _cats()).get('x') == Category('bad')
        assert assigner.pessimistic(['x'], above, _cats()).get('x') == Category('good')
        assert assigner.optimistic(['x'], above, _cats()).get('x') == Category('good')

    def test_both_fills_interval(self):
        from outranking_mcda import SortingAssigner, SortingMode, Category

        relation = _relation({'x>pBM': 0.0, 'x>pMG': 0.0, 'pBM>x': 0.0, 'pMG>x': 0.0})
        assignments = SortingAssigner().assign(SortingMode.BOTH, ['x'], relation, _cats())
        assert assignments.get('x') == [Category('bad'), Category('medium'), Category('good')]

    def test_mode_from_name(self):
        from outranking_mcda import SortingAssigner, Category

        relation = _relation({'x>pBM': 1.0, 'x>pMG': 0.0, 'pBM>x': 0.0, 'pMG>x': 1.0})
        assignments = SortingAssigner().assign('pessimistic', ['x'], relation, _cats())
        assert assignments.get('x') == Category('medium')
        with pytest.raises(ValueError):
            SortingAssigner().assign('median', ['x'], relation, _cats())

    def test_binary_tolerance(self):
        from outranking_mcda import SortingAssigner, Category, InvalidOutrankingValueError

        relation = _relation({'x>pBM': 0.9995, 'x>pMG': 0.0004, 'pBM>x': 0.0, 'pMG>x': 1.0})
        assert SortingAssigner().pessimistic(['x'], relation, _cats()).get('x') == Category('medium')
        with pytest.raises(InvalidOutrankingValueError):
            SortingAssigner(binary_tolerance=1e-6).pessimistic(['x'], relation, _cats())

    def test_non_binary_value(self):
        from outranking_mcda import SortingAssigner, InvalidOutrankingValueError

        relation = _relation({'x>pBM': 1.0, 'x>pMG': 0.5, 'pBM>x': 0.0, 'pMG>x': 0.0})
        with pytest.raises(InvalidOutrankingValueError):
            SortingAssigner().pessimistic(['x'], relation, _cats())

    def test_missing_relation_entry(self):
        from outranking_mcda import SortingAssigner, MissingRelationEntryError

        relation = _relation({'x>pBM': 1.0, 'x>pMG': 0.0, 'pBM>x': 0.0, 'pMG>x': 0.0})
        relation.remove('x', 'pMG')
        with pytest.raises(MissingRelationEntryError):
            SortingAssigner().pessimistic(['x'], relation, _cats())

    def test_incomplete_categories(self):
        from outranking_mcda import SortingAssigner, CatsAndProfs, IncompleteInputError

        relation = _relation({'x>pBM': 1.0, 'x>pMG': 0.0, 'pBM>x': 0.0, 'pMG>x': 0.0})
        with pytest.raises(IncompleteInputError):
            SortingAssigner().both(['x'], relation, CatsAndProfs(['bad', 'medium', 'good'], ['pBM']))


class TestSortingFull:
    """Test end-to-end sorting."""

    def test_pessimistic(self, sorting_problem):
        from outranking_mcda import SortingFull, Category

        result = SortingFull().pessimistic(sorting_problem)
        assignments = result.assignments
        assert assignments.get('a_good') == Category('good')
        assert assignments.get('a_medium') == Category('medium')
        assert assignments.get('a_bad') == Category('bad')
        assert assignments.get('a_mixed') == Category('bad')
        assert result.outranking.is_binary()

    def test_optimistic(self, sorting_problem):
        from outranking_mcda import SortingFull, Category

        assignments = SortingFull().optimistic(sorting_problem).assignments
        assert assignments.get('a_good') == Category('good')
        assert assignments.get('a_medium') == Category('medium')
        assert assignments.get('a_bad') == Category('bad')
        assert assignments.get('a_mixed') == Category('good')

    def test_both(self, sorting_problem):
        from outranking_mcda import SortingFull, Category

        result = SortingFull().both(sorting_problem)
        assert result.assignments.get('a_medium') == [Category('medium')]
        assert len(result.assignments.get('a_mixed')) == 3

        frame = result.to_frame()
        assert frame.loc['a_mixed', 'Worst'] == 'bad'
        assert frame.loc['a_mixed', 'Best'] == 'good'

    def test_both_matches_single_rules(self, sorting_problem_factory):
        from outranking_mcda import SortingFull, ConsistencyChecker, Thresholds

        rng = np.random.default_rng(42)
        alternatives = {f'a{i:02d}': list(rng.uniform(0.0, 30.0, size=3)) for i in range(25)}
        thresholds = Thresholds(
            preference={'g1': 2.0, 'g2': 2.0, 'g3': 2.0},
            indifference={'g1': 1.0, 'g2': 1.0, 'g3': 1.0},
            veto={'g1': 12.0},
        )
        problem = sorting_problem_factory(alternatives, {'g1': 0.5, 'g2': 0.3, 'g3': 0.2}, 0.6, thresholds)

        for sharp in (True, False):
            sorting = SortingFull(sharp_vetoes=sharp)
            pessimistic = sorting.pessimistic(problem).assignments
            optimistic = sorting.optimistic(problem).assignments
            both = sorting.both(problem).assignments

            ConsistencyChecker().assert_to_ordered_intervals(both)
            for alternative in problem.alternatives:
                categories = both.get(alternative)
                assert categories[0] == pessimistic.get(alternative)
                assert categories[-1] == optimistic.get(alternative)

    def test_veto_lowers_assignment(self, sorting_problem_factory):
        from outranking_mcda import SortingFull, Thresholds, Category

        alternatives = {'a_strong': [30.0, 30.0, 2.0]}
        plain = sorting_problem_factory(alternatives, majority_threshold=1.9)
        vetoed = sorting_problem_factory(alternatives, majority_threshold=1.9,
                                         thresholds=Thresholds(veto={'g3': 15.0}))

        assert SortingFull().pessimistic(plain).assignments.get('a_strong') == Category('good')
        for sharp in (True, False):
            result = SortingFull(sharp_vetoes=sharp).pessimistic(vetoed)
            assert result.assignments.get('a_strong') == Category('medium')

    def test_majority_above_weights_sum(self, sorting_problem_factory):
        from outranking_mcda import SortingFull, SortingMode, ThresholdOrderError

        problem = sorting_problem_factory(
            weights={'g1': 0.2, 'g2': 0.2, 'g3': 0.1}, majority_threshold=0.6)
        # Incomplete evaluations would fail the outranking; the coalitions fail first
        problem.alternatives_evaluations.remove('a_good', 'g1')
        with pytest.raises(ThresholdOrderError):
            SortingFull().assign(SortingMode.PESSIMISTIC, problem)

    def test_default_mode_from_config(self, sorting_problem):
        from outranking_mcda import SortingFull, SortingMode, get_default_config, set_config
        assert SortingFull().assign(None, sorting_problem).mode is SortingMode.PESSIMISTIC

        config = get_default_config()
        config.sorting.default_mode = 'optimistic'
        set_config(config)
        assert SortingFull().assign(None, sorting_problem).mode is SortingMode.OPTIMISTIC

    def test_result_summary(self, sorting_problem):
        from outranking_mcda import SortingFull

        result = SortingFull().pessimistic(sorting_problem)
        summary = result.summary()
        assert 'ELECTRE-TRI SORTING RESULTS (pessimistic)' in summary
        assert 'a_mixed: bad' in summary
        assert result.smallest_separation is not None

        counts = result.category_counts()
        assert counts['bad'] == 2
        assert counts.sum() == 4

    def test_pessimistic_all(self, sorting_problem_factory):
        from outranking_mcda import SortingFull, Category

        problems = {
            'dm1': sorting_problem_factory(),
            'dm2': sorting_problem_factory(majority_threshold=2.0),
        }
        results = SortingFull().pessimistic_all(problems)
        assert set(results) == {'dm1', 'dm2'}
        assert results['dm1'].get('a_mixed') == Category('bad')
        # Two criteria out of three now suffice against pMG
        assert results['dm2'].get('a_mixed') == Category('good')


class TestProgressive:
    """Test progressive pessimistic assignment."""

    @staticmethod
    def _session(problem, **kwargs):
        from outranking_mcda import ElectrePessimisticProgressive

        return ElectrePessimisticProgressive(problem.cats_and_profs, problem.coalitions,
                                             problem.profiles_evaluations, **kwargs)

    def test_converges_to_pessimistic(self, sorting_problem_factory):
        from outranking_mcda import SortingFull

        problem = sorting_problem_factory(weights={'g1': 0.3, 'g2': 0.3, 'g3': 0.4},
                                          majority_threshold=0.55)
        expected = SortingFull().pessimistic(problem).assignments
        evaluations = problem.alternatives_evaluations

        for alternative in problem.alternatives:
            session = self._session(problem)
            for criterion in ['g1', 'g2', 'g3']:
                value = evaluations.get(alternative, criterion)
                session.set_evaluation(criterion, value, value + 0.5)
            assert session.is_set_category()
            assert session.worst_category == expected.get(alternative)

    def test_band_narrows(self, sorting_problem_factory):
        from outranking_mcda import Category

        problem = sorting_problem_factory(weights={'g1': 0.3, 'g2': 0.3, 'g3': 0.4},
                                          majority_threshold=0.55)
        session = self._session(problem)
        assert (session.worst_category, session.best_category) == (Category('bad'), Category('good'))

        band = session.set_evaluation('g1', 15.0, 15.5)
        assert band == (Category('bad'), Category('good'))
        assert session.weight_bounds('medium') == pytest.approx((0.3, 1.0))
        assert session.weight_bounds('good') == pytest.approx((0.0, 0.7))

        band = session.set_evaluation('g2', 15.0, 15.5)
        assert band == (Category('medium'), Category('medium'))
        assert session.is_set_category()

    def test_straddling_interval_stays_open(self, sorting_problem_factory):
        from outranking_mcda import Category

        problem = sorting_problem_factory(weights={'g1': 0.3, 'g2': 0.3, 'g3': 0.4},
                                          majority_threshold=0.55)
        session = self._session(problem)
        session.set_evaluation('g3', 8.0, 12.0)
        assert session.weight_bounds('medium') == pytest.approx((0.0, 1.0))
        assert not session.is_set_category()
        assert session.best_category == Category('good')

    def test_reset(self, sorting_problem_factory):
        from outranking_mcda import Category

        problem = sorting_problem_factory(weights={'g1': 0.3, 'g2': 0.3, 'g3': 0.4},
                                          majority_threshold=0.55)
        session = self._session(problem)
        session.set_evaluation('g1', 5.0, 5.5)
        session.set_evaluation('g2', 5.0, 5.5)
        assert session.best_category == Category('bad')

        session.reset()
        assert session.best_category == Category('good')
        assert session.weight_bounds('good') == pytest.approx((0.0, 1.0))
        session.set_evaluation('g1', 25.0, 25.5)

    def test_minimize_criterion(self):
        from outranking_mcda import (
            ElectrePessimisticProgressive, CatsAndProfs, Coalitions, Evaluations, Category)

        cats = CatsAndProfs(['bad', 'good'], ['p'])
        profiles = Evaluations.from_dict({'p': {'cost': 10.0}})
        coalitions = Coalitions({'cost': 1.0}, majority_threshold=1.0)

        cheap = ElectrePessimisticProgressive(cats, coalitions, profiles, directions={'cost': 'min'})
        assert cheap.set_evaluation('cost', 4.0, 5.0) == (Category('good'), Category('good'))

        costly = ElectrePessimisticProgressive(cats, coalitions, profiles, directions={'cost': 'min'})
        assert costly.set_evaluation('cost', 14.0, 15.0) == (Category('bad'), Category('bad'))

    def test_invalid_submissions(self, sorting_problem):
        from outranking_mcda import InvalidInputError, UnknownCriterionError

        session = self._session(sorting_problem)
        session.set_evaluation('g1', 12.0, 14.0)
        with pytest.raises(InvalidInputError):
            session.set_evaluation('g1', 12.0, 14.0)
        with pytest.raises(UnknownCriterionError):
            session.set_evaluation('g9', 12.0, 14.0)
        with pytest.raises(InvalidInputError):
            session.set_evaluation('g2', 14.0, 12.0)

    def test_low_bound_above_high_bound(self):
        from outranking_mcda import (
            ElectrePessimisticProgressive, CatsAndProfs, Coalitions, Evaluations, Category,
            NumericInconsistencyError)

        cats = CatsAndProfs(['bad', 'good'], ['p'])
        profiles = Evaluations.from_dict({'p': {'g1': 10.0}})
        session = ElectrePessimisticProgressive(cats, Coalitions({'g1': 1.0}, 0.5), profiles)

        # An empty interval sitting on the profile both reaches and misses it
        with pytest.raises(NumericInconsistencyError):
            session.set_evaluation('g1', 10.0, 10.0)

        # Nothing was committed, the criterion can be submitted again
        assert session.weight_bounds('good') == pytest.approx((0.0, 1.0))
        assert (session.worst_category, session.best_category) == (Category('bad'), Category('good'))
        assert session.set_evaluation('g1', 10.0, 12.0) == (Category('good'), Category('good'))

    def test_incomplete_setup(self, sorting_problem_factory):
        from outranking_mcda import (
            ElectrePessimisticProgressive, CatsAndProfs, Evaluations, IncompleteInputError)

        problem = sorting_problem_factory(majority_threshold=None)
        with pytest.raises(IncompleteInputError):
            self._session(problem)

        problem = sorting_problem_factory()
        with pytest.raises(IncompleteInputError):
            ElectrePessimisticProgressive(CatsAndProfs(['bad', 'good']), problem.coalitions,
                                          problem.profiles_evaluations)

        partial = Evaluations.from_dict({'pBM': {'g1': 10.0}, 'pMG': {'g1': 20.0}})
        with pytest.raises(IncompleteInputError):
            ElectrePessimisticProgressive(problem.cats_and_profs, problem.coalitions, partial)


def _stepped(direction, minimum, maximum, step):
    from outranking_mcda import Scale, PreferenceDirection

    return Scale(PreferenceDirection.parse(direction), minimum, maximum, step)


class TestStandardizeProfiles:
    """Test the standard form of profiles on discrete scales."""

    @pytest.mark.parametrize("mode,value,expected", [
        ('pessimistic', 7.0, 7.0),
        ('pessimistic', 9.0, 9.0),
        ('pessimistic', 10.5, 14.0),
        ('pessimistic', 19.0, 14.0),
        ('pessimistic', 40.0, 44.0),
        ('optimistic', 9.0, 14.0),
        ('optimistic', 19.0, 24.0),
        ('optimistic', 40.0, 44.0),
        ('both', 9.0, 9.0),
        ('both', 19.0, 19.0),
        ('both', 40.0, 44.0),
    ])
    def test_scale_to_maximize(self, mode, value, expected):
        from outranking_mcda import StandardizeProfiles

        scale = _stepped('max', 9.0, 109.0, 10.0)
        assert StandardizeProfiles().standard_value(value, scale, mode) == pytest.approx(expected)

    @pytest.mark.parametrize("mode,value,expected", [
        ('pessimistic', 9.0, 14.0),
        ('pessimistic', 19.0, 24.0),
        ('pessimistic', 40.0, 44.0),
        ('optimistic', 9.0, 9.0),
        ('optimistic', 19.0, 14.0),
        ('optimistic', 40.0, 44.0),
        ('both', 19.0, 19.0),
        ('both', 40.0, 44.0),
    ])
    def test_scale_to_minimize(self, mode, value, expected):
        from outranking_mcda import StandardizeProfiles

        scale = _stepped('min', 9.0, 109.0, 10.0)
        assert StandardizeProfiles().standard_value(value, scale, mode) == pytest.approx(expected)

    def test_negative_origin(self):
        from outranking_mcda import StandardizeProfiles, SortingMode

        scale = _stepped('max', -10.0, 10.0, 5.0)
        std = StandardizeProfiles()
        assert std.standard_value(-8.0, scale, SortingMode.PESSIMISTIC) == pytest.approx(-7.5)
        assert std.standard_value(0.0, scale, SortingMode.PESSIMISTIC) == pytest.approx(-2.5)
        # The best bound can still move down half a step
        assert std.standard_value(10.0, scale, SortingMode.PESSIMISTIC) == pytest.approx(7.5)

    def test_cross_boundaries(self):
        from outranking_mcda import StandardizeProfiles

        scale = _stepped('max', 9.0, 109.0, 10.0)
        std = StandardizeProfiles(cross_boundaries=True)
        assert std.standard_value(9.0, scale, 'pessimistic') == pytest.approx(4.0)
        assert std.standard_value(109.0, scale, 'optimistic') == pytest.approx(114.0)

    def test_standardize_matrix(self):
        from outranking_mcda import StandardizeProfiles, Evaluations

        profiles = Evaluations.from_dict({'p1': {'g1': 10.5, 'g2': 3.0}, 'p2': {'g1': 40.0, 'g2': 7.0}})
        scales = {'g1': _stepped('max', 9.0, 109.0, 10.0), 'g2': _stepped('min', 0.0, 10.0, 1.0)}
        standard = StandardizeProfiles().standardize(profiles, scales, 'pessimistic')

        assert standard.get('p1', 'g1') == pytest.approx(14.0)
        assert standard.get('p2', 'g1') == pytest.approx(44.0)
        assert standard.get('p1', 'g2') == pytest.approx(3.5)
        assert standard.get('p2', 'g2') == pytest.approx(7.5)
        assert profiles.get('p1', 'g1') == 10.5

    def test_invalid_inputs(self):
        from outranking_mcda import (
            StandardizeProfiles, Evaluations, Scale, PreferenceDirection,
            InvalidInputError, IncompleteInputError)

        std = StandardizeProfiles()
        profiles = Evaluations.from_dict({'p1': {'g1': 1.0, 'g2': 2.0}, 'p2': {'g1': 3.0}})
        scale = _stepped('max', 0.0, 10.0, 1.0)
        with pytest.raises(InvalidInputError):
            std.standardize(profiles, {'g1': scale}, 'pessimistic')
        with pytest.raises(IncompleteInputError):
            std.standardize(profiles, {'g1': scale, 'g2': scale}, 'pessimistic')
        with pytest.raises(InvalidInputError):
            std.standard_value(1.5, Scale(PreferenceDirection.MAXIMIZE, 0.0, 10.0), 'pessimistic')
        with pytest.raises(IncompleteInputError):
            std.standard_value(1.5, Scale(None, 0.0, 10.0, 1.0), 'pessimistic')
        with pytest.raises(ValueError):
            std.standard_value(1.5, scale, 'median')

    def test_same_pessimistic_assignments(self, sorting_problem):
        from outranking_mcda import SortingFull, StandardizeProfiles, Scale, PreferenceDirection

        sorting_problem.scales = {c: Scale(PreferenceDirection.MAXIMIZE, 0.0, 40.0, 1.0)
                                  for c in sorting_problem.criteria}
        expected = SortingFull().pessimistic(sorting_problem).assignments

        sorting_problem.profiles_evaluations = StandardizeProfiles().standardize(
            sorting_problem.profiles_evaluations, sorting_problem.scales, 'pessimistic')
        assert sorting_problem.profiles_evaluations.get('pBM', 'g1') == pytest.approx(9.5)
        assert SortingFull().pessimistic(sorting_problem).assignments == expected


class TestProfilesDistance:
    """Test distances between sets of profiles."""

    @pytest.mark.parametrize("first,second,expected", [
        (1.5, 1.0, 1.0),
        (0.1, 1.0, 0.0),
        (1.0, 1.9, 1.0),
        (1.5, 1.9, 0.0),
        (1.9, 0.1, 1.0),
    ])
    def test_unit_steps(self, first, second, expected):
        from outranking_mcda import ProfilesDistance

        scale = _stepped('max', 0.0, 100.0, 1.0)
        assert ProfilesDistance().distance(first, second, scale, 'pessimistic') == pytest.approx(expected)

    def test_wide_steps(self):
        from outranking_mcda import ProfilesDistance

        scale = _stepped('max', 3.0, 103.0, 10.0)
        distance = ProfilesDistance()
        assert distance.distance(10.0, 94.0, scale, 'pessimistic') == pytest.approx(90.0)
        assert distance.distance(10.0, 14.0, scale, 'pessimistic') == pytest.approx(10.0)
        assert distance.distance(13.0, 10.0, scale, 'pessimistic') == pytest.approx(0.0)
        # Values between two steps stand for the middle of them
        assert distance.distance(13.0, 23.0, scale, 'both') == pytest.approx(10.0)
        assert distance.distance(13.0, 16.0, scale, 'both') == pytest.approx(5.0)
        assert distance.distance(16.0, 18.0, scale, 'both') == pytest.approx(0.0)

    def test_compute_over_profiles(self):
        from outranking_mcda import ProfilesDistance, Evaluations

        scales = {'g1': _stepped('max', 0.0, 100.0, 1.0), 'g2': _stepped('max', 0.0, 100.0, 1.0)}
        first = Evaluations.from_dict({'p1': {'g1': 1.5, 'g2': 10.2}, 'p2': {'g1': 20.5, 'g2': 30.5}})
        second = Evaluations.from_dict({'p1': {'g1': 1.2, 'g2': 12.5}, 'p2': {'g1': 21.5, 'g2': 34.5}})

        result = ProfilesDistance(approximations=[1.0, 2.0]).compute(first, second, scales, 'pessimistic')
        assert result.sum_distance == pytest.approx(0.0 + 2.0 + 1.0 + 4.0)
        assert result.max_distance == pytest.approx(4.0)
        assert result.equals() == 1
        assert result.equals(1.0) == 2
        assert result.equals(2.0) == 3
        assert 'PROFILES DISTANCE' in result.summary()

        distance = ProfilesDistance()
        assert distance.sum_distance(first, second, scales, 'pessimistic') == pytest.approx(7.0)
        assert distance.max_distance(first, first, scales, 'pessimistic') == 0.0

    def test_distance_in_alternatives(self):
        from outranking_mcda import ProfilesDistance, Evaluations

        first = Evaluations.from_dict({'p1': {'g1': 10.0, 'g2': 5.0}})
        second = Evaluations.from_dict({'p1': {'g1': 14.0, 'g2': 5.0}})
        alternatives = Evaluations.from_dict({
            'a1': {'g1': 10.0, 'g2': 5.0},
            'a2': {'g1': 12.0, 'g2': 6.0},
            'a3': {'g1': 15.0, 'g2': 4.0},
        })
        # a1 and a2 on g1 (bounds included), a1 on g2
        assert ProfilesDistance().distance_in_alternatives(first, second, alternatives) == 3

    def test_mismatched_profiles(self):
        from outranking_mcda import ProfilesDistance, Evaluations, InvalidInputError, IncompleteInputError

        scales = {'g1': _stepped('max', 0.0, 100.0, 1.0)}
        first = Evaluations.from_dict({'p1': {'g1': 1.0}})
        distance = ProfilesDistance()
        with pytest.raises(InvalidInputError):
            distance.compute(first, Evaluations.from_dict({'p2': {'g1': 1.0}}), scales, 'pessimistic')
        with pytest.raises(IncompleteInputError):
            distance.compute(first, first, {}, 'pessimistic')
        partial = Evaluations.from_dict({'p1': {'g1': 1.0, 'g2': 2.0}, 'p2': {'g1': 1.0}})
        with pytest.raises(IncompleteInputError):
            distance.compute(partial, partial, scales, 'pessimistic')
