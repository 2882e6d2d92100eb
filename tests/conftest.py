"""
Pytest configuration and fixtures for outranking tests.
"""
import sys
from pathlib import Path

import pytest
import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from outranking_mcda import (
    CatsAndProfs,
    Coalitions,
    Evaluations,
    LoggerFactory,
    ProblemData,
    Scale,
    PreferenceDirection,
    SortingProblem,
    Thresholds,
    reset_config,
)


CRITERIA = ['g1', 'g2', 'g3']

# Category boundaries: pBM separates bad/medium, pMG separates medium/good
PROFILES = {
    'pBM': [10.0, 10.0, 10.0],
    'pMG': [20.0, 20.0, 20.0],
}

ALTERNATIVES = {
    'a_good': [25.0, 25.0, 25.0],
    'a_medium': [15.0, 15.0, 15.0],
    'a_bad': [5.0, 5.0, 5.0],
    'a_mixed': [25.0, 25.0, 5.0],
}


def _evaluations(rows):
    return Evaluations.from_array(list(rows), CRITERIA, np.array(list(rows.values())))


def build_sorting_problem(alternatives=None, weights=None, majority_threshold=2.5, thresholds=None):
    """Three categories bad < medium < good on three criteria to maximize."""
    alternatives = ALTERNATIVES if alternatives is None else alternatives
    weights = {'g1': 1.0, 'g2': 1.0, 'g3': 1.0} if weights is None else weights
    return SortingProblem(
        alternatives_evaluations=_evaluations(alternatives),
        profiles_evaluations=_evaluations(PROFILES),
        scales={c: Scale(PreferenceDirection.MAXIMIZE, 0.0, 40.0) for c in CRITERIA},
        thresholds=thresholds if thresholds is not None else Thresholds(),
        coalitions=Coalitions(weights, majority_threshold),
        cats_and_profs=CatsAndProfs(['bad', 'medium', 'good'], ['pBM', 'pMG']),
    )


@pytest.fixture(autouse=True)
def clean_state():
    """Restore default configuration and logging after each test."""
    yield
    reset_config()
    LoggerFactory.reset()


@pytest.fixture
def sorting_problem():
    return build_sorting_problem()


@pytest.fixture
def sorting_problem_factory():
    return build_sorting_problem


@pytest.fixture
def small_data():
    """Four alternatives, one criterion to minimize."""
    evaluations = Evaluations.from_dict({
        'a1': {'price': 12.0, 'quality': 7.0, 'speed': 3.0},
        'a2': {'price': 10.0, 'quality': 5.0, 'speed': 4.5},
        'a3': {'price': 15.0, 'quality': 8.5, 'speed': 2.0},
        'a4': {'price': 11.0, 'quality': 6.0, 'speed': 5.0},
    })
    return ProblemData.from_directions(
        evaluations, {'price': 'min', 'quality': 'max', 'speed': 'max'})


@pytest.fixture
def small_thresholds():
    return Thresholds(
        preference={'price': 2.0, 'quality': 1.5, 'speed': 1.0},
        indifference={'price': 0.5, 'quality': 0.5, 'speed': 0.25},
        veto={'price': 4.0, 'quality': 3.0},
    )


@pytest.fixture
def small_weights():
    """Weights summing to one."""
    return {'price': 0.5, 'quality': 0.3, 'speed': 0.2}
