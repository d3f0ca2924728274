
import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import capvote.evaluate.core
from capvote.candidate import User
from capvote.vote import Ballot

PLURALITY = capvote.evaluate.core.Plurality()
APPROVAL = capvote.evaluate.core.Approval()

A, B, C = User('A'), User('B'), User('C')


def ballots_from(rankings):
    return [
        Ballot(User(f'V{i}'), [User(name) for name in ranking])
        for i, ranking in enumerate(rankings)
    ]


def scores(ranking):
    return [(str(entry.candidate), entry.score) for entry in ranking]


def test_abstract():
    with pytest.raises(TypeError):
        capvote.evaluate.core.Poll()


@pytest.mark.parametrize('evaluator', [PLURALITY, APPROVAL])
def test_empty(evaluator):
    assert evaluator.tally([]) == []
    assert evaluator.tally(ballots_from([[], []])) == []


@pytest.mark.parametrize('evaluator', [PLURALITY, APPROVAL])
def test_self_votes(evaluator):
    ballots = [Ballot(u, [u]) for u in (A, B, C)]
    ranking = evaluator.tally(ballots)
    assert len(ranking) == 3
    assert all(entry.score == 1 for entry in ranking)
    assert scores(ranking) == [('A', 1), ('B', 1), ('C', 1)]


def test_plurality_first_only():
    ballots = ballots_from([
        ['A', 'B'],
        ['B', 'A'],
        ['b'],
        ['C', 'A', 'B'],
        [],
    ])
    assert scores(PLURALITY.tally(ballots)) == [('B', 2), ('A', 1), ('C', 1)]


def test_approval_all_positions():
    ballots = ballots_from([
        ['A', 'B'],
        ['B', 'A'],
        ['b'],
        ['C', 'A', 'B'],
        [],
    ])
    assert scores(APPROVAL.tally(ballots)) == [('B', 4), ('A', 3), ('C', 1)]


def test_approval_counts_every_occurrence():
    ballots = ballots_from([['A', 'A', 'B']])
    assert scores(APPROVAL.tally(ballots)) == [('A', 2), ('B', 1)]
    ballots = ballots_from([['A', 'a', 'B'], ['B']])
    assert scores(APPROVAL.tally(ballots)) == [('A', 2), ('B', 2)]


@pytest.mark.parametrize('evaluator', [PLURALITY, APPROVAL])
def test_idempotent(evaluator):
    ballots = ballots_from([['A', 'B'], ['C'], ['B', 'C'], ['c', 'A']])
    assert evaluator.tally(ballots) == evaluator.tally(ballots)


def test_display_casing_first_seen():
    ballots = ballots_from([['alice'], ['ALICE'], ['Alice']])
    ranking = PLURALITY.tally(ballots)
    assert scores(ranking) == [('alice', 3)]
