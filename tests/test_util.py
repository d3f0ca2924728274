
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import capvote.result
import capvote.util
from capvote.candidate import User
from capvote.vote import Ballot

A, B, C = User('A'), User('B'), User('C')
V1, V2, V3 = User('V1'), User('V2'), User('V3')


def test_remove_candidates():
    ballots = [Ballot(V1, [A, B, C]), Ballot(V2, [B]), Ballot(V3, [])]
    original = list(ballots)
    filtered = capvote.util.remove_candidates(ballots, {User('b')})
    assert filtered == [Ballot(V1, [A, C])]
    assert ballots == original
    assert filtered is not ballots


def test_remove_nothing_copies():
    ballots = [Ballot(V1, [A])]
    filtered = capvote.util.remove_candidates(ballots, set())
    assert filtered == ballots
    assert filtered is not ballots


def test_all_candidates():
    ballots = [
        Ballot(V1, [B, A]),
        Ballot(V2, []),
        Ballot(V3, [User('c'), User('a'), C]),
    ]
    cands = capvote.util.all_candidates(ballots)
    assert cands == [B, A, C]
    assert str(cands[2]) == 'c'


def test_counts_to_ranking():
    counts = {}
    for cand in [B, A, B, C]:
        capvote.util.add_vote(counts, cand)
    ranking = capvote.util.counts_to_ranking(
        counts, capvote.result.DECREASING
    )
    assert [(str(e.candidate), e.score) for e in ranking] == [
        ('B', 2), ('A', 1), ('C', 1)
    ]
