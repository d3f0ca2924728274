
import sys
import os
import dataclasses

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import capvote.vote
from capvote.candidate import User
from capvote.vote import Ballot

A, B, C = User('A'), User('B'), User('C')
V1, V2, V3 = User('V1'), User('V2'), User('V3')


def test_ballot_votes_tuple():
    ballot = Ballot(V1, [A, B])
    assert ballot.votes == (A, B)
    assert Ballot(V1).votes == ()


def test_ballot_immutable():
    ballot = Ballot(V1, [A, B])
    with pytest.raises(dataclasses.FrozenInstanceError):
        ballot.voter = V2


def test_ballot_eq():
    assert Ballot(V1, [A, B]) == Ballot(User('v1'), [User('a'), User('b')])
    assert Ballot(V1, [A, B]) != Ballot(V1, [B, A])
    assert len({Ballot(V1, [A]), Ballot(User('v1'), [User('a')])}) == 1


def test_ballot_str():
    assert str(Ballot(V1, [A])) == 'Ballot for V1'


def test_ballot_without():
    ballot = Ballot(V1, [A, B, C])
    assert ballot.without({User('b')}) == Ballot(V1, [A, C])
    assert ballot.without({A, B, C}).votes == ()
    assert ballot.votes == (A, B, C)


def test_ballot_to_dict():
    assert Ballot(V1, [A]).to_dict() == {
        'voter': {'name': 'V1'},
        'votes': [{'name': 'A'}],
    }


def test_validate_ok():
    ballots = [Ballot(V1, [A, B]), Ballot(V2, [B]), Ballot(V3, [C, A, B])]
    assert capvote.vote.validate(ballots) == []
    assert list(capvote.vote.check(ballots)) == []


def test_validate_empty_collection():
    assert capvote.vote.validate([]) == []


def test_validate_duplicate_voter():
    ballots = [Ballot(V1, [A]), Ballot(User('v1'), [B])]
    errors = list(capvote.vote.check(ballots))
    assert len(errors) == 1
    assert isinstance(errors[0], capvote.vote.DuplicateVoterError)
    assert capvote.vote.validate(ballots) == [
        'Invalid vote detected: v1 repeated post.'
    ]


def test_validate_all_problems_in_order():
    ballots = [
        Ballot(V1, [A, B]),
        Ballot(V2, []),
        Ballot(V3, [A, User('a'), B, A]),
        Ballot(V2, [C, C]),
    ]
    errors = list(capvote.vote.check(ballots))
    assert [type(error) for error in errors] == [
        capvote.vote.EmptyBallotError,
        capvote.vote.DuplicateVoteError,
        capvote.vote.DuplicateVoteError,
        capvote.vote.DuplicateVoterError,
        capvote.vote.DuplicateVoteError,
    ]
    assert all(isinstance(e, capvote.vote.BallotError) for e in errors)
    assert errors[1].voter == V3
    assert errors[1].vote == A
    assert capvote.vote.validate(ballots) == [
        'Invalid vote detected: V2 made no votes.',
        'Invalid vote detected: V3 repeated vote a',
        'Invalid vote detected: V3 repeated vote A',
        'Invalid vote detected: V2 repeated post.',
        'Invalid vote detected: V2 repeated vote C',
    ]


def test_validate_does_not_modify():
    ballots = [Ballot(V1, [A, A]), Ballot(V1, [])]
    copied = list(ballots)
    capvote.vote.validate(ballots)
    assert ballots == copied


def test_validate_accepts_iterator():
    ballots = iter([Ballot(V1, []), Ballot(V1, [A])])
    assert len(capvote.vote.validate(ballots)) == 2
