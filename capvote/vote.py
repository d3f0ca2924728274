'''Ballots and ballot collection checks.

A ballot pairs a voter with the candidates they voted for, ordered from the
most preferred. Evaluators in the :mod:`capvote.evaluate` subpackage accept
any collection of ballots; they do not reject ballots that break the usual
forum poll rules. Those rules are checked separately:

1.  Every voter posts at most one ballot.
2.  Every ballot names at least one candidate.
3.  No ballot names the same candidate twice.

Each broken rule is represented by a subclass of :class:`BallotError`.
:func:`check` reports the problems as error objects without raising them,
:func:`validate` renders them to messages. Whether to abort the count on
a problem is left to the caller; the evaluators count invalid ballot
collections as they are.
'''

import dataclasses
import logging
from typing import Any, Collection, Dict, Iterable, Iterator, List, Tuple

from capvote.candidate import User


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Ballot:
    '''A voter's ranked preferences.

    :param voter: The user who cast the ballot.
    :param votes: Candidates voted for, best first. Converted to a tuple;
        may be empty.
    '''
    voter: User
    votes: Tuple[User, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'votes', tuple(self.votes))

    def without(self, candidates: Collection[User]) -> 'Ballot':
        '''Return a ballot with the given candidates removed.

        The remaining preferences keep their relative order.
        '''
        return Ballot(
            self.voter,
            tuple(vote for vote in self.votes if vote not in candidates)
        )

    def __str__(self) -> str:
        return f'Ballot for {self.voter}'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'voter': self.voter.to_dict(),
            'votes': [vote.to_dict() for vote in self.votes],
        }


class BallotError(Exception):
    '''A ballot breaks the poll rules.

    :param voter: Author of the offending ballot.
    '''
    def __init__(self, voter: User, message: str):
        self.voter = voter
        super().__init__(f'Invalid vote detected: {voter} {message}')


class DuplicateVoterError(BallotError):
    '''A voter cast more than one ballot.'''
    def __init__(self, voter: User):
        super().__init__(voter, 'repeated post.')


class EmptyBallotError(BallotError):
    '''A ballot names no candidates.'''
    def __init__(self, voter: User):
        super().__init__(voter, 'made no votes.')


class DuplicateVoteError(BallotError):
    '''A ballot names a candidate more than once.

    :param vote: The candidate named repeatedly.
    '''
    def __init__(self, voter: User, vote: User):
        self.vote = vote
        super().__init__(voter, f'repeated vote {vote}')


def check(ballots: Iterable[Ballot]) -> Iterator[BallotError]:
    '''Find all rule violations in a ballot collection.

    The errors are yielded, not raised, in ballot order; problems within
    a single ballot follow the order of its votes. A candidate named three
    times on one ballot produces two errors.

    :param ballots: Ballots to check. Not modified.
    '''
    seen_voters = set()
    for ballot in ballots:
        if ballot.voter in seen_voters:
            yield DuplicateVoterError(ballot.voter)
        seen_voters.add(ballot.voter)
        if not ballot.votes:
            yield EmptyBallotError(ballot.voter)
        seen_votes = set()
        for vote in ballot.votes:
            if vote in seen_votes:
                yield DuplicateVoteError(ballot.voter, vote)
            seen_votes.add(vote)


def validate(ballots: Iterable[Ballot]) -> List[str]:
    '''Describe all rule violations in a ballot collection.

    :param ballots: Ballots to check. Not modified.
    :returns: Messages naming the offending voter and the problem, in the
        order given by :func:`check`. Empty if the ballots are fine.
    '''
    messages = [str(error) for error in check(ballots)]
    logger.debug('%d ballot problems found', len(messages))
    return messages
