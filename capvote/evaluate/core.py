'''General poll evaluator machinery and simple counting evaluators.'''

import abc
import logging
from typing import Collection, Dict, List

import capvote.util
from capvote.candidate import User
from capvote.result import Entry, DECREASING
from capvote.vote import Ballot


logger = logging.getLogger(__name__)


class Poll(metaclass=abc.ABCMeta):
    '''Tally ballots into a ranking.

    A root abstract base class for all evaluators. The evaluators hold no
    state between calls, so a single instance can be shared freely.
    '''
    @abc.abstractmethod
    def tally(self, ballots: Collection[Ballot]) -> List[Entry]:
        '''Tally ballots into a ranking.

        :param ballots: Ballots to count. A collection rather than any
            iterable, since some evaluators need the number of voters.
            It is not modified.
        :returns: Result entries ranked from the best candidate to the worst,
            with no candidate repeated. Empty if no ballot contains any
            preference. The meaning of the scores and the exact ranking
            criteria are given by the evaluator.
        '''
        raise NotImplementedError


class Plurality(Poll):
    '''First-past-the-post voting evaluator (single bold voting).

    Counts the first preferences only, the rest of the ballot is disregarded.
    Ballots with no preferences are not counted. Ranks all candidates with
    at least one first preference by the number of those, highest first.
    '''
    def tally(self, ballots: Collection[Ballot]) -> List[Entry]:
        counts: Dict[User, int] = {}
        for ballot in ballots:
            if ballot.votes:
                capvote.util.add_vote(counts, ballot.votes[0])
        logger.debug('first preference totals: %s', counts)
        return capvote.util.counts_to_ranking(counts, DECREASING)


class Approval(Poll):
    '''Approval voting evaluator (multiple bold voting).

    Every vote on a ballot counts once for the candidate it names, regardless
    of its position. Ranks all candidates named anywhere by the number of
    votes naming them, highest first.

    A ballot naming a candidate twice gives them two votes; use
    :func:`capvote.vote.check` to find such ballots beforehand.
    '''
    def tally(self, ballots: Collection[Ballot]) -> List[Entry]:
        counts: Dict[User, int] = {}
        for ballot in ballots:
            for vote in ballot.votes:
                capvote.util.add_vote(counts, vote)
        logger.debug('approval totals: %s', counts)
        return capvote.util.counts_to_ranking(counts, DECREASING)
