'''Evaluators that operate sequentially on ranked ballots.

This hosts the instant-runoff evaluator (:class:`InstantRunoff`) and its
multi-winner extension, :class:`PreferentialBlock`, which orders all
candidates by repeatedly running instant-runoff and striking the winners.
Both work by re-tallying progressively filtered copies of the ballots; the
ballots passed in are never modified.
'''

import logging
import math
from typing import Collection, Iterator, List, Optional

import capvote.util
from capvote.evaluate.core import Poll, Plurality
from capvote.result import Entry, INCREASING, DECREASING, rank, leaders, \
    distinct_values
from capvote.vote import Ballot


logger = logging.getLogger(__name__)


def majority(population: int) -> int:
    '''Return the number of votes constituting a majority of a population.'''
    return math.floor(0.5 * population) + 1


class InstantRunoff(Poll):
    '''Instant-runoff voting (IRV) evaluator.

    Proceeds in rounds. Each round tallies the current ballots with
    the round evaluator (plurality of first preferences by default). If the
    leading candidate has fewer votes than a majority of all ballots
    originally passed in, all candidates tied for the last place are struck
    from the ballots, ballots left without preferences are discarded, and
    another round is tallied.

    The rounds stop once the leader reaches the majority, all remaining
    candidates are tied (including the case when only one is left), or no
    preferences remain at all. The ranking of the last round then
    determines the result: all candidates sharing the first place in it,
    with their last-round vote counts.

    Ballots with no preferences are never counted for anyone, but they
    count towards the population from which the majority is computed.

    :param round_evaluator: Evaluator to tally each round with. Must rank
        in :data:`capvote.result.DECREASING` order. Plurality of first
        preferences if not given.
    '''
    def __init__(self, round_evaluator: Optional[Poll] = None):
        if round_evaluator is None:
            round_evaluator = Plurality()
        self.round_evaluator = round_evaluator

    def tally(self, ballots: Collection[Ballot]) -> List[Entry]:
        '''Select the winner(s) by instant-runoff.

        :param ballots: Ballots to count. Not modified.
        :returns: All candidates tied for the first place in the last round,
            with their vote counts. A single winner unless the last round
            ended in a tie.
        '''
        ranking = []
        for ranking in self.rounds(ballots):
            pass
        return rank(leaders(ranking), DECREASING)

    def rounds(self, ballots: Collection[Ballot]) -> Iterator[List[Entry]]:
        '''Generate the rankings of the individual runoff rounds.

        :param ballots: Ballots to count. Not modified.
        :returns: An iterator over the rankings of all rounds, starting with
            the tally of the full ballots, ending with the round that
            determined the result.
        '''
        round_ballots = list(ballots)
        needed = majority(len(round_ballots))
        logger.info('%d ballots, majority at %d', len(round_ballots), needed)
        round_i = 0
        ranking = self.round_evaluator.tally(round_ballots)
        logger.info('round %d ranking: %s', round_i, _format(ranking))
        yield ranking
        while self._can_iterate(ranking, needed):
            last_value = ranking[-1].value
            last_places = {
                entry.candidate for entry in ranking
                if entry.value == last_value
            }
            logger.info(
                'eliminating %s',
                _format(sorted(last_places, key=lambda cand: cand.key))
            )
            round_ballots = capvote.util.remove_candidates(
                round_ballots, last_places
            )
            round_i += 1
            ranking = self.round_evaluator.tally(round_ballots)
            logger.info('round %d ranking: %s', round_i, _format(ranking))
            yield ranking

    @staticmethod
    def _can_iterate(ranking: List[Entry], needed: int) -> bool:
        if not ranking:
            logger.info('no preferences left, terminating')
            return False
        if distinct_values(ranking) == 1:
            logger.info('all remaining candidates tied, terminating')
            return False
        if ranking[0].value >= needed:
            logger.info('%s reached majority, terminating',
                        ranking[0].candidate)
            return False
        return True


class PreferentialBlock(Poll):
    '''Preferential block voting (PBV) evaluator.

    Ranks every candidate that appears on any ballot. The winners of
    an instant-runoff count form the best tier; they are then struck from the
    ballots (discarding ballots left without preferences) and the next
    instant-runoff count over the remaining ballots determines the next
    tier, and so on until no ballots remain.

    The scores are round numbers: the first tier gets 1, and each further
    tier gets the previous tier's number increased by the size of the
    previous tier. Candidates tied in a tier thus share a number and the
    number of every tier is one more than the count of candidates ranked
    above it, as in sports rankings. Lower numbers are better, so the
    result is in :data:`capvote.result.INCREASING` order.

    :param runoff: Evaluator selecting the winners of each tier.
        Instant-runoff if not given.
    '''
    def __init__(self, runoff: Optional[Poll] = None):
        if runoff is None:
            runoff = InstantRunoff()
        self.runoff = runoff

    def tally(self, ballots: Collection[Ballot]) -> List[Entry]:
        rankings = []
        round_i = 1
        round_ballots = list(ballots)
        while round_ballots:
            winners = [
                entry.candidate for entry in self.runoff.tally(round_ballots)
            ]
            logger.info('tier %d: %s', round_i, _format(winners))
            rankings.extend(Entry(cand, round_i) for cand in winners)
            round_ballots = capvote.util.remove_candidates(
                round_ballots, set(winners)
            )
            round_i += len(winners)
        return rank(rankings, INCREASING)


def _format(items) -> str:
    return ', '.join(str(item) for item in items)
