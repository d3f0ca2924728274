'''Various utility functions for other modules of Capvote.

There should normally be no need to use these functions directly.
'''

from numbers import Number
from typing import Collection, Dict, Iterable, List

from capvote.candidate import User
from capvote.result import Entry, Ordering, rank
from capvote.vote import Ballot


def remove_candidates(ballots: Iterable[Ballot],
                      candidates: Collection[User],
                      ) -> List[Ballot]:
    '''Strike candidates from all ballots.

    :param ballots: Ballots to filter. Neither the collection nor the ballots
        are modified.
    :param candidates: Candidates to remove from the ballots.
    :returns: A new list of ballots without the given candidates, in the
        original order. Ballots with no preferences left are dropped.
    '''
    filtered = []
    for ballot in ballots:
        new_ballot = ballot.without(candidates)
        if new_ballot.votes:
            filtered.append(new_ballot)
    return filtered


def all_candidates(ballots: Iterable[Ballot]) -> List[User]:
    '''Return a list of all candidates appearing on any of the ballots.

    Preserves the order of first appearance, going through the ballots in
    order and through each ballot from its first preference.
    '''
    return list(dict.fromkeys(
        vote for ballot in ballots for vote in ballot.votes
    ))


def add_vote(counts: Dict[User, Number], candidate: User) -> None:
    counts[candidate] = counts.get(candidate, 0) + 1


def counts_to_ranking(counts: Dict[User, Number],
                      ordering: Ordering,
                      ) -> List[Entry]:
    return rank(
        (Entry(cand, n_votes) for cand, n_votes in counts.items()),
        ordering
    )
