"""Named poll systems available for selection by key.

The set of systems is fixed: first-past-the-post, approval, instant-runoff
and preferential block voting. The evaluators are stateless, so each system
is a single shared instance.
"""

from typing import Collection, Dict, List

import capvote.evaluate
from capvote.result import Entry
from capvote.vote import Ballot


class VotingSystem:
    """A named poll system. Wraps a poll evaluator.

    :param name: Human-readable name of the system.
    :param evaluator: Evaluator implementing the system.
    """
    def __init__(self, name: str, evaluator: capvote.evaluate.Poll):
        self.name = name
        self.evaluator = evaluator

    def tally(self, ballots: Collection[Ballot]) -> List[Entry]:
        """Return the evaluator's ranking for the ballots given."""
        return self.evaluator.tally(ballots)

    def __repr__(self) -> str:
        return f'<VotingSystem({self.name})>'


SYSTEMS: Dict[str, VotingSystem] = {
    'FPTPV': VotingSystem(
        'First-past-the-post', capvote.evaluate.Plurality()
    ),
    'AV': VotingSystem('Approval', capvote.evaluate.Approval()),
    'IRV': VotingSystem('Instant-runoff', capvote.evaluate.InstantRunoff()),
    'PBV': VotingSystem(
        'Preferential block', capvote.evaluate.PreferentialBlock()
    ),
}


def get_system(key: str) -> VotingSystem:
    """Return the poll system registered under a key, ignoring its case.

    :raises ValueError: If no such system exists.
    """
    try:
        return SYSTEMS[key.upper()]
    except KeyError as e:
        raise ValueError(
            f'unknown voting system {key!r}, available: '
            + ', '.join(SYSTEMS.keys())
        ) from e


def tally(ballots: Collection[Ballot], system: str = 'IRV') -> List[Entry]:
    """Tally ballots under the poll system registered under a key.

    :param ballots: Ballots to count. Not modified.
    :param system: Key of the system, see :data:`SYSTEMS`.
    :raises ValueError: If the system key is unknown.
    """
    return get_system(system).tally(ballots)
