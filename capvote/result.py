'''Poll results: candidates paired with scores, and their orderings.

Every evaluator returns a ranking - a list of :class:`Entry` objects with
no candidate repeated, ordered from the best candidate to the worst.
What the score means differs between evaluators: a vote count in plurality
voting, a round number in preferential block voting. Whether a higher score
is better thus cannot be a property of the entry itself. Instead, this module
provides two orderings, :data:`DECREASING` and :data:`INCREASING`, to be used
as sort keys; the evaluator picks the one that fits its scores. Both break
score ties by the candidate name, ignoring case.
'''

from numbers import Real
from typing import Any, Callable, Dict, Iterable, List, Tuple

from capvote.candidate import User


class Entry:
    '''A candidate's score in a poll result.

    The score may be of any real number type. Entries compare it as a float,
    so ``Entry(u, 2)`` equals ``Entry(u, 2.0)``, but the original number is
    kept for display.

    :param candidate: The candidate scored.
    :param score: Their score; the meaning depends on the evaluator.
    '''
    __slots__ = ('_candidate', '_score', '_value')

    def __init__(self, candidate: User, score: Real):
        self._candidate = candidate
        self._score = score
        self._value = float(score)

    @property
    def candidate(self) -> User:
        return self._candidate

    @property
    def score(self) -> Real:
        return self._score

    @property
    def value(self) -> float:
        '''The score as a float, used for all comparisons.'''
        return self._value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return (
            self._candidate == other._candidate
            and self._value == other._value
        )

    def __hash__(self) -> int:
        return hash((self._candidate, self._value))

    def __str__(self) -> str:
        return f'{self._candidate}: {self._score}'

    def __repr__(self) -> str:
        return f'<Entry({self._candidate},{self._score})>'

    def to_dict(self) -> Dict[str, Any]:
        return {'candidate': self._candidate.to_dict(), 'score': self._score}


Ordering = Callable[[Entry], Tuple[float, str]]


def _name_key(entry: Entry) -> str:
    # lower-cased, not case-folded: 'ß' sorts after 'st'
    return entry.candidate.name.lower()


def decreasing(entry: Entry) -> Tuple[float, str]:
    '''Sort key putting the highest scores first.'''
    return -entry.value, _name_key(entry)


def increasing(entry: Entry) -> Tuple[float, str]:
    '''Sort key putting the lowest scores first.'''
    return entry.value, _name_key(entry)


DECREASING: Ordering = decreasing
INCREASING: Ordering = increasing


def rank(entries: Iterable[Entry], ordering: Ordering) -> List[Entry]:
    '''Form a ranking out of result entries.

    Duplicate entries are dropped.

    :param entries: Entries to rank.
    :param ordering: Sort key, :data:`DECREASING` or :data:`INCREASING`.
    :returns: Unique entries sorted by the ordering.
    '''
    return sorted(dict.fromkeys(entries), key=ordering)


def leaders(ranking: List[Entry]) -> List[Entry]:
    '''Return all entries sharing the first place score of a ranking.'''
    if not ranking:
        return []
    top_value = ranking[0].value
    return [entry for entry in ranking if entry.value == top_value]


def distinct_values(ranking: Iterable[Entry]) -> int:
    '''Return the number of distinct scores in a ranking.'''
    return len({entry.value for entry in ranking})
