'''User identities acting as voters and candidates.

In forum polls, the people voting and the options voted for are both forum
users, referred to by their user names. Those names are typed in by hand in
ballots and their capitalization varies, so a :class:`User` compares and
hashes case-insensitively while still displaying the name as it was first
written. Sets, dictionary keys and vote counts then merge differently
capitalized spellings of one name without any special handling.
'''

from typing import Any, Dict


class User:
    '''A named forum user, either casting votes or being voted for.

    Two users are equal if their names are equal when case is ignored.
    The original capitalization is kept for display.

    :param name: User name as written by the forum or the voter.
    '''
    __slots__ = ('_name', '_key')

    def __init__(self, name: str):
        self._name = name
        self._key = name.casefold()

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        '''The case-folded name used for comparison and ordering.'''
        return self._key

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f'<User({self._name})>'

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self._name}
