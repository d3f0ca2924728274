"""Plain-text forum thread dumps.

A poll thread saved as text, with every post introduced by a header line
naming its author::

    # CAP 30 - name poll, round 1
    == Voter1
    Candidate A
    Candidate B

    I like A more, but B is fine too.
    == Voter2
    candidate b

Each post is one ballot. Its preferences are the lines following the header
up to the first blank line, best first. Whatever follows that blank line up
to the next header is commentary and is ignored, as are ``#`` comment lines
before the first post. A header followed by a blank line right away gives
a ballot with no preferences.

All users are created once per distinct name (ignoring case), so the same
:class:`capvote.candidate.User` object is shared by all ballots mentioning
that name. The capitalization of its first occurrence is kept.
"""

import logging
from typing import Dict, Iterable, List

import capvote.io.core
from capvote.candidate import User
from capvote.vote import Ballot


HEADER_PREFIX = '=='
COMMENT_PREFIX = '#'

logger = logging.getLogger(__name__)


class PostsParseError(capvote.io.core.ParseError):
    pass


def load_lines(lines: Iterable[str],
               skip_opening: bool = False,
               ) -> List[Ballot]:
    '''Parse ballots from the lines of a thread dump.

    :param lines: Lines of the dump, with or without line terminators.
    :param skip_opening: Drop the first post of the thread, which usually
        announces the poll instead of voting in it.
    :raises PostsParseError: If there is text other than comments before
        the first post, or a post header has no author name.
    '''
    users: Dict[str, User] = {}
    ballots = []
    voter = None
    votes = []
    in_votes = False
    for line_no, line in enumerate(lines, start=1):
        text = line.strip()
        if text.startswith(HEADER_PREFIX):
            if voter is not None:
                ballots.append(Ballot(voter, votes))
            name = text[len(HEADER_PREFIX):].strip()
            if not name:
                raise PostsParseError('post header without author', line_no)
            voter = _get_user(users, name)
            votes = []
            in_votes = True
        elif voter is None:
            if text and not text.startswith(COMMENT_PREFIX):
                raise PostsParseError(
                    f'text before the first post: {text!r}', line_no
                )
        elif not text:
            # blank line, the rest of the post is commentary
            in_votes = False
        elif in_votes:
            votes.append(_get_user(users, text))
    if voter is not None:
        ballots.append(Ballot(voter, votes))
    if skip_opening and ballots:
        logger.debug('skipping opening post by %s', ballots[0].voter)
        ballots = ballots[1:]
    logger.info('loaded %d ballots', len(ballots))
    return ballots


load, loads = capvote.io.core.loaders(load_lines)


def _get_user(users: Dict[str, User], name: str) -> User:
    user = User(name)
    return users.setdefault(user.key, user)


def dump_lines(ballots: Iterable[Ballot]) -> Iterable[str]:
    for ballot in ballots:
        yield f'{HEADER_PREFIX} {ballot.voter.name}'
        for vote in ballot.votes:
            yield vote.name
        yield ''


dump, dumps = capvote.io.core.dumpers(dump_lines)
