"""A commandline tool for tallying a forum poll saved as a thread dump.

Reads ballots in the format of :mod:`capvote.io.posts`, optionally checks
them for duplicate or empty posts and repeated votes, and prints the ranking
under the selected poll system.
"""

import argparse
import io
import logging
import sys
import warnings
from typing import List, Optional

import capvote.io.core
import capvote.io.posts
import capvote.system
import capvote.util
import capvote.vote
from capvote.result import Entry
from capvote.vote import Ballot

argparser = argparse.ArgumentParser(
    prog='capvote',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-i', '--input-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='file to load the thread dump from',
)
argparser.add_argument(
    '-I', '--use-stdin',
    action='store_true',
    help='load the thread dump from standard input',
)
argparser.add_argument(
    '-s', '--system',
    default='IRV',
    help=(
        'poll system to use, one of: '
        + ', '.join(capvote.system.SYSTEMS.keys())
    ),
)
argparser.add_argument(
    '-V', '--validate',
    action='store_true',
    help='check the ballots for problems before tallying',
)
argparser.add_argument(
    '--strict',
    action='store_true',
    help='refuse to tally if the ballots have any problems (implies -V)',
)
argparser.add_argument(
    '--skip-opening',
    action='store_true',
    help='ignore the first post of the thread',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all evaluator log messages, including vote totals',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any evaluator log messages',
)


def main(input_file: Optional[io.TextIOBase] = None,
         use_stdin: bool = False,
         system: str = 'IRV',
         validate: bool = False,
         strict: bool = False,
         skip_opening: bool = False,
         verbose: bool = False,
         quiet: bool = False,
         ) -> int:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    if use_stdin:
        input_file = sys.stdin
    poll_system = capvote.system.get_system(system)
    source = getattr(input_file, 'name', 'input')
    print(f'Running {poll_system.name} poll on {source}...')
    print()
    ballots = capvote.io.posts.load(input_file, skip_opening=skip_opening)
    if not ballots:
        warnings.warn('no ballots found: cannot tally the poll, terminating')
        return 0
    if validate or strict:
        problems = verify(ballots)
        if strict and problems:
            print(f'{len(problems)} invalid votes, not tallying')
            return 1
    show_vote_stats(ballots)
    show_results(poll_system.name, poll_system.tally(ballots))
    print()
    print(f'Total voters: {len(ballots)}')
    return 0


def verify(ballots: List[Ballot]) -> List[str]:
    """Print all problems found in the ballots and return them."""
    print('Verifying ballots...')
    problems = capvote.vote.validate(ballots)
    for problem in problems:
        print(problem)
    print('End of verification.')
    print()
    return problems


def show_vote_stats(ballots: List[Ballot]) -> None:
    all_cands = sorted(
        capvote.util.all_candidates(ballots),
        key=lambda cand: cand.key
    )
    print(f'{len(all_cands)} candidates with any votes cast'
          f' (in alphabetical order):')
    for cand in all_cands:
        print(' ' * 10 + str(cand))
    print()


def show_results(name: str, results: List[Entry]) -> None:
    print(f'{name} results:')
    if not results:
        print('Nobody ranked')
    for entry in results:
        print(entry)


if __name__ == '__main__':
    args = argparser.parse_args()
    if not args.input_file and not args.use_stdin:
        argparser.print_usage()
    else:
        try:
            sys.exit(main(**vars(args)))
        except (ValueError, capvote.io.core.ParseError) as e:
            argparser.error(str(e))
