'''Evaluate poll ballots into rankings.

All evaluators share the :class:`core.Poll` interface: a ``tally()`` method
turning a collection of :class:`capvote.vote.Ballot` objects into a list of
:class:`capvote.result.Entry` objects, best candidate first.

-   :class:`core.Plurality` counts first preferences only.
-   :class:`core.Approval` counts every candidate named on a ballot.
-   :class:`sequential.InstantRunoff` eliminates the weakest candidates until
    someone wins a majority, and returns the winner (or tied winners).
-   :class:`sequential.PreferentialBlock` ranks all candidates by repeated
    instant-runoff counts.

None of the evaluators validate the ballots; use the tools in the
:mod:`capvote.vote` module for that.
'''

from capvote.evaluate.core import *    # noqa
from capvote.evaluate.sequential import (    # noqa
    InstantRunoff, PreferentialBlock,
)
