"""Capvote - tallying ranked forum polls.

Capvote turns a collection of ranked ballots, each one a voter with an
ordered list of preferred candidates, into an ordered ranking under one of
a fixed set of voting rules.

The package is organized as follows:

-   Voters and candidates are both represented by :class:`candidate.User`
    objects, whose names compare case-insensitively.
-   Ballots and their structural checks live in the ``vote`` module. Checking
    is diagnostic only; no evaluator refuses a malformed ballot collection.
-   The ``evaluate`` subpackage holds the tallying rules: plurality and
    approval counting in :mod:`evaluate.core`, instant-runoff and its
    multi-winner sequential extension in :mod:`evaluate.sequential`.
-   Their results are lists of :class:`result.Entry` objects, ordered best
    first by one of the two orderings from the ``result`` module.
-   The :mod:`system` module names the available rules so that they can be
    selected by key, e.g. from the command line (``python -m capvote``).
"""
