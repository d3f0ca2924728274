"""Input/output of ballots in text formats.

This subpackage is structured into modules by format. Currently, the only
format is the plain-text thread dump of :mod:`capvote.io.posts`.
"""
