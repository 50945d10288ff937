# -*- coding: utf-8 -*-
"""
Exceptions raised by the trip pipeline stages.

Row-level problems (bad coordinates, unparseable timestamps) are normally
handled by dropping the row; these exceptions cover the cases that abort a run.
"""


class TripPipelineError(Exception):
    """Base class for all pipeline failures."""


class LoadError(TripPipelineError):
    """Input file is missing, unreadable, or holds no usable rows."""


class ParseError(TripPipelineError):
    """A timestamp or numeric field could not be parsed (strict mode only)."""


class EmptyResultError(TripPipelineError):
    """An aggregation or chart received zero rows after filtering."""
