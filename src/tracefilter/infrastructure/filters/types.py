"""Filter type alias.

Python 3.12+ PEP 695 type alias syntax.
Filter function: takes HTTPRequest, returns True to include.
"""

from collections.abc import Callable

from tracefilter.domain.events import HTTPRequest

type RequestFilter = Callable[[HTTPRequest], bool]
