"""Search state, pagination, debouncing and infinite scroll."""

from .controller import SearchController
from .debounce import Debouncer
from .exceptions import UserDetailsError
from .models import SearchDiscarded, SearchFailure, SearchOutcome, SearchPage, SearchState, SearchSuccess
from .scroll import ScrollEvents, ScrollTrigger, Subscription, ViewportMetrics

__all__ = [
    "SearchPage",
    "SearchState",
    "SearchSuccess",
    "SearchFailure",
    "SearchDiscarded",
    "SearchOutcome",
    "SearchController",
    "Debouncer",
    "UserDetailsError",
    "ScrollEvents",
    "ScrollTrigger",
    "Subscription",
    "ViewportMetrics",
]
