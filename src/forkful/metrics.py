"""Prometheus metrics definitions for Forkful."""

from __future__ import annotations

from prometheus_client import Counter

REPOSITORY_REQUESTS = Counter(
    "forkful_repository_requests_total",
    "Requests issued to the recipe collection service",
    ["resource", "outcome"],
)

SEARCHES = Counter(
    "forkful_searches_total",
    "Searches committed from the search input",
    ["kind"],
)

__all__ = [
    "REPOSITORY_REQUESTS",
    "SEARCHES",
]
