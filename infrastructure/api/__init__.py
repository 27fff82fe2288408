"""Infrastructure API module."""
from .faceit_client import FaceitAPIClient, ProbeResult
from .retry_policy import RateLimitRetryPolicy
from .pagination import page_items, iter_pages, collect_all

__all__ = [
    'FaceitAPIClient',
    'ProbeResult',
    'RateLimitRetryPolicy',
    'page_items',
    'iter_pages',
    'collect_all',
]
