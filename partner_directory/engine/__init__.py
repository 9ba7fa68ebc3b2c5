"""Engine components covering fetch → parse → join → cache."""

from .cache import CacheState, JoinedCache
from .fetcher import Batch, BatchFetcher, Fetcher, plan_batches
from .joiner import join
from .parser import EnvelopeParser
from .records import PartnerSolution, RawPartner, RawSolution, Solution, normalize_name
from .thread_pool import ThreadPoolManager

__all__ = [
    "Batch",
    "BatchFetcher",
    "CacheState",
    "EnvelopeParser",
    "Fetcher",
    "JoinedCache",
    "PartnerSolution",
    "RawPartner",
    "RawSolution",
    "Solution",
    "ThreadPoolManager",
    "join",
    "normalize_name",
    "plan_batches",
]
