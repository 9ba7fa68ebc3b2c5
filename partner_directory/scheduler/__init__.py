"""Scheduling of the periodic refresh."""

from .apsched_adapter import APSchedulerAdapter
from .refresh import REFRESH_JOB_ID, RefreshDriver

__all__ = ["APSchedulerAdapter", "REFRESH_JOB_ID", "RefreshDriver"]
