"""APScheduler wrapper exposing higher level helpers."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
from apscheduler.triggers.interval import IntervalTrigger

from ..config import ScheduleConfig, ScheduleType
from ..logging_conf import component_logger


class APSchedulerAdapter:
    """Manage APScheduler jobs on a background thread."""

    def __init__(self) -> None:
        self.scheduler = BackgroundScheduler()
        self.logger = component_logger("scheduler")
        self.started = False

    def start(self) -> None:
        if not self.started:
            self.scheduler.start()
            self.started = True
            self.logger.info("apscheduler_started")

    def shutdown(self) -> None:
        if self.started:
            self.scheduler.shutdown(wait=False)
            self.started = False
            self.logger.info("apscheduler_stopped")

    def schedule_job(
        self,
        job_id: str,
        callback: Callable[[], Any],
        schedule: ScheduleConfig,
        run_immediately: bool = False,
    ) -> None:
        trigger = self._build_trigger(schedule)
        options: dict[str, Any] = {
            "trigger": trigger,
            "id": job_id,
            "replace_existing": True,
            "max_instances": 1,
            "coalesce": True,
        }
        if run_immediately:
            options["next_run_time"] = datetime.now()
        self.scheduler.add_job(callback, **options)
        self.logger.info("job_scheduled", job_id=job_id, schedule=schedule.model_dump(mode="json"))

    def remove_job(self, job_id: str) -> None:
        try:
            self.scheduler.remove_job(job_id)
        except Exception:  # noqa: BLE001
            self.logger.warning("job_remove_failed", job_id=job_id)

    def _build_trigger(self, schedule: ScheduleConfig):
        if schedule.type is ScheduleType.CRON:
            return CronTrigger.from_crontab(str(schedule.value))
        if schedule.type is ScheduleType.INTERVAL:
            if isinstance(schedule.value, (int, float)):
                return IntervalTrigger(seconds=float(schedule.value))
            if isinstance(schedule.value, dict):
                return IntervalTrigger(**schedule.value)
            raise ValueError("Interval schedule requires seconds or kwargs dict")
        raise ValueError(f"Unknown schedule type: {schedule.type}")


__all__ = ["APSchedulerAdapter"]
