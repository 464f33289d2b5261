"""Scheduled jobs."""

from .monthly_reset import build_scheduler, execute_monthly_reset, run_reset_once

__all__ = ["build_scheduler", "execute_monthly_reset", "run_reset_once"]
