"""
Dashboard service - platform-wide aggregates
"""

import asyncio
import logging
from typing import Any, Dict, List

from esigma.models.dashboard import Dashboard
from esigma.models.enums import ErrorType
from esigma.services.base_service import BaseService, ServiceResult
from esigma.services.demo_data import demo_dashboard
from esigma.utils.error_handling import log_service_error

logger = logging.getLogger(__name__)


def summarize_results(results: List[Dict[str, Any]]) -> Dict[str, float]:
    """
    Attempt count, average score and pass rate (percent) over test result rows

    Both averages are 0 for an empty result set.
    """
    total = len(results)
    if total == 0:
        return {"total_attempts": 0, "average_score": 0.0, "pass_rate": 0.0}

    passed = sum(1 for result in results if result.get("is_passed"))
    score_sum = sum(float(result.get("score") or 0) for result in results)

    return {
        "total_attempts": total,
        "average_score": score_sum / total,
        "pass_rate": passed / total * 100,
    }


class DashboardService(BaseService):
    """Service for dashboard aggregation"""

    async def get_dashboard_data(self) -> ServiceResult:
        """
        Compute the dashboard aggregate

        Live data only fills the totals, average score and pass rate; the
        activity feed and breakdowns are populated in demo mode only.

        Returns:
            ServiceResult with Dashboard; on failure a zeroed Dashboard
        """
        logger.info("Fetching dashboard data")

        if self.demo_mode:
            logger.info("Database not configured, returning demo dashboard")
            return ServiceResult.ok(
                "Dashboard data fetched successfully (Demo Mode)",
                demo_dashboard()
            )

        try:
            # Independent reads; all settle before any failure is reported
            outcomes = await asyncio.gather(
                self.db.count("users"),
                self.db.count("surveys"),
                self.db.select("test_results"),
                return_exceptions=True
            )
            for outcome in outcomes:
                if isinstance(outcome, BaseException):
                    raise outcome

            total_users, total_surveys, results = outcomes

            dashboard = Dashboard(
                total_users=total_users or 0,
                total_surveys=total_surveys or 0,
                **summarize_results(results or [])
            )
            return ServiceResult.ok("Dashboard data fetched successfully", dashboard)

        except Exception as e:
            log_service_error(type(self).__name__, "get_dashboard_data", e)
            return ServiceResult.fail(
                f"Failed to fetch dashboard data: {str(e) or 'Unknown error'}",
                ErrorType.EXECUTION_ERROR,
                Dashboard.empty()
            )
