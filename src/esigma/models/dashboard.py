"""
Dashboard aggregate models
"""

from typing import List
from datetime import datetime
from pydantic import Field

from esigma.models.base import CamelModel
from esigma.models.enums import ActivityType


class Activity(CamelModel):
    id: str
    type: ActivityType
    description: str
    user_id: str
    user_name: str
    timestamp: datetime


class ChartData(CamelModel):
    name: str
    value: float
    total: float
    percentage: float


class TrendData(CamelModel):
    month: str
    attempts: int
    passed: int
    failed: int
    pass_rate: float


class Dashboard(CamelModel):
    total_users: int = 0
    total_surveys: int = 0
    total_attempts: int = 0
    average_score: float = 0
    pass_rate: float = 0
    recent_activity: List[Activity] = Field(default_factory=list)
    performance_by_role: List[ChartData] = Field(default_factory=list)
    performance_by_survey: List[ChartData] = Field(default_factory=list)
    monthly_trends: List[TrendData] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "Dashboard":
        """Fully zeroed aggregate"""
        return cls()
