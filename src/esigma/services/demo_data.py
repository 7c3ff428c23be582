"""
Fixed data served when no database is configured
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from esigma.models.dashboard import Activity, ChartData, Dashboard, TrendData
from esigma.models.enums import ActivityType
from esigma.models.user import Role, User
from esigma.utils.security import generate_token

# Shared by every demo account
DEMO_PASSWORD = "password123"

DEMO_ROLES: Dict[str, Role] = {
    "admin": Role(id="1", name="Admin", level=1, description="System Administrator"),
    "zo": Role(id="2", name="ZO User", level=2, description="Zonal Office User"),
    "ro": Role(id="3", name="RO User", level=3, description="Regional Office User"),
    "supervisor": Role(id="4", name="Supervisor", level=4, description="Field Supervisor"),
    "enumerator": Role(id="5", name="Enumerator", level=5, description="Field Enumerator"),
}

DEMO_ACCOUNTS: List[Dict[str, str]] = [
    {
        "id": "550e8400-e29b-41d4-a716-446655440010",
        "email": "admin@esigma.com",
        "name": "System Administrator",
        "role": "admin",
        "jurisdiction": "National",
    },
    {
        "id": "550e8400-e29b-41d4-a716-446655440011",
        "email": "zo@esigma.com",
        "name": "Zonal Officer",
        "role": "zo",
        "jurisdiction": "North Zone",
    },
    {
        "id": "550e8400-e29b-41d4-a716-446655440012",
        "email": "ro@esigma.com",
        "name": "Regional Officer",
        "role": "ro",
        "jurisdiction": "Delhi Region",
    },
    {
        "id": "550e8400-e29b-41d4-a716-446655440013",
        "email": "supervisor@esigma.com",
        "name": "Field Supervisor",
        "role": "supervisor",
        "jurisdiction": "Central Delhi District",
    },
    {
        "id": "550e8400-e29b-41d4-a716-446655440014",
        "email": "enumerator@esigma.com",
        "name": "Field Enumerator",
        "role": "enumerator",
        "jurisdiction": "Block A, Central Delhi",
    },
]


def find_demo_user(email: str) -> Optional[User]:
    """Build the full demo user record for an email, with fresh timestamps"""
    account = next((a for a in DEMO_ACCOUNTS if a["email"] == email), None)
    if account is None:
        return None

    role = DEMO_ROLES[account["role"]]
    now = datetime.now(timezone.utc)
    return User(
        id=account["id"],
        email=account["email"],
        name=account["name"],
        role_id=role.id,
        role=role,
        jurisdiction=account["jurisdiction"],
        is_active=True,
        created_at=now,
        updated_at=now,
    )


def demo_dashboard() -> Dashboard:
    return Dashboard(
        total_users=25,
        total_surveys=3,
        total_attempts=150,
        average_score=78.5,
        pass_rate=82.3,
        recent_activity=[
            Activity(
                id=generate_token(),
                type=ActivityType.TEST_COMPLETED,
                description="Field Enumerator completed Digital Literacy Assessment",
                user_id="550e8400-e29b-41d4-a716-446655440014",
                user_name="Field Enumerator",
                timestamp=datetime.now(timezone.utc),
            )
        ],
        performance_by_role=[
            ChartData(name="Admin", value=1, total=1, percentage=100),
            ChartData(name="ZO User", value=5, total=5, percentage=100),
            ChartData(name="RO User", value=8, total=10, percentage=80),
            ChartData(name="Supervisor", value=15, total=20, percentage=75),
            ChartData(name="Enumerator", value=45, total=60, percentage=75),
        ],
        performance_by_survey=[
            ChartData(name="Digital Literacy", value=35, total=50, percentage=70),
            ChartData(name="Data Collection", value=28, total=40, percentage=70),
            ChartData(name="Survey Methodology", value=32, total=45, percentage=71),
        ],
        monthly_trends=[
            TrendData(month="Jan", attempts=45, passed=35, failed=10, pass_rate=77.8),
            TrendData(month="Feb", attempts=52, passed=42, failed=10, pass_rate=80.8),
            TrendData(month="Mar", attempts=48, passed=40, failed=8, pass_rate=83.3),
        ],
    )
