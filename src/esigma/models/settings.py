"""
System settings Pydantic models
"""

from typing import List, Optional
from datetime import datetime

from esigma.models.base import CamelModel


class SystemSetting(CamelModel):
    id: str
    category: str
    key: str
    value: str
    description: Optional[str] = None
    type: str
    is_editable: bool = True
    options: Optional[List[str]] = None
    updated_at: Optional[datetime] = None
    updated_by: str = "System"
