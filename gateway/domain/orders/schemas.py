"""Order domain schemas"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class OrderSearchArguments(BaseModel):
    customer_name: str = ""
    status: str = ""
    date_before: Optional[datetime] = None
    date_after: Optional[datetime] = None
