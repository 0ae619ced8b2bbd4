from datetime import datetime
from typing import Dict, Optional

from commerce_services.applications.interfaces.dtos.base import CamelModel


class ErrorResponse(CamelModel):
    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    validation_errors: Optional[Dict[str, str]] = None
