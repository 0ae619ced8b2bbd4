from typing import Dict

from pydantic import BaseModel


class HomeInfo(BaseModel):
    application: str
    version: str
    status: str
    endpoints: Dict[str, str]
