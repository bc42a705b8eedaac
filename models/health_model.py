from typing import Dict, Optional
from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    message: str
    services: Optional[Dict[str, bool]] = None
