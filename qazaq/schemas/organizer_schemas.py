from pydantic import BaseModel
from typing import Optional

class OrganizerServiceRead(BaseModel):
    id: int
    title: str
    category: str
    price: int
    description: Optional[str] = None

    class Config:
        from_attributes = True
