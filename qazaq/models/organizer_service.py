from sqlalchemy import Column, Integer, String
from qazaq.core.database import Base

class OrganizerService(Base):
    __tablename__ = "organizer_services"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    category = Column(String, nullable=False)
    price = Column(Integer, nullable=False, default=0)
    description = Column(String, default="")
