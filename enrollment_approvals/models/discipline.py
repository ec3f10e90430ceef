from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String
from enrollment_approvals.db.base_class import Base

class Discipline(Base):
    __tablename__ = "disciplines"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(160), unique=True, index=True)

    offers = relationship("Offer", back_populates="discipline")
