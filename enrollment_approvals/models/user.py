from sqlalchemy import Column, Integer, String

from enrollment_approvals.db.base_class import Base


ROLE_PARTICIPANT = "Participante"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    email = Column(String(160), nullable=False, unique=True, index=True)
    hashed_password = Column(String(255), nullable=False)
    # papel único, como no painel de origem ("Administrador", "Participante", ...)
    role = Column(String(32), nullable=False, default=ROLE_PARTICIPANT)
    status = Column(String(20), nullable=False, default="active")
