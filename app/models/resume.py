from sqlalchemy import Column, Integer, String, DateTime, func
from app.core.database import Base


class Resume(Base):
    """
    A resume owned by a user.

    Only its existence matters to the application workflow; the content is
    never inspected here.
    """
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    title = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Resume(id={self.id}, user_id={self.user_id})>"
