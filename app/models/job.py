from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, Text
from app.core.database import Base

class Job(Base):
    """
    Job posting belonging to a company.

    The table is declared here so it can be created; all reads and writes go
    through app.crud.job with parameterized SQL.
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer, CheckConstraint("salary >= 0"), nullable=True)

    # Fixed-point, read back as a string by the repository
    equity = Column(Numeric, CheckConstraint("equity <= 1.0"), nullable=True)

    company_handle = Column(
        Text,
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', company_handle='{self.company_handle}')>"
