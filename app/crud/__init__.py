"""
Data-access layer for database entities.

Repositories take a query executor and build parameterized SQL, keeping
the API routes free of database details.
"""

from app.crud.company import CompanyRepository
from app.crud.job import JobRepository

__all__ = ["CompanyRepository", "JobRepository"]
