"""
Read access for companies.
"""

from typing import Any, Dict

from app.core.database import QueryExecutor
from app.core.exceptions import NotFoundError


class CompanyRepository:
    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    def get(self, handle: str) -> Dict[str, Any]:
        """
        Return a company by handle.

        Raises:
            NotFoundError: If no company has this handle
        """
        rows = self.executor.execute(
            """SELECT handle,
                      name,
                      description,
                      num_employees AS "numEmployees",
                      logo_url AS "logoUrl"
               FROM companies
               WHERE handle = $1""",
            [handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        return rows[0]
