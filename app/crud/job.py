"""
Data access for jobs.

JobRepository is the only place that builds SQL for the jobs table. Every
value reaches the database through a positional placeholder; identifiers
come from fixed strings or from sql_for_partial_update, which quotes them.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from app.core.database import QueryExecutor
from app.core.exceptions import NotFoundError
from app.core.sql import sql_for_partial_update

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# Application field name -> column name, for partial updates
JOB_FIELD_MAP = {"companyHandle": "company_handle"}


def _equity_param(equity: Any) -> Optional[str]:
    """
    Bind equity as plain fixed-point text, without trailing zeros.

    NUMERIC keeps the scale it is given, so 0.0 would otherwise be stored and
    read back as "0.0" rather than "0".
    """
    if equity is None:
        return None
    if isinstance(equity, float):
        equity = str(equity)
    text = format(Decimal(equity), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _equity_text(equity: Any) -> str:
    """Render a stored equity value without exponent or lost digits."""
    if isinstance(equity, float):
        equity = str(equity)
    return format(Decimal(equity), "f")


def _to_job(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Shape a result row into a job record; equity comes back as a string."""
    job = dict(row)
    if job.get("equity") is not None:
        job["equity"] = _equity_text(job["equity"])
    return job


class JobRepository:
    """
    Create, read, update, delete and search jobs.

    Records are dicts shaped {id, title, salary, equity, companyHandle}.
    """

    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    def create(
        self,
        title: str,
        company_handle: str,
        salary: Optional[int] = None,
        equity: Any = None
    ) -> Dict[str, Any]:
        """
        Insert a new job and return it with its generated id.

        The company handle is not checked beforehand; an unknown handle fails
        on the foreign key and that error propagates as-is.
        """
        rows = self.executor.execute(
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}""",
            [title, salary, _equity_param(equity), company_handle],
        )
        job = _to_job(rows[0])

        logger.info(f"Created job {job['id']}: {job['title']} ({job['companyHandle']})")
        return job

    def find_all(self) -> List[Dict[str, Any]]:
        """Return every job, grouped by company handle."""
        rows = self.executor.execute(
            f"""SELECT {JOB_COLUMNS}
                FROM jobs
                ORDER BY company_handle, id"""
        )
        return [_to_job(row) for row in rows]

    def get(self, job_id: int) -> Dict[str, Any]:
        """
        Return a single job.

        Raises:
            NotFoundError: If no job has this id
        """
        rows = self.executor.execute(
            f"""SELECT {JOB_COLUMNS}
                FROM jobs
                WHERE id = $1""",
            [job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")

        return _to_job(rows[0])

    def update(self, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partially update a job.

        Only keys present in `data` change; a `None` value clears the column.
        Keys are application field names (title, salary, equity, ...).

        Raises:
            BadRequestError: If `data` is empty
            NotFoundError: If no job has this id
        """
        data = dict(data)
        if "equity" in data:
            data["equity"] = _equity_param(data["equity"])

        set_cols, values = sql_for_partial_update(data, JOB_FIELD_MAP)
        id_idx = len(values) + 1

        rows = self.executor.execute(
            f"""UPDATE jobs
                SET {set_cols}
                WHERE id = ${id_idx}
                RETURNING {JOB_COLUMNS}""",
            [*values, job_id],
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")

        logger.info(f"Updated job {job_id}: {', '.join(data)}")
        return _to_job(rows[0])

    def remove(self, job_id: int) -> None:
        """
        Delete a job.

        Existence is checked first so that deleting a missing id is reported
        instead of silently affecting zero rows. The check and the delete are
        separate statements.

        Raises:
            NotFoundError: If no job has this id
        """
        exists = self.executor.execute(
            """SELECT id
               FROM jobs
               WHERE id = $1""",
            [job_id],
        )
        if not exists:
            raise NotFoundError(f"No job: {job_id}")

        self.executor.execute(
            """DELETE
               FROM jobs
               WHERE id = $1""",
            [job_id],
        )
        logger.info(f"Deleted job {job_id}")

    def find_filtered(self, filters: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Return jobs matching every given filter, grouped by company handle.

        Filters (all optional, None means absent):
            title: case-insensitive substring of the title
            minSalary: salary >= this value
            hasEquity: if truthy, equity > 0; falsy adds no constraint
        """
        filters = filters or {}
        where_expressions = []
        query_values = []

        title = filters.get("title")
        min_salary = filters.get("minSalary")
        has_equity = filters.get("hasEquity")

        if title is not None:
            query_values.append(f"%{title}%")
            where_expressions.append(f"lower(title) LIKE lower(${len(query_values)})")

        if min_salary is not None:
            query_values.append(min_salary)
            where_expressions.append(f"salary >= ${len(query_values)}")

        if has_equity:
            query_values.append(0)
            where_expressions.append(f"equity > ${len(query_values)}")

        query = f"SELECT {JOB_COLUMNS} FROM jobs"
        if where_expressions:
            query += " WHERE " + " AND ".join(where_expressions)
        query += " ORDER BY company_handle, id"

        rows = self.executor.execute(query, query_values)
        return [_to_job(row) for row in rows]

    def find_by_company_handle(self, company_handle: str) -> List[Dict[str, Any]]:
        """Return the jobs posted by one company."""
        rows = self.executor.execute(
            f"""SELECT {JOB_COLUMNS}
                FROM jobs
                WHERE company_handle = $1
                ORDER BY id""",
            [company_handle],
        )
        return [_to_job(row) for row in rows]
