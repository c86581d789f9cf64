import logging
from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from app.core.deps import get_job_repository, require_admin
from app.core.exceptions import BadRequestError
from app.crud.job import JobRepository
from app.schemas.job import (
    JobCreateRequest,
    JobDeletedResponse,
    JobEnvelope,
    JobFilterParams,
    JobListEnvelope,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=JobEnvelope)
def create_job(
    request: JobCreateRequest,
    admin: dict = Depends(require_admin),
    jobs: JobRepository = Depends(get_job_repository)
):
    """
    Create a new job posting.

    Requires an admin token. The company handle must refer to an existing
    company.
    """
    job = jobs.create(
        title=request.title,
        company_handle=request.company_handle,
        salary=request.salary,
        equity=request.equity,
    )

    logger.info(f"Admin {admin['sub']} created job {job['id']}")
    return {"job": job}


@router.get("", response_model=JobListEnvelope)
def list_jobs(request: Request, jobs: JobRepository = Depends(get_job_repository)):
    """
    List jobs, optionally filtered.

    Query parameters:
        title: case-insensitive substring of the job title
        minSalary: minimum salary
        hasEquity: if true, only jobs with non-zero equity

    Any other parameter is rejected with 400.
    """
    try:
        params = JobFilterParams.model_validate(dict(request.query_params))
    except ValidationError as e:
        raise BadRequestError("; ".join(err["msg"] for err in e.errors()))

    filters = params.model_dump(by_alias=True, exclude_none=True)
    return {"jobs": jobs.find_filtered(filters)}


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(job_id: int, jobs: JobRepository = Depends(get_job_repository)):
    """Retrieve a job by ID."""
    return {"job": jobs.get(job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    admin: dict = Depends(require_admin),
    jobs: JobRepository = Depends(get_job_repository)
):
    """
    Partially update a job.

    Body may contain title, salary and equity; only the fields sent are
    changed. An empty body is rejected with 400.
    """
    job = jobs.update(job_id, request.model_dump(exclude_unset=True))

    logger.info(f"Admin {admin['sub']} updated job {job_id}")
    return {"job": job}


@router.delete("/{job_id}", response_model=JobDeletedResponse)
def delete_job(
    job_id: int,
    admin: dict = Depends(require_admin),
    jobs: JobRepository = Depends(get_job_repository)
):
    """Delete a job by ID."""
    jobs.remove(job_id)

    logger.info(f"Admin {admin['sub']} deleted job {job_id}")
    return {"deleted": job_id}
