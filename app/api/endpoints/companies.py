import logging
from fastapi import APIRouter, Depends

from app.core.deps import get_company_repository, get_job_repository
from app.crud.company import CompanyRepository
from app.crud.job import JobRepository
from app.schemas.company import CompanyEnvelope

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.get("/{handle}", response_model=CompanyEnvelope)
def get_company(
    handle: str,
    companies: CompanyRepository = Depends(get_company_repository),
    jobs: JobRepository = Depends(get_job_repository)
):
    """Retrieve a company by handle, with the jobs it has posted."""
    company = companies.get(handle)
    company["jobs"] = jobs.find_by_company_handle(handle)
    return {"company": company}
