from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.schemas.job import JobResponse


class CompanyResponse(BaseModel):
    """Schema for a company together with its jobs"""
    model_config = ConfigDict(populate_by_name=True)

    handle: str
    name: str
    description: str
    num_employees: Optional[int] = Field(None, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")
    jobs: List[JobResponse] = []


class CompanyEnvelope(BaseModel):
    company: CompanyResponse
