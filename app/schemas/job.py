from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1, description="Fraction of ownership, 0 to 1")
    company_handle: str = Field(..., alias="companyHandle", min_length=1, max_length=25)

    @field_validator("equity", mode="before")
    @classmethod
    def equity_from_float(cls, v):
        """JSON numbers arrive as floats; go through their text form, not the binary value"""
        if isinstance(v, float):
            return str(v)
        return v


class JobUpdateRequest(BaseModel):
    """
    Schema for a partial job update.

    Only fields present in the request body are changed; an explicit null
    clears salary or equity. The company a job belongs to cannot be changed.
    """
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)

    @field_validator("equity", mode="before")
    @classmethod
    def equity_from_float(cls, v):
        """JSON numbers arrive as floats; go through their text form, not the binary value"""
        if isinstance(v, float):
            return str(v)
        return v

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        """Title may be omitted but not cleared"""
        if v is None:
            raise ValueError("title cannot be null")
        return v


class JobFilterParams(BaseModel):
    """Query-string filters accepted by GET /jobs"""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: Optional[str] = None
    min_salary: Optional[int] = Field(None, alias="minSalary", ge=0)
    has_equity: Optional[bool] = Field(None, alias="hasEquity")


class JobResponse(BaseModel):
    """Schema for job response"""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str = Field(..., alias="companyHandle")


class JobEnvelope(BaseModel):
    job: JobResponse


class JobListEnvelope(BaseModel):
    jobs: List[JobResponse]


class JobDeletedResponse(BaseModel):
    deleted: int
