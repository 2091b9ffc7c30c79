"""
Pydantic schemas for company endpoints.
"""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field


class CompanyResponse(BaseModel):
    id: int = Field(..., description="Company ID")
    name: str = Field(..., description="Company name")
    about: Optional[str] = Field(None, description="Company profile")
    logo: Optional[str] = Field(None, description="Logo URL or path")
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CompanyDetailResponse(CompanyResponse):
    job_count: int = Field(0, description="Number of jobs posted by this company")


class CompanyListResponse(BaseModel):
    companies: List[CompanyResponse]
    total: int
