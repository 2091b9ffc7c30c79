"""
Company endpoints.

Companies are the normalized owners of job postings.
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.filters import PAGINATION_OPTIONS
from app.db.models.company import Company
from app.db.models.job import Job
from app.db.session import get_db
from app.schemas.company import CompanyDetailResponse, CompanyListResponse, CompanyResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.get("", response_model=CompanyListResponse)
def list_companies(
    q: Optional[str] = Query(None, description="Case-insensitive name search"),
    limit: int = Query(PAGINATION_OPTIONS["default_rows_per_page"], ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db)
):
    query = db.query(Company)
    if q:
        query = query.filter(Company.name.ilike(f"%{q}%"))

    total = query.count()
    companies = query.order_by(Company.name.asc()).offset(offset).limit(limit).all()
    return CompanyListResponse(
        companies=[CompanyResponse.model_validate(company) for company in companies],
        total=total,
    )


@router.get("/{company_id}", response_model=CompanyDetailResponse)
def get_company(company_id: int, db: Session = Depends(get_db)):
    company = db.query(Company).filter(Company.id == company_id).first()
    if not company:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Company not found"
        )

    job_count = db.query(func.count(Job.id)).filter(Job.company_id == company_id).scalar() or 0
    response = CompanyDetailResponse.model_validate(company)
    response.job_count = job_count
    return response
