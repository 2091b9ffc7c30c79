"""
Job model in its post-migration shape.
"""
import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey, JSON, Enum, Index
from sqlalchemy.sql import func, text
from sqlalchemy.orm import relationship
from app.db.base import Base


def _values(enum_cls):
    return [member.value for member in enum_cls]


class JobType(str, enum.Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"
    FREELANCE = "freelance"


class JobStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRED = "expired"
    FILLED = "filled"
    DRAFT = "draft"


class Gender(str, enum.Enum):
    ANY = "any"
    MALE = "male"
    FEMALE = "female"


class ContractType(str, enum.Enum):
    PERMANENT = "permanent"
    TEMPORARY = "temporary"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)

    type = Column(Enum(JobType, name="job_type", values_callable=_values), nullable=False, default=JobType.FULL_TIME)
    status = Column(Enum(JobStatus, name="job_status", values_callable=_values), nullable=False, default=JobStatus.ACTIVE)

    # Locations: province_ids supersedes the single province_id
    province_id = Column(Integer, nullable=True)
    province_ids = Column(JSON, nullable=True, default=list, server_default=text("'[]'"))

    duties_and_responsibilities = Column(Text, nullable=True)
    job_requirements = Column(Text, nullable=True)
    education = Column(String(100), nullable=True)
    gender = Column(Enum(Gender, name="job_gender", values_callable=_values), nullable=True, default=Gender.ANY)

    # Contract
    contract_type = Column(Enum(ContractType, name="job_contract_type", values_callable=_values), nullable=True)
    contract_duration = Column(String(50), nullable=True)
    contract_extensible = Column(Boolean, nullable=True, default=False)
    probation_period = Column(String(50), nullable=True)

    reference_number = Column(String(50), nullable=True)
    number_of_vacancies = Column(Integer, nullable=True, default=1)
    salary_range = Column(String(100), nullable=True)
    years_of_experience = Column(String(100), nullable=True)  # free text, e.g. "3-5 years"
    submission_guidelines = Column(Text, nullable=True)

    deadline = Column(DateTime, nullable=True)
    closing_date = Column(DateTime, nullable=True)
    posting_date = Column(DateTime, nullable=True)

    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    company = relationship("Company", back_populates="jobs")

    __table_args__ = (
        Index("ix_jobs_company_id", "company_id"),
        Index("ix_jobs_status", "status"),
    )

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', company_id={self.company_id})>"
