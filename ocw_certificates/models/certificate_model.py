"""
models/certificate_model.py
Pydantic models for certificate requests.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProficiencyLevel(str, Enum):
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"


class CertificateRequest(BaseModel):
    """Input model for generating a certificate."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    student_name: str = Field(..., alias="studentName", min_length=3)
    level: ProficiencyLevel
    date: str = Field(..., pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

    @field_validator("student_name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must contain at least one non-blank character")
        return value
