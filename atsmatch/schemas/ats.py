"""
Pydantic schemas for ATS score reports.
"""
import os
from typing import Annotated

from pydantic import BaseModel, Field
from pydantic.functional_validators import PlainValidator

# Paths are kept exactly as given; undecodable filename bytes arrive as surrogate escapes
DocumentPath = Annotated[str, PlainValidator(os.fspath)]


class ATSReport(BaseModel):
    """Outcome of one resume vs job description comparison."""
    job_description_path: DocumentPath = Field(..., description="Path of the job description document")
    resume_path: DocumentPath = Field(..., description="Path of the resume document")
    score: float = Field(..., ge=0, le=100, description="Match score as a percentage, capped at 100")

    def render(self) -> str:
        """Plain-text report: three lines, no trailing newline."""
        return (
            f"Job Description: {self.job_description_path}\n"
            f"Resume: {self.resume_path}\n"
            f"ATS Score: {self.score:.2f}%"
        )

    class Config:
        json_schema_extra = {
            "example": {
                "job_description_path": "Job Description.docx",
                "resume_path": "Harsh QA_Resume.docx",
                "score": 66.67,
            }
        }


class HealthResponse(BaseModel):
    """Schema for the health check response."""
    status: str = Field(..., description="healthy or degraded")
    report: str = Field(..., description="available or missing")
    version: str = Field(..., description="Service version")
