"""
Startup pipeline: load both documents, score them, persist the report.
"""
import logging
from pathlib import Path
from typing import Union

from atsmatch.schemas.ats import ATSReport
from atsmatch.services.ats_engine import score_documents
from atsmatch.services.document_loader import extract_text_from_docx
from atsmatch.services.report_service import ReportStore

logger = logging.getLogger(__name__)


def run_pipeline(
    job_description_path: Union[str, Path],
    resume_path: Union[str, Path],
    store: ReportStore,
) -> ATSReport:
    """
    Score a resume against a job description and save the report.

    Loader and report errors propagate; the caller decides whether they are fatal.
    """
    job_description_text = extract_text_from_docx(job_description_path)
    resume_text = extract_text_from_docx(resume_path)

    result = score_documents(resume_text, job_description_text)
    logger.info(f"ATS Score: {result.score:.2f}%")

    report = ATSReport(
        job_description_path=str(job_description_path),
        resume_path=str(resume_path),
        score=result.score,
    )
    store.save(report)
    logger.info(f"ATS score saved to {store.path}")
    return report
