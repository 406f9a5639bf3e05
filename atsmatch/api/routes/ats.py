"""
ATS score endpoint.
"""
import html
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse, PlainTextResponse

from atsmatch.api.dependencies import get_escape_html, get_report_store
from atsmatch.services.report_service import ReportStore, ReportUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ATS"])

PAGE_TEMPLATE = "<html><body><h1>ATS Score</h1><pre>{report}</pre></body></html>"


@router.get("/ats_score", response_class=HTMLResponse)
def ats_score(
    store: ReportStore = Depends(get_report_store),
    escape_html: bool = Depends(get_escape_html),
):
    """
    Serve the last computed ATS report as HTML.

    Returns 500 with a plain-text message when no report is available.
    """
    try:
        report = store.load()
    except ReportUnavailableError as e:
        logger.warning(f"ATS report unavailable: {e}")
        return PlainTextResponse(
            "Error reading ATS score",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if escape_html:
        report = html.escape(report, quote=False)
    page = PAGE_TEMPLATE.format(report=report)
    return HTMLResponse(page.encode("utf-8", "surrogateescape"), status_code=status.HTTP_200_OK)
