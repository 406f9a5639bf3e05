from fastapi import Request

from atsmatch.services.report_service import ReportStore


def get_report_store(request: Request) -> ReportStore:
    """Report store attached to the running app."""
    return request.app.state.report_store


def get_escape_html(request: Request) -> bool:
    return request.app.state.escape_html
