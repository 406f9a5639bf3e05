from typing import Optional

from fastapi import FastAPI

# ✅ Import API Routes
from atsmatch.api.routes import ats, health

from atsmatch.core import config
from atsmatch.services.report_service import ReportStore


def create_app(report_store: Optional[ReportStore] = None, escape_html: bool = config.ESCAPE_HTML) -> FastAPI:
    """Build the app around a report store (defaults to the configured report path)."""
    app = FastAPI(title=config.APP_NAME, version=config.APP_VERSION)

    # ============================================
    # ✅ SHARED STATE
    # ============================================

    app.state.report_store = report_store or ReportStore(config.REPORT_PATH)
    app.state.escape_html = escape_html

    # ============================================
    # ✅ REGISTER ALL ROUTERS
    # ============================================

    app.include_router(ats.router)
    app.include_router(health.router)

    return app


app = create_app()
