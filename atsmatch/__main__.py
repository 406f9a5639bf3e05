import argparse
import logging
import sys

import uvicorn

from atsmatch.core import config
from atsmatch.core.logging_config import setup_logging
from atsmatch.main import create_app
from atsmatch.pipeline import run_pipeline
from atsmatch.services.document_loader import DocumentLoadError
from atsmatch.services.report_service import ReportStore, ReportWriteError

logger = logging.getLogger("atsmatch")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="atsmatch", description="Score a resume against a job description and serve the result")
    parser.add_argument("--job-description", default=config.JOB_DESCRIPTION_PATH, help="Path to the job description .docx")
    parser.add_argument("--resume", default=config.RESUME_PATH, help="Path to the resume .docx")
    parser.add_argument("--report", default=config.REPORT_PATH, help="Path of the plain-text report")
    parser.add_argument("--host", default=config.HOST, help="Listen address")
    parser.add_argument("--port", type=int, default=config.PORT, help="Listen port")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--no-serve", action="store_true", help="Exit after writing the report")
    parser.add_argument("--version", action="version", version=config.APP_VERSION)
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    store = ReportStore(args.report)
    try:
        run_pipeline(args.job_description, args.resume, store)
    except DocumentLoadError as e:
        logger.error(f"Error reading input document: {e}")
        sys.exit(1)
    except ReportWriteError as e:
        logger.error(f"Error saving result: {e}")
        sys.exit(1)

    if args.no_serve:
        return

    logger.info(f"Starting server on http://{args.host}:{args.port}/ats_score")
    uvicorn.run(create_app(store), host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
