import os

# ✅ Service
APP_NAME = "ATS Match"
APP_VERSION = "1.0.0"

# ✅ Input documents
JOB_DESCRIPTION_PATH = os.getenv("ATS_JOB_DESCRIPTION_PATH", "Job Description.docx")
RESUME_PATH = os.getenv("ATS_RESUME_PATH", "Harsh QA_Resume.docx")

# ✅ Report
REPORT_PATH = os.getenv("ATS_REPORT_PATH", "ats_score.txt")
ESCAPE_HTML = os.getenv("ATS_ESCAPE_HTML", "true").lower() not in ("0", "false", "no")

# ✅ Server
HOST = os.getenv("ATS_HOST", "0.0.0.0")
PORT = int(os.getenv("ATS_PORT", "8080"))

# ✅ Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")
