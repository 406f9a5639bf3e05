"""
End-to-end tests for the startup pipeline and the command line entry point.
"""
import pytest
from fastapi.testclient import TestClient

from atsmatch import __main__ as cli
from atsmatch.main import create_app
from atsmatch.pipeline import run_pipeline
from atsmatch.services.document_loader import DocumentEntryNotFoundError, DocumentReadError
from atsmatch.services.report_service import ReportStore


@pytest.fixture
def documents(make_docx):
    job = make_docx("Job Description.docx", "Go Developer needed")
    resume = make_docx("Resume.docx", "Experienced Go developer.")
    return job, resume


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep the CLI from replacing pytest's log handlers."""
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)


def test_run_pipeline_scores_and_saves(tmp_path, documents):
    job, resume = documents
    store = ReportStore(tmp_path / "ats_score.txt")

    report = run_pipeline(job, resume, store)

    assert round(report.score, 2) == 66.67
    assert (tmp_path / "ats_score.txt").read_text(encoding="utf-8") == (
        f"Job Description: {job}\nResume: {resume}\nATS Score: 66.67%"
    )


def test_run_pipeline_then_serve_round_trip(tmp_path, documents):
    job, resume = documents
    store = ReportStore(tmp_path / "ats_score.txt")
    run_pipeline(job, resume, store)

    response = TestClient(create_app(store)).get("/ats_score")

    assert response.status_code == 200
    assert "ATS Score: 66.67%" in response.text


def test_run_pipeline_missing_entry_propagates(tmp_path, make_docx, documents):
    job, _ = documents
    broken = make_docx("broken.docx", entries=[("word/other.xml", "x")])
    store = ReportStore(tmp_path / "ats_score.txt")

    with pytest.raises(DocumentEntryNotFoundError):
        run_pipeline(job, broken, store)
    assert not (tmp_path / "ats_score.txt").exists()


def test_cli_no_serve_writes_report(tmp_path, documents):
    job, resume = documents
    report = tmp_path / "out.txt"

    cli.main(["--job-description", str(job), "--resume", str(resume), "--report", str(report), "--no-serve"])

    assert report.read_text(encoding="utf-8").endswith("ATS Score: 66.67%")


def test_cli_serves_after_pipeline(tmp_path, documents, monkeypatch):
    job, resume = documents
    calls = {}

    def fake_run(app, host, port, **kwargs):
        calls.update(app=app, host=host, port=port)

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)

    cli.main([
        "--job-description", str(job), "--resume", str(resume),
        "--report", str(tmp_path / "out.txt"), "--host", "127.0.0.1", "--port", "9090",
    ])

    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 9090
    assert calls["app"].state.report_store.load().endswith("ATS Score: 66.67%")


def test_cli_exits_on_unreadable_document(tmp_path, documents, monkeypatch):
    job, _ = documents
    monkeypatch.setattr(cli.uvicorn, "run", lambda *args, **kwargs: pytest.fail("server must not start"))

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--job-description", str(job), "--resume", str(tmp_path / "missing.docx"),
                  "--report", str(tmp_path / "out.txt")])

    assert exc_info.value.code == 1


def test_cli_exits_when_report_cannot_be_written(tmp_path, documents):
    job, resume = documents

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--job-description", str(job), "--resume", str(resume),
                  "--report", str(tmp_path / "no-such-dir" / "out.txt"), "--no-serve"])

    assert exc_info.value.code == 1


def test_loader_error_is_read_error_for_missing_file(tmp_path):
    with pytest.raises(DocumentReadError):
        run_pipeline(tmp_path / "a.docx", tmp_path / "b.docx", ReportStore(tmp_path / "r.txt"))


def test_cli_exits_on_corrupt_document_entry(tmp_path, make_docx, documents):
    job, _ = documents
    resume = make_docx("corrupt.docx", "Experienced Go developer.")
    data = bytearray(resume.read_bytes())
    data[data.index(b"Experienced")] ^= 0xFF
    resume.write_bytes(bytes(data))

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--job-description", str(job), "--resume", str(resume),
                  "--report", str(tmp_path / "out.txt"), "--no-serve"])

    assert exc_info.value.code == 1
