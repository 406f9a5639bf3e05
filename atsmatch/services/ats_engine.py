"""
ATS scoring engine.
Bag-of-words overlap between a resume and a job description.
"""
import logging
import re
import string
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_NON_TOKEN_CHARS = re.compile(r"[^a-z0-9\s]+", re.ASCII)


@dataclass(frozen=True)
class ScoreResult:
    """Score plus the counts it was computed from."""
    score: float
    matches: int
    job_token_count: int
    resume_token_count: int


def preprocess_text(text: str) -> List[str]:
    """
    Lowercase (ASCII only), drop everything but a-z, 0-9 and whitespace,
    then split on whitespace runs.
    """
    text = text.translate(_ASCII_LOWER)
    text = _NON_TOKEN_CHARS.sub("", text)
    return text.split()


def count_matches(resume_tokens: List[str], job_tokens: List[str]) -> int:
    """Count resume tokens (repeats included) that appear in the job token set."""
    job_set = set(job_tokens)
    return sum(1 for token in resume_tokens if token in job_set)


def _percentage(matches: int, job_token_count: int) -> float:
    if not job_token_count:
        return 0.0
    return min(matches / job_token_count * 100, 100.0)


def calculate_score(resume_tokens: List[str], job_tokens: List[str]) -> float:
    """
    Percentage of job tokens matched by resume tokens.

    Returns 0.0 for an empty job description. Repeated resume tokens count
    individually, so the ratio is capped at 100.
    """
    return _percentage(count_matches(resume_tokens, job_tokens), len(job_tokens))


def score_documents(resume_text: str, job_text: str) -> ScoreResult:
    resume_tokens = preprocess_text(resume_text)
    job_tokens = preprocess_text(job_text)
    matches = count_matches(resume_tokens, job_tokens)

    result = ScoreResult(
        score=_percentage(matches, len(job_tokens)),
        matches=matches,
        job_token_count=len(job_tokens),
        resume_token_count=len(resume_tokens),
    )
    logger.debug(
        f"Scored documents: matches={result.matches}, job_tokens={result.job_token_count}, "
        f"resume_tokens={result.resume_token_count}, score={result.score:.2f}"
    )
    return result
