"""Extraction of one opened result view.

Public API:
    - ResultExtractor: Classifies a result view and reads its fields
    - ExtractionOutcome: ExtractionSuccess | SkippedHiringEvent | SkippedLoadTimeout
    - ExtractorConfig: Wait timeouts for the description and employer regions
    - get_extractor_config: Get the extractor configuration singleton
"""

from job_corpus.extractor.config import ExtractorConfig, get_extractor_config
from job_corpus.extractor.models import (
    ExtractionOutcome,
    ExtractionSuccess,
    OutcomeKind,
    SkippedHiringEvent,
    SkippedLoadTimeout,
)
from job_corpus.extractor.service import ResultExtractor

__all__ = [
    "ExtractionOutcome",
    "ExtractionSuccess",
    "ExtractorConfig",
    "OutcomeKind",
    "ResultExtractor",
    "SkippedHiringEvent",
    "SkippedLoadTimeout",
    "get_extractor_config",
]
