from __future__ import annotations
import logging
import random
from typing import Optional

from .datatypes import ProcessingOptions, ProcessingResult, require_text
from .keywords import extract_keywords
from .summarize import summarize

logger = logging.getLogger(__name__)


def process_text(text: str, options: ProcessingOptions,
                 rng: Optional[random.Random] = None) -> ProcessingResult:
    """Run one follow-up operation on text already extracted from a document."""
    require_text(text, options.operation.replace("_", " "))
    logger.info("Processing %d characters with %s", len(text), options.operation)

    if options.operation == "summarization":
        summary = summarize(text, length=options.summary_length, style="informative", rng=rng)
        return ProcessingResult(extracted_text=text, operation=options.operation, processed_text=summary)

    result = extract_keywords(text, count=options.keyword_count, method=options.keyword_method)
    return ProcessingResult(extracted_text=text, operation=options.operation, keywords=result.keywords)
