import random

import pytest

from textcraft.datatypes import ProcessingOptions
from textcraft.errors import InvalidInputError, TextcraftError
from textcraft.pipeline import process_text

TEXT = ("Machine learning models need data. Machine learning models improve with data. "
        "Data quality matters.")


def test_summarization():
    result = process_text(TEXT, ProcessingOptions(operation="summarization", summary_length="short"),
                          rng=random.Random(5))
    assert result.operation == "summarization"
    assert result.extracted_text == TEXT
    assert result.processed_text
    assert result.keywords is None
    assert set(result.to_dict()) == {"extractedText", "operation", "processedText"}


def test_keyword_extraction_defaults():
    options = ProcessingOptions(operation="keyword_extraction")
    assert options.keyword_count == 15
    assert options.keyword_method == "enhanced_tfidf"

    result = process_text(TEXT, options)
    assert result.processed_text is None
    assert 0 < len(result.keywords) <= 15
    assert result.keywords[0].keyword == "machine learning models"
    assert set(result.to_dict()) == {"extractedText", "operation", "keywords"}


def test_blank_text_rejected():
    with pytest.raises(InvalidInputError):
        process_text(" \n ", ProcessingOptions(operation="summarization"))


def test_unsupported_operation_rejected():
    with pytest.raises(InvalidInputError):
        ProcessingOptions(operation="translation")


def test_errors_share_a_base():
    assert issubclass(InvalidInputError, TextcraftError)
    assert issubclass(InvalidInputError, ValueError)


def test_require_text():
    from textcraft.datatypes import require_text

    require_text("some text", "summarization")
    with pytest.raises(InvalidInputError, match="No text provided for keyword extraction"):
        require_text("", "keyword extraction")
    with pytest.raises(InvalidInputError):
        require_text(None, "summarization")
