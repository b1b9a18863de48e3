"""shopvoice Test Suite

Test organization:
- unit/test_cli.py: Command line entry point
- unit/voice/: Voice pipeline tests (normalizer, segmenter, extraction,
  classification, dispatch, pipeline, history, config)

Running tests:
    # All tests
    pytest

    # Specific module
    pytest tests/unit/voice/test_normalizer.py

    # Excluding slow tests
    pytest -m "not slow"
"""
