"""
Live Azure AI Search Tests

This package contains integration tests that run against a real search service.
They are separate from the unit tests in the main `tests/` directory.

Run these tests only when AZURE_AI_SEARCH_ENDPOINT and AZURE_AI_SEARCH_API_KEY are configured.
"""
