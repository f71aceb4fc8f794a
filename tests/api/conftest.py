"""
Pytest configuration for API integration tests
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="function")
def client(transform_service):
    """
    Create a test client with properly initialized app state.
    Each test gets a fresh service to avoid state contamination.
    """
    from image_editor.main import app

    app.state.transform_service = transform_service
    app.state.debug = False

    # Create test client (no context manager so the lifespan does not replace the service)
    test_client = TestClient(app, raise_server_exceptions=False)

    yield test_client

    del app.state.transform_service
