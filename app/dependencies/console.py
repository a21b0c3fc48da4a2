"""
FastAPI dependency providing the console's REST API client.

Tests point the console at an in-process app by overriding it:

    app.dependency_overrides[get_console_client] = lambda: VPCApiClient(TestClient(app))
"""

from typing import Iterator

from app.console.client import VPCApiClient


def get_console_client() -> Iterator[VPCApiClient]:
    """Yield a client for one console request and close it afterwards."""
    client = VPCApiClient.from_settings()
    try:
        yield client
    finally:
        client.close()
