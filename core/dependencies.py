from fastapi import Request
from config import Settings
from services.github import DispatchClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_dispatch_client(request: Request) -> DispatchClient:
    client = request.app.state.dispatch_client
    if client is None:
        raise RuntimeError("Dispatch client is not initialized; was the app started?")
    return client
