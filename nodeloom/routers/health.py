"""
Health check endpoints for the API.
"""
from fastapi import APIRouter, Depends
from typing import Dict, Any
from datetime import datetime

from nodeloom.config import Settings
from nodeloom.dependencies import get_gateway, get_settings_dep
from nodeloom.domain.errors import DomainError
from nodeloom.remote.gateway import RemoteStoreGateway

router = APIRouter()

@router.get("/health")
def health_check(settings: Settings = Depends(get_settings_dep)) -> Dict[str, Any]:
    """
    Basic health check endpoint.
    Returns API status and version information.
    """
    return {
        "status": "OK",
        "timestamp": datetime.now().isoformat(),
        "version": settings.VERSION,
        "mode": settings.MODE,
    }

@router.get("/health/store")
def store_health(gateway: RemoteStoreGateway = Depends(get_gateway)) -> Dict[str, Any]:
    """
    Check that the remote store answers.
    """
    try:
        status_code = gateway.ping()
    except DomainError as e:
        return {
            "status": "unhealthy",
            "timestamp": datetime.now().isoformat(),
            "error": str(e),
        }

    return {
        "status": "healthy" if status_code < 500 else "unhealthy",
        "timestamp": datetime.now().isoformat(),
        "upstream_status": status_code,
    }
