"""Operational endpoints: health check and Prometheus scrape"""

from fastapi import APIRouter
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from inbank_gateway.config import settings

router = APIRouter()


@router.get("/health")
def health_check():
    return {"status": "ok", "service": settings.service_name}


@router.get("/metrics")
def metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
