# -*- coding: utf-8 -*-
from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health")
def health():
    return {
        "status": "UP",
        "service": "api",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
