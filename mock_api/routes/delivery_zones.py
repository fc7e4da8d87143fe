"""Delivery zone API routes for the mock API"""

from fastapi import APIRouter

from ..database.delivery_zones import delivery_zone_db

router = APIRouter(prefix="/api/delivery-zones", tags=["Delivery zones"])


@router.get("")
async def list_delivery_zones():
    """List active delivery zones"""
    return {"data": delivery_zone_db.list_zones()}
