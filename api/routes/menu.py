"""Static demo menu route"""

from fastapi import APIRouter, Query
from typing import Optional

from domain.schemas.menu_schemas import DemoMenuResponse
from services.menu_service import MenuService

router = APIRouter(prefix="/menu", tags=["Public Menu"])


@router.get("/demo", response_model=DemoMenuResponse)
def get_demo_menu(
    search: Optional[str] = Query(None, description="Text to look for in names and descriptions"),
    category: Optional[str] = Query(None, description="Category name, or 'All'"),
):
    """Demo menu used by the landing page; prices are display strings"""
    return MenuService.get_demo_menu(search=search, category=category)
