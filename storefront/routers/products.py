# storefront/routers/products.py
import uuid

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from storefront.database import get_session
from storefront.repositories.product_repo import ProductRepository, ShopItemRepository
from storefront.schemas.product import ProductRead, ShopItemRead
from storefront.services.product_service import CatalogService

router = APIRouter(tags=["Catalog"])

products = CatalogService(ProductRepository(), "product")
shop_items = CatalogService(ShopItemRepository(), "shop item")


# -------- Public endpoints --------


@router.get("/products", response_model=list[ProductRead])
def list_products(
    session: Session = Depends(get_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    category: str | None = None,
):
    """
    List products, optionally filtered by category.
    """
    return products.list_items(session, skip=skip, limit=limit, category=category)


@router.get("/products/{product_id}", response_model=ProductRead)
def get_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return products.get_item(session, product_id)


@router.get("/shopItems", response_model=list[ShopItemRead])
def list_shop_items(
    session: Session = Depends(get_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    category: str | None = None,
):
    """
    List shop items, optionally filtered by category.
    """
    return shop_items.list_items(session, skip=skip, limit=limit, category=category)


@router.get("/shopItems/{item_id}", response_model=ShopItemRead)
def get_shop_item(
    item_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return shop_items.get_item(session, item_id)
