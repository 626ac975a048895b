# storefront/routers/categories.py
import uuid

from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.core.gates import category_gate
from storefront.database import get_session
from storefront.repositories.category_repo import CategoryRepository
from storefront.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from storefront.schemas.common import DeleteResult, InsertResult, UpdateResult
from storefront.services.category_service import CategoryService

router = APIRouter(prefix="/category", tags=["Categories"])

repo = CategoryRepository()
service = CategoryService(repo)


# -------- Public endpoints --------


@router.get("", response_model=list[CategoryRead])
def list_categories(session: Session = Depends(get_session)):
    return service.list_categories(session)


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(
    category_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return service.get_category(session, category_id)


# -------- Writes (gated by CATEGORY_GATE) --------


@router.post(
    "",
    response_model=InsertResult,
    response_model_exclude_unset=True,
    dependencies=[Depends(category_gate)],
)
def create_category(
    payload: CategoryCreate,
    session: Session = Depends(get_session),
):
    """
    Create a category.

    Auth:
      - Depends on the CATEGORY_GATE setting (none | auth | admin).
    """
    return service.create_category(session, payload)


@router.put(
    "/{category_id}",
    response_model=UpdateResult,
    dependencies=[Depends(category_gate)],
)
def update_category(
    category_id: uuid.UUID,
    payload: CategoryUpdate,
    session: Session = Depends(get_session),
):
    return service.update_category(session, category_id, payload)


@router.delete(
    "/{category_id}",
    response_model=DeleteResult,
    dependencies=[Depends(category_gate)],
)
def delete_category(
    category_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return service.delete_category(session, category_id)
