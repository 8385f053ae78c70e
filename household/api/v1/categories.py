from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from household.api.deps import get_db
from household.core.cache import invalidate_analytics_on_commit
from household.core.exceptions import ResourceNotFoundError, DuplicateResourceError
from household.db.repositories.category_repo import CategoryRepository
from household.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from household.schemas.common import ErrorResponse

router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    """
    Get all categories ordered by name.

    The default category set is created on the first call against an empty table.
    """
    repo = CategoryRepository(db)
    categories = await repo.get_all()
    if not categories:
        categories = await repo.seed_defaults()
    return categories


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse, "description": "Category name already used"}},
)
async def create_category(data: CategoryCreate, db: AsyncSession = Depends(get_db)):
    """Create a new category. Names are unique."""
    repo = CategoryRepository(db)
    if await repo.get_by_name(data.name):
        raise DuplicateResourceError(f"Category '{data.name}' already exists")

    category = await repo.create(name=data.name, icon=data.icon, color=data.color)
    invalidate_analytics_on_commit(db)
    return category


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Category not found"},
        409: {"model": ErrorResponse, "description": "Category name already used"},
    },
)
async def update_category(
    category_id: int,
    data: CategoryUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a category. Only the provided fields are changed."""
    repo = CategoryRepository(db)
    category = await repo.get_by_id(category_id)
    if not category:
        raise ResourceNotFoundError(f"Category {category_id} not found")

    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    if "name" in changes and changes["name"] != category.name:
        if await repo.get_by_name(changes["name"]):
            raise DuplicateResourceError(f"Category '{changes['name']}' already exists")

    category = await repo.update(category, **changes)
    invalidate_analytics_on_commit(db)
    return category


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse, "description": "Category not found"}},
)
async def delete_category(category_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a category. Expenses keep their category name."""
    repo = CategoryRepository(db)
    category = await repo.get_by_id(category_id)
    if not category:
        raise ResourceNotFoundError(f"Category {category_id} not found")

    await repo.delete(category)
    invalidate_analytics_on_commit(db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
