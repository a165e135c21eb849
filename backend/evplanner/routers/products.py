"""
EVPlanner - Products Router
EV charging equipment catalog
"""
import logging
from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from evplanner.database import get_db
from evplanner.models.admin import AdminAccount
from evplanner.models.product import Product
from evplanner.schemas.base import DeleteResponse
from evplanner.schemas.product import ProductCreate, ProductUpdate, ProductResponse, CategoryInfo
from evplanner.services import catalog
from evplanner.services.auth import require_admin

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/products", tags=["Products"])


async def get_product_or_404(db: AsyncSession, product_id: int) -> Product:
    result = await db.execute(select(Product).where(Product.id == product_id))
    product = result.scalar_one_or_none()

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )
    return product


@router.get("", response_model=List[ProductResponse])
async def get_products(
    response: Response,
    category: Optional[str] = None,
    manufacturer: Optional[str] = None,
    origin: Optional[List[str]] = Query(default=None),
    search: Optional[str] = None,
    nevi_eligible: Optional[bool] = None,
    nevi_eligible_camel: Optional[bool] = Query(default=None, alias="neviEligible"),
    sort: Optional[str] = None,
    order: Literal["asc", "desc"] = "asc",
    page: Optional[int] = Query(default=None, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1, le=100),
    page_size_camel: Optional[int] = Query(default=None, ge=1, le=100, alias="pageSize"),
    db: AsyncSession = Depends(get_db)
):
    """
    List products.

    - **category**: exact category, case-insensitive
    - **manufacturer**: manufacturer contains, case-insensitive
    - **origin**: repeatable; matches any given origin
    - **search**: name or manufacturer contains
    - **sort** / **order**: sort field and direction (newest first by default)
    - **page** / **pageSize**: optional pagination; total in `X-Total-Count`

    `nevi_eligible` and `page_size` are also accepted in camelCase.
    """
    if nevi_eligible is None:
        nevi_eligible = nevi_eligible_camel
    if page_size is None:
        page_size = page_size_camel or 10

    try:
        products, total = await catalog.list_products(
            db,
            category=category,
            manufacturer=manufacturer,
            origins=origin,
            search=search,
            nevi_eligible=nevi_eligible,
            sort=sort,
            order=order,
            page=page,
            page_size=page_size,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SQLAlchemyError as e:
        logger.error(f"Error fetching products: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch products")

    response.headers["X-Total-Count"] = str(total)
    return products


@router.get("/manufacturers", response_model=List[str])
async def get_manufacturers(db: AsyncSession = Depends(get_db)):
    """Distinct manufacturers, ascending."""
    try:
        return await catalog.distinct_manufacturers(db)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching manufacturers: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch manufacturers")


@router.get("/origins", response_model=List[str])
async def get_origins(db: AsyncSession = Depends(get_db)):
    """Distinct countries/regions of origin, ascending, nulls excluded."""
    try:
        return await catalog.distinct_origins(db)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching origins: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch origins")


@router.get("/categories", response_model=List[CategoryInfo])
async def get_categories(db: AsyncSession = Depends(get_db)):
    """Distinct categories with a derived slug id."""
    try:
        return await catalog.distinct_categories(db)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching categories: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch categories")


@router.get("/category/{category}", response_model=List[ProductResponse])
async def get_products_by_category(category: str, db: AsyncSession = Depends(get_db)):
    """Products in a category (case-insensitive), newest first."""
    try:
        products, _ = await catalog.list_products(db, category=category)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching products by category: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch products")
    return products


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, db: AsyncSession = Depends(get_db)):
    """Get a specific product by ID."""
    return await get_product_or_404(db, product_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    db: AsyncSession = Depends(get_db),
    current_admin: AdminAccount = Depends(require_admin)
):
    """Create a product. Requires an admin token."""
    product = Product(**product_data.model_dump())
    try:
        db.add(product)
        await db.flush()
        await db.refresh(product)
    except SQLAlchemyError as e:
        logger.error(f"Error creating product: {e}")
        raise HTTPException(status_code=500, detail="Failed to create product")

    logger.info(f"Product '{product.name}' created by {current_admin.username}")
    return product


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product_data: ProductUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: AdminAccount = Depends(require_admin)
):
    """Replace every field of a product. Requires an admin token."""
    product = await get_product_or_404(db, product_id)

    for field, value in product_data.model_dump().items():
        setattr(product, field, value)

    try:
        await db.flush()
        await db.refresh(product)
    except SQLAlchemyError as e:
        logger.error(f"Error updating product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update product")

    logger.info(f"Product {product_id} updated by {current_admin.username}")
    return product


@router.delete("/{product_id}", response_model=DeleteResponse)
async def delete_product(
    product_id: int,
    db: AsyncSession = Depends(get_db),
    current_admin: AdminAccount = Depends(require_admin)
):
    """Hard-delete a product. Requires an admin token."""
    product = await get_product_or_404(db, product_id)

    try:
        await db.delete(product)
        await db.flush()
    except SQLAlchemyError as e:
        logger.error(f"Error deleting product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete product")

    logger.info(f"Product {product_id} deleted by {current_admin.username}")
    return DeleteResponse(message="Product deleted successfully", id=product_id)
