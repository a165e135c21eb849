"""
EVPlanner - Catalog Service
Filtering, sorting, pagination and facets for the product catalog
"""
import re
import logging
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import Select, select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from evplanner.models.product import Product

logger = logging.getLogger(__name__)

SORT_FIELDS = {
    "name": Product.name,
    "manufacturer": Product.manufacturer,
    "category": Product.category,
    "origin": Product.origin,
    "cost": Product.cost,
    "efficiency": Product.efficiency,
    "lifetime": Product.lifetime,
    "created_at": Product.created_at,
    # Free text like "4.5/5"; ordered by its numeric part in Python
    "rating": None,
}

# Accept the camelCase spellings the frontend uses
SORT_ALIASES = {
    "manufacturedIn": "origin",
    "createdAt": "created_at",
}

_NUMERIC_PART = re.compile(r"\d+(?:\.\d+)?")


def category_slug(label: str) -> str:
    """Derive a display slug: lower-case with all whitespace removed."""
    return re.sub(r"\s+", "", label.lower())


def rating_value(rating: Optional[str]) -> float:
    """Numeric part of a free-text rating ("4.5/5" -> 4.5), 0 when absent."""
    if not rating:
        return 0.0
    match = _NUMERIC_PART.search(str(rating))
    return float(match.group()) if match else 0.0


def normalize_sort_field(sort: Optional[str]) -> Optional[str]:
    if sort is None:
        return None
    sort = SORT_ALIASES.get(sort, sort)
    if sort not in SORT_FIELDS:
        raise ValueError(f"Unsupported sort field: {sort}")
    return sort


def apply_filters(
    query: Select,
    category: Optional[str] = None,
    manufacturer: Optional[str] = None,
    origins: Optional[Sequence[str]] = None,
    search: Optional[str] = None,
    nevi_eligible: Optional[bool] = None,
) -> Select:
    """
    Add WHERE clauses for the catalog filters.

    - category: case-insensitive equality
    - manufacturer: case-insensitive substring
    - origins: any-of, case-insensitive substring
    - search: name or manufacturer, case-insensitive substring
    """
    if category:
        query = query.where(func.lower(Product.category) == category.lower())

    if manufacturer:
        query = query.where(func.lower(Product.manufacturer).contains(manufacturer.lower()))

    origins = [o for o in (origins or []) if o]
    if origins:
        query = query.where(or_(*[
            func.lower(Product.origin).contains(o.lower()) for o in origins
        ]))

    if search:
        term = search.lower()
        query = query.where(or_(
            func.lower(Product.name).contains(term),
            func.lower(Product.manufacturer).contains(term),
        ))

    if nevi_eligible is not None:
        query = query.where(Product.nevi_eligible == nevi_eligible)

    return query


def apply_sort(query: Select, sort: Optional[str], order: str = "asc") -> Select:
    """ORDER BY for SQL-sortable fields; newest first when no sort is given."""
    if sort is None:
        return query.order_by(Product.created_at.desc(), Product.id.desc())

    column = SORT_FIELDS[sort]
    if column is None:
        return query

    if sort in ("name", "manufacturer", "category", "origin"):
        key = func.lower(func.coalesce(column, ""))
    elif sort == "created_at":
        key = column
    else:
        key = func.coalesce(column, 0)

    if order == "desc":
        return query.order_by(key.desc(), Product.id.desc())
    return query.order_by(key.asc(), Product.id.asc())


async def list_products(
    db: AsyncSession,
    category: Optional[str] = None,
    manufacturer: Optional[str] = None,
    origins: Optional[Sequence[str]] = None,
    search: Optional[str] = None,
    nevi_eligible: Optional[bool] = None,
    sort: Optional[str] = None,
    order: str = "asc",
    page: Optional[int] = None,
    page_size: int = 10,
) -> Tuple[List[Product], int]:
    """
    Return the filtered, sorted page of products and the total match count.

    Without `page` every match is returned.
    """
    sort = normalize_sort_field(sort)

    query = apply_filters(
        select(Product),
        category=category,
        manufacturer=manufacturer,
        origins=origins,
        search=search,
        nevi_eligible=nevi_eligible,
    )
    query = apply_sort(query, sort, order)

    result = await db.execute(query)
    products = list(result.scalars().all())

    if sort == "rating":
        products.sort(key=lambda p: (rating_value(p.rating), p.id), reverse=(order == "desc"))

    total = len(products)
    if page is not None:
        start = (page - 1) * page_size
        products = products[start:start + page_size]

    return products, total


async def distinct_manufacturers(db: AsyncSession) -> List[str]:
    result = await db.execute(
        select(Product.manufacturer).distinct().order_by(Product.manufacturer)
    )
    return [row[0] for row in result.fetchall()]


async def distinct_origins(db: AsyncSession) -> List[str]:
    result = await db.execute(
        select(Product.origin)
        .where(Product.origin.isnot(None))
        .distinct()
        .order_by(Product.origin)
    )
    return [row[0] for row in result.fetchall()]


async def distinct_categories(db: AsyncSession) -> List[dict]:
    """Category facets: {id: slug, name: label, description}."""
    result = await db.execute(
        select(Product.category).distinct().order_by(Product.category)
    )
    return [
        {
            "id": category_slug(label),
            "name": label,
            "description": f"{label} products",
        }
        for (label,) in result.fetchall()
    ]
