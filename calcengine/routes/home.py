"""
Site pages for CalcEngine.

Routes:
    GET /                  - Home page with every category and calculator
    GET /calculators       - All calculators
    GET /category/{slug}   - Calculators in one category
    GET /about             - About page
"""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from calcengine.data.catalog import (
    CALCULATORS, CATEGORIES, calculators_in_category, catalog_with_categories, get_category
)
from calcengine.data.guides import GUIDES
from calcengine.logging_config import get_logger
from calcengine.templating import templates
from calcengine.utils.metadata import build_metadata

logger = get_logger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    """Home page."""
    return templates.TemplateResponse(request, "index.html", {
        "meta": build_metadata(
            "Free Financial Calculators",
            "Free mortgage, loan, tax, salary and retirement calculators with shareable results.",
            "/",
        ),
        "categories": catalog_with_categories(),
        "guides": GUIDES,
    })


@router.get("/calculators", response_class=HTMLResponse)
def calculators_index(request: Request):
    """List every calculator grouped by category."""
    return templates.TemplateResponse(request, "calculators/index.html", {
        "meta": build_metadata(
            "All Calculators",
            f"Browse all {len(CALCULATORS)} financial calculators.",
            "/calculators",
        ),
        "categories": catalog_with_categories(),
    })


@router.get("/category/{slug}", response_class=HTMLResponse)
def category_page(request: Request, slug: str):
    """
    Category hub page.

    Raises:
        HTTPException: 404 if the category does not exist
    """
    category = get_category(slug)
    if category is None:
        logger.warning(f"Unknown category requested: {slug}")
        raise HTTPException(status_code=404, detail="Category not found")

    return templates.TemplateResponse(request, "category.html", {
        "meta": build_metadata(
            f"{category['name']} Calculators",
            category["description"],
            f"/category/{slug}",
        ),
        "category": category,
        "calculators": calculators_in_category(slug),
        "categories": CATEGORIES,
    })


@router.get("/about", response_class=HTMLResponse)
def about(request: Request):
    return templates.TemplateResponse(request, "about.html", {
        "meta": build_metadata(
            "About",
            "How CalcEngine's calculators work and the assumptions behind them.",
            "/about",
        ),
    })
