"""
Comparison guide pages.

Routes:
    GET /compare         - Guide index
    GET /compare/{slug}  - One guide
"""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from calcengine.data.catalog import get_calculator
from calcengine.data.guides import GUIDES, get_guide, payoff_example
from calcengine.logging_config import get_logger
from calcengine.templating import templates
from calcengine.utils.metadata import build_metadata

logger = get_logger(__name__)

router = APIRouter(prefix="/compare")


@router.get("", response_class=HTMLResponse)
def compare_index(request: Request):
    return templates.TemplateResponse(request, "compare/index.html", {
        "meta": build_metadata(
            "Financial Guides & Comparisons",
            "Side-by-side guides to common money decisions: renting or buying, Roth or traditional, avalanche or snowball.",
            "/compare",
        ),
        "guides": GUIDES,
    })


@router.get("/{slug}", response_class=HTMLResponse)
def guide_page(request: Request, slug: str):
    """
    Render a comparison guide.

    Raises:
        HTTPException: 404 if the guide does not exist
    """
    guide = get_guide(slug)
    if guide is None:
        logger.warning(f"Unknown guide requested: {slug}")
        raise HTTPException(status_code=404, detail="Guide not found")

    related = [c for c in (get_calculator(s) for s in guide["related"]) if c is not None]

    return templates.TemplateResponse(request, "compare/guide.html", {
        "meta": build_metadata(guide["title"], guide["description"], f"/compare/{slug}", page_type="article"),
        "guide": guide,
        "related": related,
        "example": payoff_example(guide),
    })
