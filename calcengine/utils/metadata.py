"""Page metadata (title, description, canonical URL, OpenGraph) for templates."""

from calcengine.config import settings


def build_metadata(title: str, description: str, path: str, page_type: str = "website") -> dict:
    """
    Build the complete metadata block rendered into every page's <head>.

    Using this helper guarantees every page gets the full set of fields,
    including OpenGraph and Twitter card tags.

    Args:
        title: Page title (site name is appended)
        description: Meta description
        path: Absolute path of the page, e.g. "/calculators/mortgage-calculator"
        page_type: OpenGraph type ("website" or "article")

    Returns:
        Dictionary consumed by base.html
    """
    full_title = f"{title} | {settings.site_name}"
    url = f"{settings.site_url.rstrip('/')}{path}"
    return {
        "title": full_title,
        "description": description,
        "canonical": url,
        "open_graph": {
            "title": title,
            "description": description,
            "url": url,
            "site_name": settings.site_name,
            "type": page_type,
        },
        "twitter": {
            "card": "summary_large_image",
            "title": title,
            "description": description,
        },
    }
