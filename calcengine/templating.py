"""Shared Jinja2 template configuration."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from calcengine import __version__
from calcengine.config import settings
from calcengine.utils.formatters import FILTERS

PACKAGE_DIR = Path(__file__).parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters.update(FILTERS)
templates.env.globals["site_name"] = settings.site_name
templates.env.globals["version"] = __version__
