"""HTML rendering of the dashboard view model with Jinja2"""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from creditsea_viewer.config import settings
from creditsea_viewer.presentation.view_models import DashboardView

TEMPLATE_DIR = Path(__file__).parent / "templates"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
    )
    return env


def render_dashboard_html(view: DashboardView, title: str = "CreditSea Report Processor") -> str:
    """Render the list + detail page.

    Returns:
        HTML string.
    """
    template = get_environment().get_template("dashboard.html")
    return template.render(
        title=title,
        service_name=settings.service_name,
        view=view,
    )
