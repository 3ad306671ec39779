import os

from dotenv import load_dotenv
import reflex as rx

load_dotenv()


def _env_flag(var_name: str, default: bool) -> bool:
    value = os.getenv(var_name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


config = rx.Config(
    app_name="tip_calculator",
    api_url=os.getenv("API_URL") or "http://localhost:8000",
    plugins=[rx.plugins.TailwindV3Plugin()],
    disable_plugins=["reflex.plugins.sitemap.SitemapPlugin"],
    telemetry_enabled=_env_flag("TELEMETRY_ENABLED", False),
    theme=rx.theme(
        has_background=True,
        radius="medium",
        spacing="relaxed",
        transitions="gentle",
    ),
)
