from .config import DATABASE_URL

MODEL_MODULES = [
    "sales_reports.features.catalog.models",
    "sales_reports.features.orders.models",
]


def build_tortoise_config(db_url: str = DATABASE_URL) -> dict:
    """Tortoise config shared by the API, the CLI and the test suite."""
    return {
        "connections": {"default": db_url},
        "apps": {
            "models": {  # This is an app label, used in "models.Store" references
                "models": MODEL_MODULES,
                "default_connection": "default",
            }
        },
        "use_tz": False,
        "timezone": "UTC",
    }


TORTOISE_ORM_CONFIG = build_tortoise_config()
