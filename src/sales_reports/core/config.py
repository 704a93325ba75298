import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "t", "yes")


# In a real deployment, set these through the environment
DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite://./sales_reports.sqlite3")

# Seed data is only inserted into an empty store
SEED_ON_STARTUP: bool = _env_flag("SEED_ON_STARTUP", "true")
SEED_ORDER_COUNT: int = int(os.getenv("SEED_ORDER_COUNT", "500"))
SEED_RANDOM_SEED: int = int(os.getenv("SEED_RANDOM_SEED", "42"))

# Creates the indexes the optimized named queries expect
PROVISION_INDEXES: bool = _env_flag("PROVISION_INDEXES", "false")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_NAMESPACES: list[str] = [
    ns.strip() for ns in os.getenv("LOG_NAMESPACES", "").split(",") if ns.strip()
]
