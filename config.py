import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./freelance_desk.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Create tables on startup (development; production schemas are migrated)
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))

    # Trial billing
    TRIAL_FREE_QUOTA = data.get("TRIAL_FREE_QUOTA", 3)  # Free trials per project
    TRIAL_EXTRA_COST = str(data.get("TRIAL_EXTRA_COST", "10.00"))  # Flat price per extra trial

    # Dashboard
    RECENT_ITEMS_LIMIT = data.get("RECENT_ITEMS_LIMIT", 5)

    # Invoice Totals Reconciliation
    INVOICE_RECONCILIATION_ENABLED = bool(data.get("INVOICE_RECONCILIATION_ENABLED", True))
    INVOICE_RECONCILIATION_INTERVAL_SECONDS = data.get("INVOICE_RECONCILIATION_INTERVAL_SECONDS", 86400)  # Daily
    INVOICE_RECONCILIATION_REPAIR = bool(data.get("INVOICE_RECONCILIATION_REPAIR", False))
