import os

# Database Configuration
# SQLite file by default; point DATABASE_URL at postgres://... for a shared database
DB_URL = os.getenv("DATABASE_URL", "sqlite://stockdesk.sqlite3")

# Application Metadata
PROJECT_NAME = "StockDesk Inventory Management"
VERSION = "1.0.0"

# Session cookie used by the auth routes
SESSION_SECRET = os.getenv("SESSION_SECRET", "inventory-app-secret")
SESSION_COOKIE = os.getenv("SESSION_COOKIE", "stockdesk_session")
SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", 60 * 60 * 24 * 7)) # Seconds
SESSION_HTTPS_ONLY = os.getenv("SESSION_HTTPS_ONLY", "false").lower() == "true"

# Comma separated list of front-end origins allowed to call the API
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Dashboard / feed tuning
ACTIVITY_FEED_LIMIT = int(os.getenv("ACTIVITY_FEED_LIMIT", 10)) # Default size of the recent activity feed
DEFAULT_MIN_QUANTITY = 10 # Reorder threshold applied when a product omits one
