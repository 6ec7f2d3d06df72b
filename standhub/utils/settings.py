# standhub/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./standhub.db")
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", REDIS_URL)
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/2")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_REPORT_LIMIT = int(os.getenv("DEFAULT_REPORT_LIMIT", 10))
DEFAULT_TREND_DAYS = int(os.getenv("DEFAULT_TREND_DAYS", 30))

# performance rating (points per sale, caps, weights)
PERFORMANCE_SALE_POINTS = float(os.getenv("PERFORMANCE_SALE_POINTS", 10))
PERFORMANCE_SALES_CAP = float(os.getenv("PERFORMANCE_SALES_CAP", 50))
PERFORMANCE_CONVERSION_WEIGHT = float(os.getenv("PERFORMANCE_CONVERSION_WEIGHT", 0.5))
PERFORMANCE_CONVERSION_CAP = float(os.getenv("PERFORMANCE_CONVERSION_CAP", 30))
PERFORMANCE_AVG_SALE_DIVISOR = float(os.getenv("PERFORMANCE_AVG_SALE_DIVISOR", 1000))
PERFORMANCE_AVG_SALE_CAP = float(os.getenv("PERFORMANCE_AVG_SALE_CAP", 20))
PERFORMANCE_LEVEL_THRESHOLDS = tuple(
    float(t) for t in os.getenv("PERFORMANCE_LEVEL_THRESHOLDS", "80,60,40,20").split(",")
)

INQUIRY_OVERDUE_DAYS = int(os.getenv("INQUIRY_OVERDUE_DAYS", 7))

VIEW_RECONCILE_INTERVAL_SECONDS = float(os.getenv("VIEW_RECONCILE_INTERVAL_SECONDS", 60 * 60))
