# standhub/celery_worker.py
from celery import Celery

from standhub.utils.settings import (
    CELERY_BROKER_URL,
    CELERY_RESULT_BACKEND,
    VIEW_RECONCILE_INTERVAL_SECONDS,
)

celery_app = Celery(
    "standhub",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# taski musza byc zaimportowane zeby Celery je zarejestrowal
celery_app.conf.imports = (
    "standhub.tasks.commissions",
    "standhub.tasks.views",
)

celery_app.conf.beat_schedule = {
    "reconcile-view-counters": {
        "task": "standhub.tasks.views.reconcile_view_counters_task",
        "schedule": VIEW_RECONCILE_INTERVAL_SECONDS,
    },
}

celery_app.conf.timezone = "UTC"
