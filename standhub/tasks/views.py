# standhub/tasks/views.py
from standhub.celery_worker import celery_app
from standhub.data.database import SessionLocal
from standhub.services.traffic_service import TrafficService
from standhub.utils.logging import get_logger

logger = get_logger(__name__)


@celery_app.task(name="standhub.tasks.views.reconcile_view_counters_task")
def reconcile_view_counters_task():
    """Naprawia ewentualny dryf miedzy vehicles.views_count a vehicle_views."""
    logger.info("Reconcile view counters task started")

    db = SessionLocal()
    try:
        updated = TrafficService(db).reconcile_views_count()
        return {"vehicles": updated}
    finally:
        db.close()
