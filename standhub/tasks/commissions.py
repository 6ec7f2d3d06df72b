# standhub/tasks/commissions.py
from standhub.celery_worker import celery_app
from standhub.data.database import SessionLocal
from standhub.services.sales_service import SalesService
from standhub.utils.logging import get_logger

logger = get_logger(__name__)


@celery_app.task(name="standhub.tasks.commissions.recompute_commission_task")
def recompute_commission_task(sale_id: int):
    logger.info(f"Recompute commission task started for sale {sale_id}")

    db = SessionLocal()
    try:
        sale = SalesService(db).recompute_commission(sale_id)
        return {"sale_id": sale.id, "commission_amount": str(sale.commission_amount)}
    finally:
        db.close()
