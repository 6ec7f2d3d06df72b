#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from standhub.data.models.stand import StandModel
from standhub.data.models.user import UserModel
from standhub.data.models.vehicle import VehicleModel
from standhub.data.models.vehicle_image import VehicleImageModel
from standhub.data.models.vehicle_view import VehicleViewModel
from standhub.data.models.favorite import FavoriteModel
from standhub.data.models.inquiry import InquiryModel
from standhub.data.models.sale import SaleModel
from standhub.data.models.audit_log import AuditLogModel

__all__ = [
    "StandModel",
    "UserModel",
    "VehicleModel",
    "VehicleImageModel",
    "VehicleViewModel",
    "FavoriteModel",
    "InquiryModel",
    "SaleModel",
    "AuditLogModel",
]
