# standhub/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, List
from decimal import Decimal
from datetime import date

from standhub.domain.labels import FuelType, InquiryStatus, InquiryType, Transmission


class SalesSummaryOut(BaseModel):
    """Podsumowanie sprzedazy w oknie dat."""

    start: date | None = None
    end: date | None = None
    total_sales: int
    total_revenue: Decimal
    total_commission: Decimal
    average_sale_value: Decimal


class TopSellerOut(BaseModel):
    seller_id: int | None
    seller_name: str
    total_sales: int
    total_revenue: Decimal
    total_commission: Decimal


class PaymentMethodTotalOut(BaseModel):
    payment_method: str
    payment_method_label: str
    total_sales: int
    total_revenue: Decimal


class SaleOut(BaseModel):
    id: int
    vehicle_id: int | None
    seller_id: int | None
    stand_id: int | None
    sale_price: Decimal
    commission_percentage: Decimal
    commission_amount: Decimal
    sale_date: date
    payment_method: str

    model_config = ConfigDict(from_attributes=True)


class RecordViewIn(BaseModel):
    """Schema dla rejestracji wyswietlenia pojazdu."""

    user_id: int | None = Field(default=None, gt=0)
    ip_address: str | None = Field(default=None, max_length=45)
    user_agent: str | None = Field(default=None, max_length=500)


class RecordResultOut(BaseModel):
    success: bool


class MostViewedOut(BaseModel):
    vehicle_id: int
    vehicle_name: str
    views_count: int


class DailyCountOut(BaseModel):
    date: date
    count: int


class DailyViewsOut(BaseModel):
    date: date
    views_count: int


class LabelCountOut(BaseModel):
    label: str
    count: int


class VehicleTrafficOut(BaseModel):
    vehicle_id: int
    views_count: int
    unique_visitors: int
    unique_ips: int
    trend: List[DailyViewsOut]


class ActiveUserOut(BaseModel):
    user_id: int | None
    user_name: str
    actions_count: int


class BucketCountOut(BaseModel):
    bucket: int
    actions_count: int


class UserPerformanceOut(BaseModel):
    user_id: int
    name: str
    role_label: str
    total_sales: int
    total_revenue: Decimal
    total_commission: Decimal
    average_sale_value: Decimal
    assigned_inquiries: int
    pending_inquiries: int
    converted_inquiries: int
    conversion_rate: float
    performance_rating: float
    performance_level: str


class StandCreate(BaseModel):
    """Schema dla tworzenia stoiska, slug generowany z nazwy."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    postal_code: str | None = Field(default=None, max_length=20)
    phone: str | None = Field(default=None, max_length=20)
    email: str | None = Field(default=None, max_length=255)
    latitude: Decimal | None = Field(default=None, ge=-90, le=90)
    longitude: Decimal | None = Field(default=None, ge=-180, le=180)
    # {"monday": {"open": "09:00", "close": "19:00"}, ...}
    business_hours: Dict[str, Dict[str, str]] | None = None


class StandOut(BaseModel):
    id: int
    name: str
    slug: str
    city: str | None
    full_address: str
    has_coordinates: bool
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class StandOpenOut(BaseModel):
    stand_id: int
    is_open: bool


class StandTotalsOut(BaseModel):
    stand_id: int
    total_sales_value: Decimal
    total_commission_value: Decimal


class VehicleCreate(BaseModel):
    """Schema dla dodawania pojazdu, referencja generowana gdy brak."""

    stand_id: int = Field(..., gt=0)
    reference: str | None = Field(default=None, max_length=20)
    brand: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    year: int = Field(..., ge=1900, le=2100)
    mileage: int = Field(default=0, ge=0)
    fuel_type: FuelType | None = None
    transmission: Transmission | None = None
    color: str | None = Field(default=None, max_length=50)
    price: Decimal = Field(..., ge=0)
    original_price: Decimal | None = Field(default=None, ge=0)
    discount_percentage: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    description: str | None = None
    features: List[str] | None = None

    model_config = ConfigDict(use_enum_values=True)


class VehicleOut(BaseModel):
    id: int
    stand_id: int
    reference: str
    full_name: str
    price: Decimal
    current_price: Decimal
    discount_amount: Decimal
    status: str
    status_label: str
    features: List[str] | None
    views_count: int

    model_config = ConfigDict(from_attributes=True)


class VehicleImageOut(BaseModel):
    id: int
    vehicle_id: int
    url: str
    is_primary: bool
    order_index: int

    model_config = ConfigDict(from_attributes=True)


class ImagePositionIn(BaseModel):
    position: int = Field(..., ge=0)


class InquiryCreate(BaseModel):
    """Schema dla nowego zapytania klienta."""

    stand_id: int = Field(..., gt=0)
    vehicle_id: int | None = Field(default=None, gt=0)
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    phone: str | None = Field(default=None, max_length=20)
    message: str | None = None
    inquiry_type: InquiryType = InquiryType.GENERAL.value

    model_config = ConfigDict(use_enum_values=True)


class InquiryOut(BaseModel):
    id: int
    stand_id: int
    vehicle_id: int | None
    name: str
    email: str
    inquiry_type: str
    inquiry_type_label: str
    status: str
    status_label: str
    assigned_to: int | None
    notes: str | None

    model_config = ConfigDict(from_attributes=True)


class InquirySummaryOut(BaseModel):
    id: int
    summary: str
    status_label: str
    priority: str
    days_since_creation: int
    is_overdue: bool
    stand_name: str
    assigned_user_name: str | None


class InquiryStatusIn(BaseModel):
    status: InquiryStatus

    model_config = ConfigDict(use_enum_values=True)


class InquiryAssignIn(BaseModel):
    user_id: int = Field(..., gt=0)


class InquiryNotesIn(BaseModel):
    notes: str = Field(..., min_length=1)


class FavoriteToggleOut(BaseModel):
    vehicle_id: int
    favorited: bool
    favorites_count: int


class FavoriteCountOut(BaseModel):
    vehicle_id: int
    favorites_count: int
