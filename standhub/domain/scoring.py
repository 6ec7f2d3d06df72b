# standhub/domain/scoring.py
"""
Ocena wydajnosci sprzedawcy.

rating = min(sprzedaze * 10, 50)
       + min(konwersja% * 0.5, 30)
       + min(srednia_sprzedaz / 1000, 20)

Wszystkie stale pochodza z ustawien (PERFORMANCE_*) i mozna je nadpisac
przekazujac wlasny PerformanceWeights.
"""
from dataclasses import dataclass
from decimal import Decimal

from standhub.utils import settings

LEVEL_LABELS = ("Excelente", "Bom", "Regular", "Baixo")
LOWEST_LEVEL = "Muito Baixo"


@dataclass(frozen=True)
class PerformanceWeights:
    sale_points: float = settings.PERFORMANCE_SALE_POINTS
    sales_cap: float = settings.PERFORMANCE_SALES_CAP
    conversion_weight: float = settings.PERFORMANCE_CONVERSION_WEIGHT
    conversion_cap: float = settings.PERFORMANCE_CONVERSION_CAP
    avg_sale_divisor: float = settings.PERFORMANCE_AVG_SALE_DIVISOR
    avg_sale_cap: float = settings.PERFORMANCE_AVG_SALE_CAP
    # malejaco, kazdy prog odpowiada etykiecie z LEVEL_LABELS
    level_thresholds: tuple = settings.PERFORMANCE_LEVEL_THRESHOLDS


DEFAULT_WEIGHTS = PerformanceWeights()


def conversion_rate(converted: int, assigned: int) -> float:
    if assigned <= 0:
        return 0.0
    return converted / assigned * 100


def performance_rating(
    total_sales: int,
    conversion_rate_pct: float,
    average_sale_value: Decimal | float,
    weights: PerformanceWeights = DEFAULT_WEIGHTS,
) -> float:
    sales_score = min(total_sales * weights.sale_points, weights.sales_cap)
    conversion_score = min(conversion_rate_pct * weights.conversion_weight, weights.conversion_cap)
    if weights.avg_sale_divisor:
        average_score = min(float(average_sale_value) / weights.avg_sale_divisor, weights.avg_sale_cap)
    else:
        average_score = 0.0
    return float(sales_score + conversion_score + average_score)


def performance_level(rating: float, weights: PerformanceWeights = DEFAULT_WEIGHTS) -> str:
    for threshold, label in zip(weights.level_thresholds, LEVEL_LABELS):
        if rating >= threshold:
            return label
    return LOWEST_LEVEL
