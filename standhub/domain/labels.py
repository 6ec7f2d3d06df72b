# standhub/domain/labels.py
"""
Zamkniete enumy statusow/typow i tablice etykiet do wyswietlania.

Wartosci w bazie sa zwyklymi stringami (dane moga pochodzic ze starszych
systemow), dlatego kazda funkcja etykiety ma jawny fallback dla wartosci
spoza enuma.
"""
from enum import Enum

UNKNOWN = "Desconhecido"
OTHER = "Outro"


class VehicleStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"
    RESERVED = "reserved"
    MAINTENANCE = "maintenance"


class FuelType(str, Enum):
    GASOLINE = "gasoline"
    DIESEL = "diesel"
    HYBRID = "hybrid"
    ELECTRIC = "electric"
    LPG = "lpg"


class Transmission(str, Enum):
    MANUAL = "manual"
    AUTOMATIC = "automatic"
    SEMI_AUTOMATIC = "semi_automatic"


class PaymentMethod(str, Enum):
    CASH = "cash"
    FINANCING = "financing"
    LEASE = "lease"
    TRADE_IN = "trade_in"


class InquiryStatus(str, Enum):
    NEW = "new"
    CONTACTED = "contacted"
    QUALIFIED = "qualified"
    CONVERTED = "converted"
    LOST = "lost"


class InquiryType(str, Enum):
    GENERAL = "general"
    VEHICLE_INFO = "vehicle_info"
    TEST_DRIVE = "test_drive"
    PRICE_NEGOTIATION = "price_negotiation"


class UserRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    SELLER = "seller"
    VIEWER = "viewer"


class AuditAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    LOGIN = "login"
    LOGOUT = "logout"
    VIEW = "view"
    EXPORT = "export"
    IMPORT = "import"
    DOWNLOAD = "download"
    UPLOAD = "upload"


VEHICLE_STATUS_LABELS = {
    VehicleStatus.AVAILABLE: "Disponível",
    VehicleStatus.SOLD: "Vendido",
    VehicleStatus.RESERVED: "Reservado",
    VehicleStatus.MAINTENANCE: "Em Manutenção",
}

FUEL_TYPE_LABELS = {
    FuelType.GASOLINE: "Gasolina",
    FuelType.DIESEL: "Diesel",
    FuelType.HYBRID: "Híbrido",
    FuelType.ELECTRIC: "Elétrico",
    FuelType.LPG: "GPL",
}

TRANSMISSION_LABELS = {
    Transmission.MANUAL: "Manual",
    Transmission.AUTOMATIC: "Automático",
    Transmission.SEMI_AUTOMATIC: "Semi-Automático",
}

PAYMENT_METHOD_LABELS = {
    PaymentMethod.CASH: "Dinheiro",
    PaymentMethod.FINANCING: "Financiamento",
    PaymentMethod.LEASE: "Leasing",
    PaymentMethod.TRADE_IN: "Troca",
}

INQUIRY_STATUS_LABELS = {
    InquiryStatus.NEW: "Novo",
    InquiryStatus.CONTACTED: "Contactado",
    InquiryStatus.QUALIFIED: "Qualificado",
    InquiryStatus.CONVERTED: "Convertido",
    InquiryStatus.LOST: "Perdido",
}

INQUIRY_TYPE_LABELS = {
    InquiryType.GENERAL: "Geral",
    InquiryType.VEHICLE_INFO: "Informação do Veículo",
    InquiryType.TEST_DRIVE: "Teste de Condução",
    InquiryType.PRICE_NEGOTIATION: "Negociação de Preço",
}

ROLE_LABELS = {
    UserRole.ADMIN: "Administrador",
    UserRole.MANAGER: "Gerente",
    UserRole.SELLER: "Vendedor",
    UserRole.VIEWER: "Visualizador",
}

ACTION_LABELS = {
    AuditAction.CREATE: "Criar",
    AuditAction.UPDATE: "Atualizar",
    AuditAction.DELETE: "Eliminar",
    AuditAction.LOGIN: "Login",
    AuditAction.LOGOUT: "Logout",
    AuditAction.VIEW: "Visualizar",
    AuditAction.EXPORT: "Exportar",
    AuditAction.IMPORT: "Importar",
    AuditAction.DOWNLOAD: "Download",
    AuditAction.UPLOAD: "Upload",
}

TABLE_NAME_LABELS = {
    "users": "Utilizadores",
    "vehicles": "Veículos",
    "stands": "Stands",
    "sales": "Vendas",
    "inquiries": "Inquéritos",
    "favorites": "Favoritos",
    "vehicle_images": "Imagens de Veículos",
    "vehicle_views": "Visualizações de Veículos",
    "audit_logs": "Logs de Auditoria",
}


def label_for(enum_cls: type[Enum], labels: dict, value) -> str:
    """Etykieta dla wartosci enuma, UNKNOWN gdy wartosc spoza enuma."""
    try:
        return labels[enum_cls(value)]
    except ValueError:
        return UNKNOWN


def table_name_label(table_name: str) -> str:
    if table_name in TABLE_NAME_LABELS:
        return TABLE_NAME_LABELS[table_name]
    readable = table_name.replace("_", " ")
    return readable[:1].upper() + readable[1:]


# user agent - kolejnosc ma znaczenie, pierwszy pasujacy marker wygrywa
DEVICE_MARKERS = (
    ("mobile", "Mobile"),
    ("tablet", "Tablet"),
)

BROWSER_MARKERS = (
    ("chrome", "Chrome"),
    ("firefox", "Firefox"),
    ("safari", "Safari"),
    ("edge", "Edge"),
    ("opera", "Opera"),
)

OS_MARKERS = (
    ("windows", "Windows"),
    ("mac", "macOS"),
    ("linux", "Linux"),
    ("android", "Android"),
    ("ios", "iOS"),
)


def _classify(user_agent: str | None, markers, fallback: str) -> str:
    if not user_agent:
        return UNKNOWN

    ua = user_agent.lower()
    for marker, label in markers:
        if marker in ua:
            return label
    return fallback


def device_type(user_agent: str | None) -> str:
    return _classify(user_agent, DEVICE_MARKERS, "Desktop")


def browser(user_agent: str | None) -> str:
    return _classify(user_agent, BROWSER_MARKERS, OTHER)


def operating_system(user_agent: str | None) -> str:
    return _classify(user_agent, OS_MARKERS, OTHER)
