# standhub/services/catalog_service.py
import random
import re
import string
import unicodedata

from sqlalchemy.orm import Session

from standhub.data.models.stand import StandModel
from standhub.data.models.vehicle import VehicleModel
from standhub.data.models.vehicle_image import VehicleImageModel
from standhub.repos.stand_repo import StandRepo
from standhub.repos.vehicle_repo import VehicleRepo
from standhub.utils.clock import Clock, utcnow
from standhub.utils.logging import get_logger

logger = get_logger(__name__)

REFERENCE_PREFIX = "VH"
REFERENCE_ALPHABET = string.ascii_uppercase + string.digits
WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def slugify(value: str) -> str:
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^\w\s-]", "", value.lower())
    return re.sub(r"[-\s_]+", "-", value).strip("-")


class CatalogService:
    """
    Stoiska, pojazdy i ich zdjecia.
    Pojazdy i stoiska maja soft delete (deleted_at), zdjecia sa usuwane fizycznie.
    """

    def __init__(self, db: Session, clock: Clock = utcnow, rng: random.Random | None = None):
        self.vehicles = VehicleRepo(db)
        self.stands = StandRepo(db)
        self.clock = clock
        self.rng = rng or random.SystemRandom()

    #stands
    def generate_slug(self, name: str) -> str:
        base = slugify(name)
        slug = base
        counter = 1
        while self.stands.slug_exists(slug):
            slug = f"{base}-{counter}"
            counter += 1
        return slug

    def create_stand(self, name: str, **fields) -> StandModel:
        stand = StandModel(name=name, slug=self.generate_slug(name), **fields)
        created = self.stands.create_stand(stand)
        logger.info(f"Utworzono stoisko {created.id} ({created.slug})")
        return created

    def is_stand_open(self, stand_id: int, day: str | None = None, at: str | None = None) -> bool:
        """
        day: nazwa dnia tygodnia malymi literami, at: 'HH:MM'.
        Domyslnie biezacy dzien i godzina z zegara.
        """
        stand = self.stands.get_stand(stand_id)
        if not stand or not stand.is_active:
            return False

        now = self.clock()
        day = (day or WEEKDAYS[now.weekday()]).lower()
        at = at or now.strftime("%H:%M")

        hours = stand.business_hours_for_day(day)
        if not hours or "open" not in hours or "close" not in hours:
            return False

        return hours["open"] <= at <= hours["close"]

    def delete_stand(self, stand_id: int) -> StandModel:
        stand = self.stands.get_stand(stand_id)
        if not stand:
            raise ValueError("Stoisko nie istnieje")
        stand.soft_delete(self.clock())
        self.stands.commit()
        logger.info(f"Stoisko {stand_id} oznaczone jako usuniete")
        return stand

    def restore_stand(self, stand_id: int) -> StandModel:
        stand = self.stands.get_stand(stand_id, with_deleted=True)
        if not stand:
            raise ValueError("Stoisko nie istnieje")
        stand.restore()
        self.stands.commit()
        return stand

    #vehicles
    def generate_reference(self) -> str:
        while True:
            reference = REFERENCE_PREFIX + "".join(self.rng.choice(REFERENCE_ALPHABET) for _ in range(6))
            if not self.vehicles.reference_exists(reference):
                return reference

    def create_vehicle(self, stand_id: int, **fields) -> VehicleModel:
        if not self.stands.get_stand(stand_id):
            raise ValueError("Stoisko nie istnieje")

        fields.setdefault("reference", self.generate_reference())
        if "features" in fields and fields["features"] is not None:
            fields["features"] = sorted(set(fields["features"]))

        vehicle = self.vehicles.create_vehicle(VehicleModel(stand_id=stand_id, **fields))
        logger.info(f"Dodano pojazd {vehicle.id} ({vehicle.reference}) do stoiska {stand_id}")
        return vehicle

    def delete_vehicle(self, vehicle_id: int) -> VehicleModel:
        vehicle = self.vehicles.get_vehicle(vehicle_id)
        if not vehicle:
            raise ValueError("Pojazd nie istnieje")
        vehicle.soft_delete(self.clock())
        self.vehicles.commit()
        logger.info(f"Pojazd {vehicle_id} oznaczony jako usuniety")
        return vehicle

    def restore_vehicle(self, vehicle_id: int) -> VehicleModel:
        vehicle = self.vehicles.get_vehicle(vehicle_id, with_deleted=True)
        if not vehicle:
            raise ValueError("Pojazd nie istnieje")
        vehicle.restore()
        self.vehicles.commit()
        return vehicle

    #images
    def _get_image(self, image_id: int) -> VehicleImageModel:
        image = self.vehicles.get_image(image_id)
        if not image:
            raise ValueError("Zdjecie nie istnieje")
        return image

    def set_as_primary(self, image_id: int) -> VehicleImageModel:
        # co najwyzej jedno glowne zdjecie na pojazd
        image = self._get_image(image_id)
        for other in self.vehicles.get_images(image.vehicle_id):
            other.is_primary = other.id == image.id
        self.vehicles.commit()
        return image

    def move_to_position(self, image_id: int, position: int) -> list[VehicleImageModel]:
        image = self._get_image(image_id)
        ordered = [i for i in self.vehicles.get_images(image.vehicle_id) if i.id != image.id]

        position = max(0, min(position, len(ordered)))
        ordered.insert(position, image)
        for index, img in enumerate(ordered):
            img.order_index = index

        self.vehicles.commit()
        return ordered
