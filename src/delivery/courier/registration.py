"""Courier registration — commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.shared.location import Location

logger = structlog.get_logger(__name__)


@delivery.command(part_of="Courier")
class RegisterCourier:
    """Register a courier at a starting position."""

    name = String(required=True, max_length=100)
    speed = Integer(required=True)
    x = Integer(required=True)
    y = Integer(required=True)


@delivery.command(part_of="Courier")
class AddStoragePlace:
    """Give a courier an extra storage place."""

    courier_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    volume = Integer(required=True)


@delivery.command_handler(part_of=Courier)
class CourierRegistrationHandler:
    @handle(RegisterCourier)
    def register_courier(self, command):
        location = Location.create(command.x, command.y)
        courier = Courier.create(name=command.name, speed=command.speed, location=location)
        current_domain.repository_for(Courier).add(courier)
        logger.info("Courier registered", courier_id=str(courier.id), name=courier.name, speed=courier.speed)
        return str(courier.id)

    @handle(AddStoragePlace)
    def add_storage_place(self, command):
        repo = current_domain.repository_for(Courier)
        courier = repo.get(command.courier_id)
        place = courier.add_storage_place(command.name, command.volume)
        repo.add(courier)
        logger.info(
            "Storage place added",
            courier_id=str(courier.id),
            storage_place_id=str(place.id),
            total_volume=place.total_volume,
        )
        return str(place.id)
