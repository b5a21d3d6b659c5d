from models.users import User
from models.restaurant_tables import RestaurantTable
from models.reservations import Reservation

__all__ = [
    "User",
    "RestaurantTable",
    "Reservation",
]
