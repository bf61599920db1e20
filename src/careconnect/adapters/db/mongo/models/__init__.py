from .appointment_m import AppointmentMongo
from .doctor_m import DoctorMongo
from .phone_booking_m import PhoneBookingMongo
from .query_m import HealthQueryMongo
from .user_m import UserMongo

DOCUMENT_MODELS = [
    DoctorMongo,
    HealthQueryMongo,
    AppointmentMongo,
    UserMongo,
    PhoneBookingMongo,
]

__all__ = [
    "AppointmentMongo",
    "DOCUMENT_MODELS",
    "DoctorMongo",
    "HealthQueryMongo",
    "PhoneBookingMongo",
    "UserMongo",
]
