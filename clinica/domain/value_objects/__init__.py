"""Value Objects del dominio de clínicas."""

from clinica.domain.value_objects.appointment_status import AppointmentStatus
from clinica.domain.value_objects.email import Email
from clinica.domain.value_objects.money import Money
from clinica.domain.value_objects.name import Name
from clinica.domain.value_objects.payment_type import PaymentType
from clinica.domain.value_objects.phone import Phone
from clinica.domain.value_objects.procedure import Procedure
from clinica.domain.value_objects.time import Time

__all__ = [
    "AppointmentStatus",
    "Email",
    "Money",
    "Name",
    "PaymentType",
    "Phone",
    "Procedure",
    "Time",
]
