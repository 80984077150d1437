"""Constantes del dominio de clínicas, pacientes y agendamientos."""

# === Agendamientos ===

MAX_CLINICAL_EVOLUTION_LENGTH = 10000
MAX_NOTES_LENGTH = 5000
MAX_PROCEDURE_LENGTH = 255
MAX_PAYMENT_TYPE_LENGTH = 10
DEFAULT_CURRENCY = "BRL"
SUPPORTED_CURRENCIES = ("BRL", "USD", "EUR")
PAYMENT_TYPE_FULL = "100"
PAYMENT_TYPE_PERCENTAGE = "percentage"
CANCELLATION_NOTICE_HOURS = 24

# === Clínicas ===

CLINIC_STATUS_ACTIVE = "active"
CLINIC_STATUS_INACTIVE = "inactive"
MAX_CLINIC_PHONE_LENGTH = 15
MAX_ADDRESS_LENGTH = 500

# === Pacientes / nombres ===

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 255

# === Nombres de recursos (mensajes de NotFoundError) ===

RESOURCE_APPOINTMENT = "Agendamento"
RESOURCE_PATIENT = "Paciente"
RESOURCE_CLINIC = "Clínica"
