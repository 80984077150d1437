"""DTOs (Data Transfer Objects) de la capa de aplicación."""

from clinica.application.dtos.appointment_dto import (
    CreateAppointmentOutput,
    DeleteAppointmentInput,
    DeleteAppointmentOutput,
    GetAllAppointmentsInput,
    GetAllAppointmentsOutput,
    GetAppointmentInput,
    GetAppointmentOutput,
    UpdateAppointmentOutput,
)
from clinica.application.dtos.clinic_dto import (
    CreateClinicOutput,
    DeleteClinicInput,
    DeleteClinicOutput,
    GetAllClinicsInput,
    GetAllClinicsOutput,
    GetClinicInput,
    GetClinicOutput,
    UpdateClinicOutput,
)
from clinica.application.dtos.pagination import Page, QueryOptions
from clinica.application.dtos.patient_dto import (
    CreatePatientOutput,
    DeletePatientInput,
    DeletePatientOutput,
    GetAllPatientsInput,
    GetAllPatientsOutput,
    GetPatientInput,
    GetPatientOutput,
    UpdatePatientOutput,
)

__all__ = [
    # Pagination
    "Page",
    "QueryOptions",
    # Appointment DTOs
    "GetAppointmentInput",
    "DeleteAppointmentInput",
    "GetAllAppointmentsInput",
    "CreateAppointmentOutput",
    "GetAppointmentOutput",
    "GetAllAppointmentsOutput",
    "UpdateAppointmentOutput",
    "DeleteAppointmentOutput",
    # Patient DTOs
    "GetPatientInput",
    "DeletePatientInput",
    "GetAllPatientsInput",
    "CreatePatientOutput",
    "GetPatientOutput",
    "GetAllPatientsOutput",
    "UpdatePatientOutput",
    "DeletePatientOutput",
    # Clinic DTOs
    "GetClinicInput",
    "DeleteClinicInput",
    "GetAllClinicsInput",
    "CreateClinicOutput",
    "GetClinicOutput",
    "GetAllClinicsOutput",
    "UpdateClinicOutput",
    "DeleteClinicOutput",
]
