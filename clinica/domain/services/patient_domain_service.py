"""Resolución de pacientes al agendar y registro de visitas."""

import logging
from datetime import date
from typing import TYPE_CHECKING

from clinica.domain.constants import RESOURCE_PATIENT
from clinica.domain.entities.patient import Patient
from clinica.domain.errors import DomainError, NotFoundError

if TYPE_CHECKING:
    from clinica.application.interfaces.patient_repo import PatientRepo

logger = logging.getLogger(__name__)


class PatientDomainService:
    """Servicio de dominio para pacientes; el repositorio se recibe por parámetro."""

    @staticmethod
    async def resolve_patient(
        patient_repo: "PatientRepo",
        patient_id: str | None = None,
        patient_name: str | None = None,
        patient_email: str | None = None,
        patient_phone: str | None = None,
        user_id: str | None = None,
    ) -> Patient:
        """
        Obtiene el paciente del agendamiento.

        Orden de resolución:
            1. `patient_id` informado: debe existir.
            2. Paciente existente con el mismo nombre o email (se actualizan
               email/teléfono si vinieron en la entrada).
            3. Nuevo paciente cuyo dueño es `user_id`.

        Raises:
            NotFoundError: Si `patient_id` no existe.
            DomainError: Si falta el nombre o el dueño para crear uno nuevo.
        """
        if patient_id:
            patient = await patient_repo.find_by_id(patient_id)
            if patient is None:
                raise NotFoundError(RESOURCE_PATIENT, patient_id)
            return patient

        if not patient_name:
            raise DomainError("Nome do paciente é obrigatório")

        existing = await patient_repo.find_by_name_or_email(patient_name, patient_email)
        if existing is not None:
            if patient_email or patient_phone:
                if patient_email:
                    existing.update_email(patient_email)
                if patient_phone:
                    existing.update_phone(patient_phone)
                existing = await patient_repo.update(existing)
            logger.info(
                "Paciente existente reutilizado",
                extra={"patient_id": existing.id},
            )
            return existing

        if not user_id:
            raise DomainError("user_id é obrigatório para criar novo paciente")

        patient = Patient.create(
            name=patient_name,
            user_id=user_id,
            email=patient_email,
            phone=patient_phone,
        )
        created = await patient_repo.create(patient)
        logger.info("Paciente criado ao agendar", extra={"patient_id": created.id})
        return created

    @staticmethod
    async def update_last_visit(
        patient_repo: "PatientRepo",
        patient_id: str | None,
        visit_date: date | None,
        today: date | None = None,
    ) -> Patient | None:
        """
        Registra la última visita del paciente.

        No hace nada si faltan datos o el paciente ya no existe.
        """
        if not patient_id or not visit_date:
            return None
        patient = await patient_repo.find_by_id(patient_id)
        if patient is None:
            return None
        patient.update_last_visit(visit_date, today=today)
        return await patient_repo.update(patient)
