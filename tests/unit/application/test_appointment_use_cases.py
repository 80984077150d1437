import logging
from datetime import date
from decimal import Decimal

import pytest

from clinica.application.dtos import GetAppointmentInput
from clinica.application.dtos.pagination import Page, QueryOptions
from clinica.application.interfaces.audit_service import AuditService
from clinica.application.use_cases.appointment import (
    CreateAppointmentUseCase,
    DeleteAppointmentUseCase,
    GetAllAppointmentsUseCase,
    GetAppointmentUseCase,
    UpdateAppointmentUseCase,
)
from clinica.application.validators import (
    CreateAppointmentInputValidator,
    UpdateAppointmentInputValidator,
)
from clinica.domain.entities import Appointment
from clinica.domain.errors import NotFoundError, ValidationError
from clinica.domain.value_objects import AppointmentStatus


class FailingAuditService(AuditService):
    async def log(self, action, resource_type, resource_id, old_data=None, new_data=None):
        raise RuntimeError("audit store unavailable")


@pytest.fixture()
def create_use_case(appointment_repo, patient_repo, auth_service, sanitizer, audit_service, clock):
    return CreateAppointmentUseCase(
        appointment_repo=appointment_repo,
        patient_repo=patient_repo,
        auth_service=auth_service,
        validator=CreateAppointmentInputValidator(),
        sanitizer=sanitizer,
        audit_service=audit_service,
        clock=clock,
    )


@pytest.fixture()
def update_use_case(appointment_repo, patient_repo, sanitizer, audit_service, clock):
    return UpdateAppointmentUseCase(
        appointment_repo=appointment_repo,
        patient_repo=patient_repo,
        validator=UpdateAppointmentInputValidator(),
        sanitizer=sanitizer,
        audit_service=audit_service,
        clock=clock,
    )


@pytest.fixture()
async def stored_appointment(appointment_repo, patient):
    return await appointment_repo.create(
        Appointment.create(
            patient_id=patient.id,
            patient_name=str(patient.name),
            date="2025-06-20",
            time="10:00",
            procedure="Consulta",
            value="200",
            clinic_id="clinic-1",
            notes="Trazer exames",
        )
    )


# === Create ===


async def test_create_appointment_creates_new_patient(
    create_use_case, appointment_payload, appointment_repo, patient_repo, audit_service, user_id
):
    output = await create_use_case.execute(appointment_payload)
    appointment = output.appointment

    assert appointment.status is AppointmentStatus.PENDING
    assert appointment.user_id == user_id
    assert appointment.value.amount == Decimal("150.00")
    assert appointment.patient_name == "Maria Silva"
    assert await appointment_repo.find_by_id(appointment.id) == appointment

    patients = await patient_repo.find_all()
    assert [p.id for p in patients] == [appointment.patient_id]
    assert [(e.action, e.resource_type) for e in audit_service.entries] == [
        ("create", "appointment")
    ]


async def test_create_appointment_reuses_patient_by_name(
    create_use_case, appointment_payload, patient, patient_repo
):
    appointment_payload["patientPhone"] = "1133334444"

    output = await create_use_case.execute(appointment_payload)

    assert output.appointment.patient_id == patient.id
    assert output.appointment.patient_phone == "1133334444"
    assert str((await patient_repo.find_by_id(patient.id)).phone) == "1133334444"


async def test_create_appointment_with_unknown_patient_id(create_use_case, appointment_payload):
    appointment_payload["patientId"] = "3f1c2a9e-8b7d-4c6e-9a5f-1b2c3d4e5f60"

    with pytest.raises(NotFoundError) as exc_info:
        await create_use_case.execute(appointment_payload)

    assert exc_info.value.resource == "Paciente"


async def test_create_appointment_rejects_past_dates(create_use_case, appointment_payload):
    appointment_payload["date"] = "2025-06-10"

    with pytest.raises(ValidationError) as exc_info:
        await create_use_case.execute(appointment_payload)

    assert exc_info.value.fields == ["date"]


async def test_create_past_appointment_updates_last_visit(
    create_use_case, appointment_payload, patient, patient_repo
):
    appointment_payload.update({"date": "2025-06-10", "allowPastDates": True, "isPaid": True})

    output = await create_use_case.execute(appointment_payload)

    assert output.appointment.status is AppointmentStatus.PAID
    assert output.appointment.payment_date == date(2025, 6, 15)
    assert (await patient_repo.find_by_id(patient.id)).last_visit == date(2025, 6, 10)


async def test_create_appointment_sanitizes_free_text(create_use_case, appointment_payload):
    appointment_payload["notes"] = "<b>Retorno</b><script>alert(1)</script>"

    output = await create_use_case.execute(appointment_payload)

    assert output.appointment.notes == "Retorno"


async def test_create_appointment_survives_audit_failure(
    appointment_repo, patient_repo, auth_service, sanitizer, clock, appointment_payload, caplog
):
    use_case = CreateAppointmentUseCase(
        appointment_repo=appointment_repo,
        patient_repo=patient_repo,
        auth_service=auth_service,
        validator=CreateAppointmentInputValidator(),
        sanitizer=sanitizer,
        audit_service=FailingAuditService(),
        clock=clock,
    )

    with caplog.at_level(logging.WARNING):
        output = await use_case.execute(appointment_payload)

    assert await appointment_repo.find_by_id(output.appointment.id) is not None
    assert "Failed to log audit action" in caplog.text


async def test_create_appointment_invalid_input_touches_nothing(
    create_use_case, appointment_repo, patient_repo
):
    with pytest.raises(ValidationError):
        await create_use_case.execute({"patientName": "Maria Silva"})

    assert await appointment_repo.find_all() == []
    assert await patient_repo.find_all() == []


# === Get / GetAll ===


async def test_get_appointment_returns_it(appointment_repo, stored_appointment):
    output = await GetAppointmentUseCase(appointment_repo).execute(
        GetAppointmentInput(id=stored_appointment.id)
    )
    assert output.appointment == stored_appointment


async def test_get_appointment_not_found(appointment_repo):
    with pytest.raises(NotFoundError) as exc_info:
        await GetAppointmentUseCase(appointment_repo).execute({"id": "missing-id"})

    assert exc_info.value.resource == "Agendamento"
    assert exc_info.value.id == "missing-id"
    assert exc_info.value.message == "Agendamento com ID missing-id não encontrado"


async def test_get_appointment_requires_id(appointment_repo):
    with pytest.raises(ValidationError):
        await GetAppointmentUseCase(appointment_repo).execute({"id": ""})


async def test_get_all_appointments_paginates(appointment_repo, patient):
    for day in range(1, 6):
        await appointment_repo.create(
            Appointment.create(
                patient_id=patient.id,
                date=date(2025, 7, day),
                time="09:00",
                procedure="Consulta",
                value=100,
            )
        )
    use_case = GetAllAppointmentsUseCase(appointment_repo)

    listed = (await use_case.execute()).appointments
    assert len(listed) == 5

    page = (await use_case.execute({"page": 2, "pageSize": 2, "orderBy": "date",
                                     "orderDirection": "asc"})).appointments
    assert isinstance(page, Page)
    assert [a.date.day for a in page.data] == [3, 4]
    assert page.total == 5
    assert page.total_pages == 3
    assert page.has_next and page.has_prev

    limited = (await use_case.execute(QueryOptions(order_by="date", limit=1))).appointments
    assert [a.date.day for a in limited] == [5]


# === Update ===


async def test_update_appointment_applies_provided_fields(
    update_use_case, stored_appointment, audit_service
):
    output = await update_use_case.execute(
        {"id": stored_appointment.id, "time": "11:30", "notes": None}
    )

    updated = output.appointment
    assert str(updated.time) == "11:30"
    assert updated.notes is None
    assert updated.clinic_id == "clinic-1"
    assert str(updated.procedure) == "Consulta"
    entry = audit_service.entries[-1]
    assert entry.action == "update"
    assert entry.old_data["notes"] == "[REDACTED]"
    assert entry.new_data["notes"] is None


async def test_update_appointment_resending_text_keeps_it_unchanged(
    update_use_case, stored_appointment, appointment_repo
):
    notes = "Dor < 5 & sensibilidade"

    first = await update_use_case.execute({"id": stored_appointment.id, "notes": notes})
    second = await update_use_case.execute(
        {"id": stored_appointment.id, "notes": first.appointment.notes}
    )

    assert first.appointment.notes == notes
    assert second.appointment.notes == notes
    assert (await appointment_repo.find_by_id(stored_appointment.id)).notes == notes


async def test_update_appointment_mark_paid(update_use_case, stored_appointment):
    output = await update_use_case.execute({"id": stored_appointment.id, "isPaid": True})

    assert output.appointment.status is AppointmentStatus.PAID
    assert output.appointment.payment_date == date(2025, 6, 15)


async def test_update_appointment_past_date_updates_last_visit(
    update_use_case, stored_appointment, patient_repo
):
    await update_use_case.execute({"id": stored_appointment.id, "date": "2025-06-01"})

    patient = await patient_repo.find_by_id(stored_appointment.patient_id)
    assert patient.last_visit == date(2025, 6, 1)


async def test_update_appointment_not_found(update_use_case):
    with pytest.raises(NotFoundError):
        await update_use_case.execute({"id": "missing-id", "notes": "x"})


async def test_update_appointment_persists_only_on_success(
    update_use_case, stored_appointment, appointment_repo
):
    with pytest.raises(ValidationError):
        await update_use_case.execute({"id": stored_appointment.id, "paymentType": "percentage"})

    stored = await appointment_repo.find_by_id(stored_appointment.id)
    assert stored.payment_type.kind == "100"


# === Delete ===


async def test_delete_appointment(appointment_repo, audit_service, stored_appointment):
    use_case = DeleteAppointmentUseCase(appointment_repo, audit_service)

    output = await use_case.execute({"id": stored_appointment.id})

    assert output.success is True
    assert await appointment_repo.find_by_id(stored_appointment.id) is None
    assert audit_service.entries[-1].action == "delete"

    with pytest.raises(NotFoundError):
        await use_case.execute({"id": stored_appointment.id})
