from datetime import date

import pytest

from clinica.application.dtos.pagination import QueryOptions
from clinica.domain.entities import Appointment, Clinic, Patient
from clinica.domain.errors import NotFoundError


def _appointment(patient_id="patient-1", day=1, time="09:00", clinic_id=None):
    return Appointment.create(
        patient_id=patient_id,
        date=date(2025, 7, day),
        time=time,
        procedure="Consulta",
        value=100,
        clinic_id=clinic_id,
    )


async def test_returned_entities_are_copies(appointment_repo):
    created = await appointment_repo.create(_appointment())
    created.update(notes="alterado em memória")

    stored = await appointment_repo.find_by_id(created.id)
    assert stored.notes is None


async def test_update_and_delete_missing_raise(appointment_repo):
    with pytest.raises(NotFoundError) as exc_info:
        await appointment_repo.update(_appointment())
    assert exc_info.value.resource == "Agendamento"

    with pytest.raises(NotFoundError):
        await appointment_repo.delete("missing-id")


async def test_find_by_patient_clinic_and_dates(appointment_repo):
    await appointment_repo.create(_appointment("p-1", day=3, clinic_id="c-1"))
    await appointment_repo.create(_appointment("p-1", day=1, time="15:00"))
    await appointment_repo.create(_appointment("p-1", day=1, time="08:00"))
    await appointment_repo.create(_appointment("p-2", day=10, clinic_id="c-1"))

    by_patient = await appointment_repo.find_by_patient_id("p-1")
    assert [(a.date.day, str(a.time)) for a in by_patient] == [(1, "08:00"), (1, "15:00"), (3, "09:00")]

    assert len(await appointment_repo.find_by_clinic_id("c-1")) == 2
    assert len(await appointment_repo.find_by_date(date(2025, 7, 1))) == 2

    in_range = await appointment_repo.find_by_date_range(date(2025, 7, 3), date(2025, 7, 10))
    assert [a.date.day for a in in_range] == [3, 10]


async def test_find_all_filters_and_orders(appointment_repo):
    await appointment_repo.create(_appointment("p-1", day=2))
    await appointment_repo.create(_appointment("p-2", day=5))
    await appointment_repo.create(_appointment("p-1", day=9))

    result = await appointment_repo.find_all(
        QueryOptions(filters={"patient_id": "p-1"}, order_by="date")
    )
    assert [a.date.day for a in result] == [9, 2]


async def test_find_all_page_past_the_end(appointment_repo):
    await appointment_repo.create(_appointment())

    page = await appointment_repo.find_all(QueryOptions(page=3, page_size=10))

    assert page.data == []
    assert page.total == 1
    assert page.has_prev and not page.has_next


async def test_patient_lookup_by_name_or_email(patient_repo):
    created = await patient_repo.create(
        Patient.create(name="Maria Silva", user_id="u-1", email="maria@example.com")
    )

    assert (await patient_repo.find_by_name_or_email("maria silva")).id == created.id
    assert (await patient_repo.find_by_name_or_email("Outra Pessoa", "MARIA@example.com")).id == created.id
    assert await patient_repo.find_by_name_or_email("Outra Pessoa") is None


async def test_patient_lookup_ignores_extra_whitespace(patient_repo):
    created = await patient_repo.create(Patient.create(name="Maria Silva", user_id="u-1"))

    assert (await patient_repo.find_by_name_or_email("  maria   silva ")).id == created.id


async def test_clinic_repo_clear(clinic_repo):
    await clinic_repo.create(Clinic.create(name="Clínica Central"))
    clinic_repo.clear()
    assert await clinic_repo.find_all() == []
