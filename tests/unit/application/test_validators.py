from datetime import date
from decimal import Decimal

import pytest

from clinica.application.validators import (
    CreateAppointmentInputValidator,
    CreateClinicInputValidator,
    CreatePatientInputValidator,
    UpdateAppointmentInputValidator,
    UpdatePatientInputValidator,
)
from clinica.domain.errors import ValidationError

PATIENT_ID = "3f1c2a9e-8b7d-4c6e-9a5f-1b2c3d4e5f60"


@pytest.fixture()
def create_validator():
    return CreateAppointmentInputValidator()


def test_create_appointment_omitted_optionals_are_none(create_validator, appointment_payload):
    result = create_validator.validate(appointment_payload)

    assert result.date == date(2025, 6, 20)
    assert result.time == "14:30"
    assert result.value == Decimal("150.00")
    assert result.allow_past_dates is False
    assert result.is_paid is False
    assert result.currency == "BRL"
    assert result.payment_type == "100"
    for name in ("patient_id", "patient_email", "patient_phone", "clinic_id", "notes",
                 "clinical_evolution", "payment_percentage", "payment_date"):
        assert getattr(result, name) is None


def test_create_appointment_accepts_snake_case(create_validator):
    result = create_validator.validate({
        "patient_id": PATIENT_ID,
        "date": "2030-06-20T10:00:00Z",
        "time": " 09:00 ",
        "procedure": "Consulta",
        "allow_past_dates": True,
    })
    assert result.patient_id == PATIENT_ID
    assert result.date == date(2030, 6, 20)
    assert result.time == "09:00"
    assert result.allow_past_dates is True


@pytest.mark.parametrize("raw", ["09:00:00", "9:00", "24:00"])
def test_create_appointment_time_must_be_hours_and_minutes(create_validator, appointment_payload, raw):
    appointment_payload["time"] = raw
    with pytest.raises(ValidationError) as exc_info:
        create_validator.validate(appointment_payload)
    assert exc_info.value.fields == ["time"]


def test_create_appointment_does_not_mutate_input(create_validator, appointment_payload):
    original = dict(appointment_payload)
    create_validator.validate(appointment_payload)
    assert appointment_payload == original


def test_create_appointment_requires_patient(create_validator, appointment_payload):
    del appointment_payload["patientName"]

    with pytest.raises(ValidationError) as exc_info:
        create_validator.validate(appointment_payload)

    assert exc_info.value.fields == ["patient"]
    assert exc_info.value.message.startswith("Dados inválidos para criação de agendamento: patient:")


def test_create_appointment_reports_every_violation(create_validator):
    result = create_validator.check({
        "patientId": "not-a-uuid",
        "date": "20/06/2030",
        "time": "25:00",
        "procedure": "Consulta",
        "value": -10,
        "patientEmail": "sem-arroba",
    })

    assert result.ok is False
    by_field = {v["field"]: v["message"] for v in result.violations}
    assert by_field["patient_id"] == "ID do paciente inválido"
    assert by_field["date"] == "Data inválida (formato esperado: YYYY-MM-DD)"
    assert by_field["time"] == "Hora inválida (formato esperado: HH:mm)"
    assert by_field["patient_email"] == "Email inválido"
    assert "value" in by_field


def test_create_appointment_rejects_non_mapping(create_validator):
    result = create_validator.check(["not", "a", "mapping"])
    assert result.ok is False
    assert result.violations[0]["field"] == "__root__"


def test_create_appointment_missing_required_fields(create_validator):
    with pytest.raises(ValidationError) as exc_info:
        create_validator.validate({"patientName": "Maria Silva"})
    assert {"date", "time", "procedure"} <= set(exc_info.value.fields)


def test_update_appointment_tracks_provided_fields():
    result = UpdateAppointmentInputValidator().validate(
        {"id": "a-1", "notes": None, "clinicalEvolution": "Melhora", "patientId": PATIENT_ID}
    )
    assert result.provided == {"notes", "clinical_evolution", "patient_id"}
    assert result.changes() == {"notes": None, "clinical_evolution": "Melhora"}


def test_update_appointment_requires_id():
    with pytest.raises(ValidationError) as exc_info:
        UpdateAppointmentInputValidator().validate({"id": "  ", "notes": "x"})
    assert exc_info.value.fields == ["id"]


def test_update_appointment_rejects_unknown_status():
    result = UpdateAppointmentInputValidator().check({"id": "a-1", "status": "done"})
    assert not result.ok
    assert result.violations[0]["field"] == "status"


@pytest.mark.parametrize("name", ["Jo", "Maria123", ""])
def test_create_patient_rejects_invalid_names(name):
    assert not CreatePatientInputValidator().check({"name": name}).ok


def test_create_patient_normalizes_email_and_blank_phone():
    result = CreatePatientInputValidator().validate(
        {"name": " João Silva ", "email": " Joao@Example.com ", "phone": ""}
    )
    assert result.name == "João Silva"
    assert result.email == "joao@example.com"
    assert result.phone is None


def test_update_patient_provided_fields():
    result = UpdatePatientInputValidator().validate({"id": "p-1", "email": None})
    assert result.provided == {"email"}
    assert result.email is None


def test_create_clinic_validates_status_and_phone():
    validator = CreateClinicInputValidator()
    assert validator.check({"name": "Clínica Central", "status": "inactive"}).ok
    assert not validator.check({"name": "Clínica Central", "status": "closed"}).ok
    assert not validator.check({"name": "Clínica Central", "phone": "123"}).ok
