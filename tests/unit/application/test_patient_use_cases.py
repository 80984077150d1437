import pytest

from clinica.application.dtos import GetAllPatientsInput
from clinica.application.dtos.pagination import QueryOptions
from clinica.application.use_cases.patient import (
    CreatePatientUseCase,
    DeletePatientUseCase,
    GetAllPatientsUseCase,
    GetPatientUseCase,
    UpdatePatientUseCase,
)
from clinica.application.validators import (
    CreatePatientInputValidator,
    UpdatePatientInputValidator,
)
from clinica.domain.errors import DomainError, NotFoundError, ValidationError
from clinica.infrastructure.services import StaticAuthService


@pytest.fixture()
def create_use_case(patient_repo, auth_service, sanitizer, audit_service):
    return CreatePatientUseCase(
        patient_repo=patient_repo,
        auth_service=auth_service,
        validator=CreatePatientInputValidator(),
        sanitizer=sanitizer,
        audit_service=audit_service,
    )


@pytest.fixture()
def update_use_case(patient_repo, sanitizer, audit_service):
    return UpdatePatientUseCase(
        patient_repo=patient_repo,
        validator=UpdatePatientInputValidator(),
        sanitizer=sanitizer,
        audit_service=audit_service,
    )


async def test_create_patient(create_use_case, patient_repo, audit_service, user_id):
    output = await create_use_case.execute(
        {"name": "joão silva", "email": "Joao@Example.com", "phone": "11987654321"}
    )

    patient = output.patient
    assert str(patient.name) == "João Silva"
    assert str(patient.email) == "joao@example.com"
    assert patient.user_id == user_id
    assert await patient_repo.find_by_id(patient.id) == patient
    assert audit_service.entries[0].new_data["email"] == "[REDACTED]"


async def test_create_patient_rejects_short_name(create_use_case, patient_repo):
    with pytest.raises(ValidationError) as exc_info:
        await create_use_case.execute({"name": "Jo"})

    assert exc_info.value.fields == ["name"]
    assert await patient_repo.find_all() == []


async def test_create_patient_requires_authenticated_user(
    patient_repo, sanitizer, audit_service
):
    use_case = CreatePatientUseCase(
        patient_repo=patient_repo,
        auth_service=StaticAuthService(None),
        validator=CreatePatientInputValidator(),
        sanitizer=sanitizer,
        audit_service=audit_service,
    )

    with pytest.raises(DomainError) as exc_info:
        await use_case.execute({"name": "John Doe"})

    assert exc_info.value.code == "UNAUTHENTICATED"


async def test_get_patient(patient_repo, patient):
    output = await GetPatientUseCase(patient_repo).execute({"id": patient.id})
    assert output.patient == patient


async def test_get_patient_not_found(patient_repo):
    with pytest.raises(NotFoundError) as exc_info:
        await GetPatientUseCase(patient_repo).execute({"id": "missing-id"})

    assert exc_info.value.resource == "Paciente"
    assert exc_info.value.id == "missing-id"


async def test_get_all_patients_filters(create_use_case, patient_repo):
    await create_use_case.execute({"name": "Ana Souza", "email": "ana@example.com"})
    await create_use_case.execute({"name": "Bruno Lima"})

    output = await GetAllPatientsUseCase(patient_repo).execute(
        GetAllPatientsInput(options=QueryOptions(filters={"email": "ana@example.com"}))
    )

    assert [str(p.name) for p in output.patients] == ["Ana Souza"]


async def test_update_patient_only_provided_fields(update_use_case, patient):
    output = await update_use_case.execute({"id": patient.id, "phone": "1133334444"})

    assert str(output.patient.phone) == "1133334444"
    assert str(output.patient.email) == "maria@example.com"
    assert output.patient.name == patient.name


async def test_update_patient_explicit_none_clears_email(update_use_case, patient):
    output = await update_use_case.execute({"id": patient.id, "email": None})
    assert output.patient.email is None


async def test_update_patient_not_found(update_use_case):
    with pytest.raises(NotFoundError):
        await update_use_case.execute({"id": "missing-id", "name": "John Doe"})


async def test_delete_patient(patient_repo, audit_service, patient):
    use_case = DeletePatientUseCase(patient_repo, audit_service)

    output = await use_case.execute({"id": patient.id})

    assert output.success is True
    assert await patient_repo.find_by_id(patient.id) is None
    with pytest.raises(NotFoundError):
        await use_case.execute({"id": patient.id})
