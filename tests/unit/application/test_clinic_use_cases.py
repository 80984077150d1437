import pytest

from clinica.application.use_cases.clinic import (
    CreateClinicUseCase,
    DeleteClinicUseCase,
    GetAllClinicsUseCase,
    GetClinicUseCase,
    UpdateClinicUseCase,
)
from clinica.application.validators import CreateClinicInputValidator, UpdateClinicInputValidator
from clinica.domain.entities import ClinicStatus
from clinica.domain.errors import NotFoundError, ValidationError


@pytest.fixture()
def create_use_case(clinic_repo, sanitizer, audit_service):
    return CreateClinicUseCase(
        clinic_repo=clinic_repo,
        validator=CreateClinicInputValidator(),
        sanitizer=sanitizer,
        audit_service=audit_service,
    )


@pytest.fixture()
def update_use_case(clinic_repo, sanitizer, audit_service):
    return UpdateClinicUseCase(
        clinic_repo=clinic_repo,
        validator=UpdateClinicInputValidator(),
        sanitizer=sanitizer,
        audit_service=audit_service,
    )


@pytest.fixture()
async def clinic(create_use_case):
    output = await create_use_case.execute(
        {"name": "Clínica Central", "address": "Rua A, 100", "phone": "1133334444"}
    )
    return output.clinic


async def test_create_clinic(clinic, clinic_repo, audit_service):
    assert clinic.status is ClinicStatus.ACTIVE
    assert clinic.address == "Rua A, 100"
    assert await clinic_repo.find_by_id(clinic.id) == clinic
    assert audit_service.entries[0].resource_type == "clinic"


async def test_create_clinic_invalid_email(create_use_case):
    with pytest.raises(ValidationError) as exc_info:
        await create_use_case.execute({"name": "Clínica Central", "email": "invalido"})

    assert exc_info.value.fields == ["email"]


async def test_get_clinic_not_found(clinic_repo):
    with pytest.raises(NotFoundError) as exc_info:
        await GetClinicUseCase(clinic_repo).execute({"id": "missing-id"})

    assert exc_info.value.resource == "Clínica"


async def test_get_and_list_clinics(clinic_repo, clinic):
    assert (await GetClinicUseCase(clinic_repo).execute({"id": clinic.id})).clinic == clinic
    assert (await GetAllClinicsUseCase(clinic_repo).execute()).clinics == [clinic]


async def test_update_clinic_status_and_address(update_use_case, clinic):
    output = await update_use_case.execute(
        {"id": clinic.id, "status": "inactive", "address": ""}
    )

    assert output.clinic.status is ClinicStatus.INACTIVE
    assert output.clinic.address is None
    assert str(output.clinic.name) == "Clínica Central"
    assert str(output.clinic.phone) == "1133334444"


async def test_update_clinic_reactivates(update_use_case, clinic):
    await update_use_case.execute({"id": clinic.id, "status": "inactive"})
    output = await update_use_case.execute({"id": clinic.id, "status": "active"})
    assert output.clinic.is_active


async def test_delete_clinic(clinic_repo, audit_service, clinic):
    use_case = DeleteClinicUseCase(clinic_repo, audit_service)

    assert (await use_case.execute({"id": clinic.id})).success is True
    assert await clinic_repo.find_by_id(clinic.id) is None
    assert audit_service.entries[-1].action == "delete"
