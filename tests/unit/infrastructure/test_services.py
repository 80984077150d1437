import logging
from datetime import date, datetime, timezone

import pytest

from clinica.application.interfaces.clock import FakeClock
from clinica.config import Settings
from clinica.container import build_bundle, build_use_cases, get_use_cases
from clinica.infrastructure.services import (
    BleachSanitizer,
    ClockImpl,
    LoggingAuditService,
    StaticAuthService,
)
from clinica.logging_config import LOG_FORMAT, configure_logging


# === Sanitizer ===


def test_sanitize_text_strips_markup():
    sanitizer = BleachSanitizer()
    assert sanitizer.sanitize_text("<p>Olá <b>mundo</b></p>") == "Olá mundo"
    assert sanitizer.sanitize_text("antes<script>alert('x')</script>depois") == "antesdepois"
    assert sanitizer.sanitize_text("") == ""


def test_sanitize_text_keeps_literal_characters():
    sanitizer = BleachSanitizer()
    text = "Dor < 5 & sensibilidade"
    assert sanitizer.sanitize_text(text) == text
    assert sanitizer.sanitize_text(sanitizer.sanitize_text(text)) == text
    assert sanitizer.sanitize_text("<b>R&D</b>") == "R&D"


def test_sanitize_text_rejects_non_strings():
    with pytest.raises(TypeError):
        BleachSanitizer().sanitize_text(None)


def test_sanitize_html_keeps_allowed_tags():
    html = '<p onclick="x()">Texto <strong>forte</strong> <a href="http://x">link</a></p>'
    assert BleachSanitizer().sanitize_html(html) == "<p>Texto <strong>forte</strong> link</p>"


def test_deep_sanitize_walks_nested_structures():
    cleaned = BleachSanitizer().deep_sanitize(
        {"notes": "<i>nota</i>", "items": ["<b>a</b>", 1], "paid": True}
    )
    assert cleaned == {"notes": "nota", "items": ["a", 1], "paid": True}


# === Audit / Auth ===


async def test_audit_redacts_sensitive_fields(caplog):
    audit = LoggingAuditService(StaticAuthService("u-1"))

    with caplog.at_level(logging.INFO, logger="clinica.audit"):
        await audit.log("update", "patient", "p-1", {"email": "a@b.com", "name": "Ana"}, None)

    entry = audit.entries[0]
    assert entry.user_id == "u-1"
    assert entry.old_data == {"email": "[REDACTED]", "name": "Ana"}
    assert entry.new_data is None
    assert "Audit update patient" in caplog.text


async def test_audit_skips_when_not_authenticated():
    audit = LoggingAuditService(StaticAuthService(None))
    await audit.log("create", "patient", "p-1")
    assert audit.entries == []


# === Clock / wiring ===


def test_clock_impl_is_timezone_aware():
    assert ClockImpl().now().tzinfo is not None


def test_fake_clock_advance():
    clock = FakeClock()
    start = clock.now()
    clock.advance(days=1)
    assert (clock.now() - start).days == 1


async def test_container_wires_every_use_case():
    bundle = build_bundle(Settings(current_user_id="u-1"))
    use_cases = build_use_cases(bundle)

    assert len(use_cases) == 15
    output = await use_cases["create_clinic"].execute({"name": "Clínica Central"})
    listed = await use_cases["get_all_clinics"].execute()
    assert listed.clinics == [output.clinic]


async def test_static_auth_set_user():
    auth = StaticAuthService()
    assert not await auth.is_authenticated()
    auth.set_user("u-2")
    assert await auth.get_current_user_id() == "u-2"


def test_fake_clock_set_time():
    clock = FakeClock()
    clock.set_time(datetime(2025, 1, 2, 8, 0, tzinfo=timezone.utc))
    assert clock.today() == date(2025, 1, 2)


def test_get_use_cases_shares_the_process_bundle():
    first = get_use_cases()
    second = get_use_cases()
    assert first["get_clinic"]._clinic_repo is second["get_clinic"]._clinic_repo


def test_configure_logging_accepts_level_names(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging("debug")

    assert calls == [{"level": logging.DEBUG, "format": LOG_FORMAT}]
