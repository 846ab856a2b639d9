"""Profile Id Generator — hex format, uniqueness and failure mapping."""

import re

import pytest

import app.infrastructure.id_generator as id_generator
from app.core.errors import IdentifierGenerationError
from app.infrastructure.id_generator import generate_profile_id


def test_id_is_sha256_hex():
    assert re.fullmatch(r"[0-9a-f]{64}", generate_profile_id())


def test_ids_differ_between_calls():
    assert len({generate_profile_id() for _ in range(20)}) == 20


def test_entropy_failure_raises_identifier_error(monkeypatch):
    def no_entropy(n):
        raise OSError("getrandom failed")

    monkeypatch.setattr(id_generator.secrets, "token_bytes", no_entropy)
    with pytest.raises(IdentifierGenerationError) as exc_info:
        generate_profile_id()
    assert exc_info.value.code == "ID_GENERATION_FAILED"
    assert exc_info.value.http_status == 503
