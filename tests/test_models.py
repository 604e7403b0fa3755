"""Unit tests for the shared models (dappgen.models)."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from dappgen.models import (
    Account,
    CreateParams,
    CreationResult,
    CreationStatus,
)

pytestmark = pytest.mark.unit

VALID_KEY = "0x" + "ab" * 32


class TestCreateParams:
    def test_identifiers_default_from_name(self):
        params = CreateParams(name="My Dapp")
        assert params.bundle_identifier == "com.mydapp"
        assert params.package_name == "com.mydapp"
        assert params.uri_scheme == "mydapp"

    def test_explicit_identifiers_are_kept(self):
        params = CreateParams(
            name="demo",
            bundle_identifier="io.example.demo",
            package_name="io.example.demo.android",
            uri_scheme="demoapp",
        )
        assert params.bundle_identifier == "io.example.demo"
        assert params.package_name == "io.example.demo.android"
        assert params.uri_scheme == "demoapp"

    def test_name_is_stripped(self):
        assert CreateParams(name="  demo ").name == "demo"

    @pytest.mark.parametrize("name", ["", "   ", ".", "..", "a/b", "a\\b"])
    def test_invalid_names_rejected(self, name):
        with pytest.raises(ValidationError):
            CreateParams(name=name)

    def test_frozen(self):
        params = CreateParams(name="demo")
        with pytest.raises(ValidationError):
            params.name = "other"


class TestAccount:
    def test_as_hardhat_account(self):
        account = Account(private_key=VALID_KEY, balance="1000")
        assert account.as_hardhat_account() == {"privateKey": VALID_KEY, "balance": "1000"}

    @pytest.mark.parametrize(
        "key",
        ["ab" * 32, "0x" + "ab" * 31, "0x" + "AB" * 32, "0x" + "zz" * 32],
    )
    def test_invalid_keys_rejected(self, key):
        with pytest.raises(ValidationError):
            Account(private_key=key, balance="1")

    def test_balance_must_be_decimal(self):
        with pytest.raises(ValidationError):
            Account(private_key=VALID_KEY, balance="1e21")


class TestCreationResult:
    def test_message_must_not_be_empty(self, sample_context):
        with pytest.raises(ValidationError):
            CreationResult(context=sample_context, status=CreationStatus.SUCCESS, message="")

    def test_status_values(self):
        assert CreationStatus.SUCCESS.value == "success"
        assert CreationStatus.FAILURE.value == "failure"

    def test_project_file(self, sample_context):
        assert sample_context.project_file("android", "gradle.properties") == (
            Path("/work/demo/android/gradle.properties")
        )
