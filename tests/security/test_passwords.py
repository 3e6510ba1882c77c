from __future__ import annotations

import pytest

from pwpolicy.security.passwords import DefaultPasswordCheck, collect_violations
from pwpolicy.security.policy import PolicyConfiguration


@pytest.mark.parametrize(
    "pw,code",
    [
        ("Short7!", "min_length"),
        ("alllowercase!!!", "missing_upper"),
        ("NOUPPER123!!!", "missing_lower"),
        ("NoDigits!!!!", "missing_digit"),
        ("NoSymbols123", "missing_symbol"),
        ("passwordPASSWORD123!", "common_password"),
    ],
)
def test_password_invalid_cases(pw: str, code: str):
    policy = PolicyConfiguration(min_length=12)
    codes = [v.code for v in collect_violations(pw, policy)]
    assert code in codes


def test_password_valid():
    pw = "ValidPass123!"  # length 13
    policy = PolicyConfiguration(min_length=12)
    assert collect_violations(pw, policy) == []


def test_every_rule_reported_in_order():
    policy = PolicyConfiguration(min_length=12, required_unique_chars=4)
    codes = [v.code for v in collect_violations("aaa", policy)]
    assert codes == [
        "min_length",
        "missing_digit",
        "missing_upper",
        "missing_symbol",
        "unique_chars",
    ]


def test_empty_password_fails_length_rule():
    codes = [v.code for v in collect_violations("", PolicyConfiguration(min_length=1))]
    assert codes[0] == "min_length"


def test_max_length_enforced():
    policy = PolicyConfiguration(min_length=4, max_length=8)
    codes = [v.code for v in collect_violations("Abcdef12!xyz", policy)]
    assert codes == ["max_length"]


def test_space_counts_as_symbol():
    policy = PolicyConfiguration(min_length=4)
    assert collect_violations("Ab1 cdef", policy) == []


def test_disabled_rules_are_skipped():
    policy = PolicyConfiguration(
        min_length=1,
        require_digit=False,
        require_lowercase=False,
        require_uppercase=False,
        require_symbol=False,
        forbid_common=False,
    )
    assert collect_violations("password", policy) == []


def test_descriptions_name_the_threshold():
    policy = PolicyConfiguration(min_length=25, max_length=255)
    (first, *_) = collect_violations("Ab1!", policy)
    assert "25" in first.description


@pytest.mark.asyncio
async def test_default_check_ignores_manager_and_user():
    check = DefaultPasswordCheck(PolicyConfiguration(min_length=12))
    outcome = await check.validate(None, None, "ValidPass123!")
    assert outcome.succeeded


@pytest.mark.asyncio
async def test_default_check_returns_failure_outcome():
    check = DefaultPasswordCheck(PolicyConfiguration(min_length=12))
    outcome = await check.validate(object(), None, "password")
    assert not outcome.succeeded
    assert "common_password" in outcome.codes
