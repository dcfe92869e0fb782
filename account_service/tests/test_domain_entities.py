from datetime import UTC, datetime

import pytest

from account_service.domain.users.entities import Currency, Gender, Preferences, User


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("MALE", Gender.MALE),
        ("FEMALE", Gender.FEMALE),
        ("OTHER", Gender.OTHER),
        ("male", Gender.OTHER),
        ("", Gender.OTHER),
        (None, Gender.OTHER),
        (3, Gender.OTHER),
    ],
)
def test_gender_parse_falls_back_to_other(raw: object, expected: Gender) -> None:
    assert Gender.parse(raw) is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("COP", Currency.COP),
        ("USD", Currency.USD),
        ("EUR", Currency.EUR),
        ("GBP", Currency.USD),
        ("eur", Currency.USD),
        (None, Currency.USD),
    ],
)
def test_currency_parse_falls_back_to_usd(raw: object, expected: Currency) -> None:
    assert Currency.parse(raw) is expected


def test_preferences_defaults() -> None:
    assert Preferences().to_dict() == {"dark_mode": False, "language": "en", "notifications": True}
    assert Preferences.from_dict(None) == Preferences()
    assert Preferences.from_dict({"dark_mode": True}).dark_mode is True


def test_user_summary_excludes_secrets() -> None:
    user = User(
        id=3,
        username="carol",
        email="carol@example.com",
        password_hash="scrypt:32768:8:1$salt$digest",
        currency=Currency.COP,
        gender=Gender.OTHER,
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
        backup_code_hashes=("h1", "h2"),
    )

    payload = user.summary().to_dict()

    assert payload == {
        "id": 3,
        "username": "carol",
        "email": "carol@example.com",
        "currency": "COP",
        "gender": "OTHER",
        "preferences": {"dark_mode": False, "language": "en", "notifications": True},
        "created_at": "2024-05-01T12:00:00+00:00",
    }
