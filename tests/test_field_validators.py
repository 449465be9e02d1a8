import pytest

from models import FieldValidators


def test_required():
    assert FieldValidators.required("Acme").is_valid
    assert not FieldValidators.required("   ").is_valid
    assert not FieldValidators.required(None).is_valid


@pytest.mark.parametrize("value, is_valid", [("a@b.co", True), ("a@b", False), ("a b@c.io", False), ("", True)])
def test_email(value, is_valid):
    assert FieldValidators.email(value).is_valid is is_valid


def test_url_is_normalized():
    check = FieldValidators.url("acme.example/menu")

    assert check.is_valid
    assert check.normalized_value == "https://acme.example/menu"


@pytest.mark.parametrize("value", ["not a url", "https://", "localhost"])
def test_url_rejects_garbage(value):
    check = FieldValidators.url(value)

    assert not check.is_valid
    assert check.message == "Please enter a valid URL"


@pytest.mark.parametrize(
    "value, formatted",
    [
        ("555.123.4567", "(555) 123-4567"),
        ("+44 20 7946 0958", "+442079460958"),
        ("123-4567", "123-4567"),
    ],
)
def test_phone_formatting(value, formatted):
    check = FieldValidators.phone(value)

    assert check.is_valid
    assert check.normalized_value == formatted


@pytest.mark.parametrize("value", ["12345", "1234567890123456"])
def test_phone_digit_count(value):
    assert not FieldValidators.phone(value).is_valid


def test_coordinates():
    assert FieldValidators.latitude("34.05221234").normalized_value == 34.052212
    assert FieldValidators.latitude("91").message == "Latitude must be between -90 and 90"
    assert FieldValidators.longitude("east").message == "Longitude must be a number"
    assert FieldValidators.longitude("").is_valid


@pytest.mark.parametrize(
    "value, country, is_valid",
    [
        ("90210", "US", True),
        ("90210-1234", "US", True),
        ("9021", "US", False),
        ("K1A 0B1", "CA", True),
        ("SW1A 1AA", "UK", True),
        ("90210", "ZZ", True),
    ],
)
def test_postal_code(value, country, is_valid):
    assert FieldValidators.postal_code(value, country).is_valid is is_valid


def test_time_and_range():
    assert FieldValidators.time("9:30").is_valid
    assert not FieldValidators.time("24:00").is_valid
    assert FieldValidators.time_range("9:30", "17:00").is_valid
    assert not FieldValidators.time_range("17:00", "09:00").is_valid


def test_max_length():
    check = FieldValidators.max_length("x" * 501, 500)

    assert not check.is_valid
    assert check.message == "Maximum 500 characters allowed"


def test_sanitize_html_text():
    assert FieldValidators.sanitize_html_text(' <b>"Acme"</b> ') == (
        "&lt;b&gt;&quot;Acme&quot;&lt;&#x2F;b&gt;"
    )


def test_validate_profile_reports_fields(sample_field_map):
    assert FieldValidators.validate_profile(sample_field_map).is_valid

    broken = dict(
        sample_field_map,
        email="nope",
        latitude="100",
        openingHours={"monday": {"open": "18:00", "close": "09:00"}},
    )
    errors = FieldValidators.validate_profile(broken).errors

    assert "email: Please enter a valid email address" in errors
    assert "latitude: Latitude must be between -90 and 90" in errors
    assert "monday: Opening time must be before closing time" in errors


def test_validate_profile_rejects_non_mapping():
    assert not FieldValidators.validate_profile(["x"]).is_valid


@pytest.mark.parametrize("flag, checked", [("false", True), ("0", True), (False, True), ("true", False), (True, False)])
def test_validate_profile_open_24_hours_flag(sample_field_map, flag, checked):
    broken = dict(
        sample_field_map,
        open24Hours=flag,
        openingHours={"monday": {"open": "18:00", "close": "09:00"}},
    )
    errors = FieldValidators.validate_profile(broken).errors

    assert ("monday: Opening time must be before closing time" in errors) is checked
