import pytest

from gym_backend.errors import ValidationError
from gym_backend.validation.contact import ContactInfo, FieldErrors, ensure_valid_contact, validate_contact


def test_revalidate_keeps_error_until_value_is_valid():
    errors = FieldErrors()
    errors.validate("email", "user@example.com")
    first = errors.get("email")
    assert first

    # Autre valeur invalide: l'erreur affichée reste celle de la soumission
    errors.revalidate("email", "broken")
    assert errors.get("email") == first

    errors.revalidate("email", "user@gmail.com")
    assert errors.get("email") is None
    assert not errors


def test_revalidate_cleans_phone_before_checking():
    errors = FieldErrors()
    errors.validate("phone", "123")
    errors.revalidate("phone", "+355 (69) 123-4567")
    assert errors.get("phone") is None


def test_validate_contact_reports_every_field():
    errors = validate_contact(ContactInfo(name="", email="x@yahoo.com", phone="+355 51 123 4567"))
    assert set(errors.as_dict()) == {"name", "email", "phone"}


def test_phone_optional_when_not_required():
    errors = validate_contact(ContactInfo(name="Arben", email="arben@gmail.com"), require_phone=False)
    assert not errors


def test_ensure_valid_contact_raises_with_fields_and_cleans():
    with pytest.raises(ValidationError) as exc:
        ensure_valid_contact(ContactInfo(name="Arben", email="bad", phone=None))
    assert set(exc.value.fields) == {"email", "phone"}
    assert exc.value.to_toast()["fields"]["email"]

    contact = ensure_valid_contact(ContactInfo.model_validate({
        "customerName": " Arben ",
        "customerEmail": "arben@gmail.com",
        "customerPhone": "+355 69 123 4567",
    }))
    assert contact.name == "Arben"
    assert contact.phone == "+355691234567"
