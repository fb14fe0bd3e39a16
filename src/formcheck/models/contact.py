"""Contact form input model and the data sets the suite submits."""

from __future__ import annotations

from pydantic import BaseModel


class ContactFormData(BaseModel):
    """The five fields of the 'Send Us a Message' form."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str
    email: str
    phone: str
    subject: str
    message: str


VALID_CONTACT_DATA: list[ContactFormData] = [
    ContactFormData(
        name="John Doe",
        email="johndoe@example.com",
        phone="12345678970",
        subject="General Inquiry",
        message="This is a test message for the contact form. Please ignore.",
    ),
    ContactFormData(
        name="Jane Smith",
        email="janesmith@example.com",
        phone="98765432710",
        subject="Booking Question",
        message="I would like to know more about your booking process. This is a test message.",
    ),
]

# Negative-testing data
INVALID_CONTACT_DATA: list[ContactFormData] = [
    ContactFormData(
        name="",
        email="invalid-email",
        phone="12345",
        subject="",
        message="This is a test with invalid data.",
    ),
]

_DATA_SETS: dict[str, list[ContactFormData]] = {
    "valid": VALID_CONTACT_DATA,
    "invalid": INVALID_CONTACT_DATA,
}


def get_contact_data(reference: str) -> ContactFormData:
    """Resolve a 'set:index' reference such as 'valid:0' to a data entry.

    A bare set name resolves to its first entry.

    Raises:
        ValueError: If the set is unknown or the index is out of range.
    """
    set_name, _, index_str = reference.partition(":")
    if set_name not in _DATA_SETS:
        available = ", ".join(sorted(_DATA_SETS))
        raise ValueError(f"Unknown data set '{set_name}'. Available: {available}.")

    entries = _DATA_SETS[set_name]
    try:
        index = int(index_str) if index_str else 0
    except ValueError:
        raise ValueError(f"Invalid index '{index_str}' in data reference '{reference}'.") from None

    if not 0 <= index < len(entries):
        raise ValueError(
            f"Index {index} out of range for data set '{set_name}' "
            f"({len(entries)} entries)."
        )
    return entries[index]
