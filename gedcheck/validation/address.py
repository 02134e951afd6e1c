"""Validator for postal addresses."""

from .base import AbstractValidator


class AddressValidator(AbstractValidator):
    """Checks the lines and optional parts of an address."""

    def __init__(self, root, address):
        super().__init__(root)
        self.address = address

    def validate(self) -> None:
        address = self.address
        if address is None:
            self.add_error("Address is null and cannot be validated")
            return
        self.check_string_list(address, 'lines', "address lines", blanks_allowed=True)
        self.check_optional_string(address.addr1, "line 1", address)
        self.check_optional_string(address.addr2, "line 2", address)
        self.check_optional_string(address.city, "city", address)
        self.check_optional_string(address.state_province, "state/province", address)
        self.check_optional_string(address.postal_code, "postal code", address)
        self.check_optional_string(address.country, "country", address)
        self.check_custom_tags(address)
