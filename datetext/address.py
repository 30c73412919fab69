"""A postal address with a printable details card."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Address"]


@dataclass
class Address:
    """Two address lines, a PO box and a zip code."""

    address_line1: str
    address_line2: str
    po_box: str
    zip_code: str

    def card(self) -> str:
        """Return the address details as a text card."""
        return (
            "\nAddress Details:\n"
            "------------------------"
            f"\nAddressLine1 : {self.address_line1}\n"
            f"AddressLine2 : {self.address_line2}\n"
            f"POBox        : {self.po_box}\n"
            f"ZipCode      : {self.zip_code}\n"
        )