"""People, employees and developers with printable info cards."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

__all__ = ["Person", "Employee", "Developer", "main"]

_RULE = "___________________"


@dataclass
class Person:
    """A person with contact details; ``id`` cannot change once set."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("id is read-only")
        super().__setattr__(name, value)

    def full_name(self) -> str:
        """Return the first and last name separated by a space."""
        return f"{self.first_name} {self.last_name}"

    def card(self) -> str:
        """Return the person's details as a text card."""
        return (
            "\nInfo:"
            f"\n{_RULE}"
            f"\nID       : {self.id}"
            f"\nFirstName: {self.first_name}"
            f"\nLastName : {self.last_name}"
            f"\nFull Name: {self.full_name()}"
            f"\nEmail    : {self.email}"
            f"\nPhone    : {self.phone}"
            f"\n{_RULE}\n"
        )

    def send_email(self, subject: str, body: str) -> str:
        """Return the delivery notice for an e-mail sent to this person."""
        return (
            f"\nThe following message sent successfully to email: {self.email}"
            f"\nSubject: {subject}"
            f"\nBody: {body}\n"
        )

    def send_sms(self, text: str) -> str:
        """Return the delivery notice for an SMS sent to this person."""
        return (
            f"\nThe following SMS sent successfully to phone: {self.phone}"
            f"\n{text}\n"
        )


def _number(value: float) -> str:
    return f"{value:g}"


@dataclass
class Employee(Person):
    """A person with a job title, department and salary."""

    title: str
    department: str
    salary: float

    def _employee_lines(self) -> str:
        return (
            "\nInfo:"
            f"\n{_RULE}"
            f"\nID        : {self.id}"
            f"\nFirstName : {self.first_name}"
            f"\nLastName  : {self.last_name}"
            f"\nFull Name : {self.full_name()}"
            f"\nEmail     : {self.email}"
            f"\nPhone     : {self.phone}"
            f"\nTitle     : {self.title}"
            f"\nDepartment: {self.department}"
            f"\nSalary    : {_number(self.salary)}"
        )

    def card(self) -> str:
        """Return the employee's details as a text card."""
        return f"{self._employee_lines()}\n{_RULE}\n"


@dataclass
class Developer(Employee):
    """An employee who works mainly in one programming language."""

    main_programming_language: str

    def card(self) -> str:
        """Return the developer's details as a text card."""
        return (
            f"{self._employee_lines()}"
            f"\nPLanguage : {self.main_programming_language}"
            f"\n{_RULE}\n"
        )


def main(argv: list[str] | None = None) -> int:
    """Print a sample developer's card and an SMS notice."""
    parser = argparse.ArgumentParser(description="Show a sample developer card.")
    parser.parse_args(argv)
    developer = Developer(
        10,
        "Sam",
        "Rivers",
        "developer@example.com",
        "555-0100",
        "Web Developer",
        "Programming",
        5000,
        "C++",
    )
    print(developer.card(), end="")
    print(developer.send_sms("Hi mr Developer :-)"), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())