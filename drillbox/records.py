"""Student mark sheets and phone-book contacts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """A student's roll number and three marks."""

    name: str
    roll_no: int
    mark1: int
    mark2: int
    mark3: int

    @property
    def total(self) -> int:
        """Sum of the three marks."""
        return self.mark1 + self.mark2 + self.mark3


@dataclass(frozen=True)
class Contact:
    """A name with its phone number."""

    name: str
    number: int


def format_student(student: Student) -> str:
    """Render a student's details, one field per line, followed by a blank line."""
    return (
        f"name:{student.name}\n"
        f"roll no:{student.roll_no}\n"
        f"mark1:{student.mark1}\n"
        f"mark2:{student.mark2}\n"
        f"mark3:{student.mark3}\n"
        f"total:{student.total}\n\n"
    )


def format_contact(contact: Contact) -> str:
    """Render a contact's name and number on two lines."""
    return f"name:{contact.name}\nno:{contact.number}\n"