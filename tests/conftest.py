"""Shared test fixtures for hospital management tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from directory import HospitalDirectory
from hms_core import HospitalManagementSystem
from models import Doctor, Patient


@pytest.fixture
def directory() -> HospitalDirectory:
    """Empty directory."""
    return HospitalDirectory()


@pytest.fixture
def sample_directory() -> HospitalDirectory:
    """Two patients and one doctor with both of them booked."""
    d = HospitalDirectory()
    d.register_patient(Patient("Alice", 30, "Flu"))
    d.register_patient(Patient("Bob", 45, "Cold"))
    d.add_doctor(Doctor("Smith", "Cardiology"))
    d.book_appointment("Alice", "Smith", "10:30 AM")
    d.book_appointment("Bob", "Smith", "2:00 PM")
    return d


@pytest.fixture
def data_file(tmp_path):
    """Path to a not-yet-existing data file."""
    return tmp_path / "hospitalData.csv"


@pytest.fixture
def hms(data_file) -> HospitalManagementSystem:
    """Session bound to a temporary data file."""
    return HospitalManagementSystem(data_file=str(data_file))
