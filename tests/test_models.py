"""Tests for models module."""

from models import Doctor, Patient


def test_patient_fields():
    patient = Patient("Alice", "30", "Flu")
    assert patient.name == "Alice"
    assert patient.age == 30
    assert patient.ailment == "Flu"


def test_doctor_starts_with_empty_schedule():
    doctor = Doctor("Smith", "Cardiology")
    assert doctor.schedule == {}
    assert doctor.appointments() == []


def test_add_schedule_replaces_time_in_place():
    doctor = Doctor("Smith", "Cardiology")
    doctor.add_schedule("Alice", "9:00 AM")
    doctor.add_schedule("Bob", "10:00 AM")
    doctor.add_schedule("Alice", "11:00 AM")

    assert doctor.appointments() == [("Alice", "11:00 AM"), ("Bob", "10:00 AM")]


def test_doctor_equality_includes_schedule_order():
    first = Doctor("Smith", "Cardiology")
    first.add_schedule("Alice", "9:00 AM")
    first.add_schedule("Bob", "10:00 AM")

    second = Doctor("Smith", "Cardiology")
    second.add_schedule("Bob", "10:00 AM")
    second.add_schedule("Alice", "9:00 AM")

    assert first != second
