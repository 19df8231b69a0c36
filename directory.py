# directory.py
import enum
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass

from reports import format_report

logger = logging.getLogger(__name__)


class OutcomeStatus(enum.Enum):
    SUCCESS = "success"
    COLLISION = "collision"
    PATIENT_NOT_FOUND = "patient_not_found"
    DOCTOR_NOT_FOUND = "doctor_not_found"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class Outcome:
    """Result of a directory or storage operation, shown to the user as-is."""
    status: OutcomeStatus
    message: str

    @property
    def ok(self):
        return self.status is OutcomeStatus.SUCCESS

    def __str__(self):
        return self.message


class HospitalDirectory:
    """Registry of patients and doctors, keyed by name.

    Mutating operations hold one lock on the whole directory, so they can be
    called from several threads without interleaving.
    """

    def __init__(self):
        self.patients = {}
        self.doctors = {}
        self._lock = threading.RLock()

    @contextmanager
    def locked(self):
        with self._lock:
            yield self

    # ------------------------------------------------------
    # REGISTRATION
    # ------------------------------------------------------
    def register_patient(self, patient):
        with self._lock:
            if patient.name in self.patients:
                logger.info("Duplicate patient registration ignored: %s", patient.name)
                return Outcome(OutcomeStatus.COLLISION, f"Patient with name {patient.name} already exists.")
            self.patients[patient.name] = patient
        return Outcome(OutcomeStatus.SUCCESS, f"Patient {patient.name} registered successfully.")

    def add_doctor(self, doctor):
        with self._lock:
            if doctor.name in self.doctors:
                logger.info("Duplicate doctor ignored: %s", doctor.name)
                return Outcome(OutcomeStatus.COLLISION, f"Doctor with name {doctor.name} already exists.")
            self.doctors[doctor.name] = doctor
        return Outcome(OutcomeStatus.SUCCESS, f"Doctor {doctor.name} added to the system.")

    # ------------------------------------------------------
    # APPOINTMENTS
    # ------------------------------------------------------
    def book_appointment(self, patient_name, doctor_name, time):
        """Add patient_name -> time to the doctor's schedule.

        The patient is looked up before the doctor. Time is stored as given.
        """
        with self._lock:
            if patient_name not in self.patients:
                return Outcome(OutcomeStatus.PATIENT_NOT_FOUND, f"Patient with name {patient_name} not found.")
            doctor = self.doctors.get(doctor_name)
            if doctor is None:
                return Outcome(OutcomeStatus.DOCTOR_NOT_FOUND, f"Doctor with name {doctor_name} not found.")
            doctor.add_schedule(patient_name, time)
        return Outcome(
            OutcomeStatus.SUCCESS,
            f"Appointment booked successfully for {patient_name} with Dr. {doctor_name} at {time}",
        )

    # ------------------------------------------------------
    # QUERIES
    # ------------------------------------------------------
    def get_patient(self, name):
        return self.patients.get(name)

    def get_doctor(self, name):
        return self.doctors.get(name)

    def generate_report(self):
        return format_report(self)
