import logging
import os
import threading

from directory import HospitalDirectory, Outcome, OutcomeStatus
from models import Doctor, Patient

logger = logging.getLogger(__name__)

# --- Constants and Data File ---
DATA_FILE = os.environ.get('HMS_DATA_FILE', 'hospitalData.csv')

PATIENTS_HEADER = 'PATIENTS'
DOCTORS_HEADER = 'DOCTORS'

# Only one save or load touches the data file at a time.
_file_lock = threading.Lock()


# ------------------------------------------------------
# ENCODING
# ------------------------------------------------------
def dump_directory(directory):
    """
    Serialize the directory to the sectioned text format.

    Fields are joined with ',' and schedule entries with ';' and ':'.
    Nothing is escaped, so names containing those characters do not
    survive a reload.
    """
    lines = [PATIENTS_HEADER]
    with directory.locked():
        for patient in directory.patients.values():
            lines.append(f"{patient.name},{patient.age},{patient.ailment}")

        lines.append(DOCTORS_HEADER)
        for doctor in directory.doctors.values():
            entries = ';'.join(f"{patient_name}:{time}" for patient_name, time in doctor.schedule.items())
            lines.append(f"{doctor.name},{doctor.specialization},{entries}")
    return '\n'.join(lines) + '\n'


def parse_directory(text):
    """
    Build a fresh directory from text produced by dump_directory.

    Records go through the normal registration calls, so duplicates are
    dropped the same way as on manual entry. Lines that do not fit the
    active section are skipped.
    """
    directory = HospitalDirectory()
    section = None

    for line_no, line in enumerate(text.splitlines(), start=1):
        if line in (PATIENTS_HEADER, DOCTORS_HEADER):
            section = line
            continue
        if not line:
            continue

        data = line.split(',')
        if section == PATIENTS_HEADER and len(data) >= 3:
            _load_patient(directory, data, line_no)
        elif section == DOCTORS_HEADER and len(data) >= 2:
            _load_doctor(directory, data)
        else:
            logger.debug("Skipping line %d: %r", line_no, line)

    return directory


def _load_patient(directory, data, line_no):
    try:
        age = int(data[1])
    except ValueError:
        logger.warning("Skipping patient on line %d: invalid age %r", line_no, data[1])
        return
    directory.register_patient(Patient(data[0], age, data[2]))


def _load_doctor(directory, data):
    doctor = Doctor(data[0], data[1])
    if len(data) > 2:
        for entry in data[2].split(';'):
            # Split at the first ':' only, times like "10:30 AM" carry their own.
            # An empty time ("Alice:") is kept as an empty string.
            patient_name, sep, time = entry.partition(':')
            if sep and patient_name:
                doctor.add_schedule(patient_name, time)
            elif entry:
                logger.debug("Skipping malformed schedule entry %r for %s", entry, doctor.name)
    directory.add_doctor(doctor)


# ------------------------------------------------------
# FILE STORAGE
# ------------------------------------------------------
def data_exists(filename=DATA_FILE):
    return os.path.exists(filename)


def save_data(directory, filename=DATA_FILE):
    """Overwrite the data file with the directory's current state."""
    with _file_lock:
        text = dump_directory(directory)
        try:
            with open(filename, 'w', encoding='utf-8', newline='\n') as f:
                f.write(text)
        except OSError as e:
            logger.error("Saving %s failed: %s", filename, e)
            return Outcome(OutcomeStatus.IO_ERROR, f"Error saving data: {e}")

    logger.info("Saved %d patients and %d doctors to %s",
                len(directory.patients), len(directory.doctors), filename)
    return Outcome(OutcomeStatus.SUCCESS, f"Data saved successfully to {filename}")


def load_data(filename=DATA_FILE):
    """
    Load a directory from the data file.

    Returns (directory, outcome). When the file cannot be read the
    directory is empty and the outcome carries the error.
    """
    with _file_lock:
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Loading %s failed: %s", filename, e)
            return HospitalDirectory(), Outcome(OutcomeStatus.IO_ERROR, f"Error loading data: {e}")

    directory = parse_directory(text)
    logger.info("Loaded %d patients and %d doctors from %s",
                len(directory.patients), len(directory.doctors), filename)
    return directory, Outcome(OutcomeStatus.SUCCESS, f"Data loaded successfully from {filename}")
