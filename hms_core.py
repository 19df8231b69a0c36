# hms_core.py
import logging
import threading
from contextlib import contextmanager

import matplotlib.pyplot as plt

from data_manager import DATA_FILE, data_exists, load_data, save_data
from directory import HospitalDirectory
from models import Doctor, Patient
from reports import doctor_workload

logger = logging.getLogger(__name__)


class HospitalManagementSystem:
    """Session state for one front end: the current directory and its data file.

    The session lock is held while the directory is swapped by reload and
    while any operation uses the current directory, so nothing lands in a
    directory that a reload is discarding.
    """

    def __init__(self, data_file=None, directory=None):
        self.data_file = data_file or DATA_FILE
        self.directory = directory if directory is not None else HospitalDirectory()
        self._lock = threading.RLock()

    @contextmanager
    def locked(self):
        """Hold the session and the current directory, yielding the directory."""
        with self._lock, self.directory.locked() as directory:
            yield directory

    # ------------------------------------------------------
    # STORAGE
    # ------------------------------------------------------
    def has_saved_data(self):
        return data_exists(self.data_file)

    def reload(self):
        """Replace the directory with the one stored in the data file.

        If the file cannot be read the session continues with an empty
        directory.
        """
        with self._lock:
            self.directory, outcome = load_data(self.data_file)
        return outcome

    def save(self):
        with self._lock:
            return save_data(self.directory, self.data_file)

    # ------------------------------------------------------
    # RECORDS
    # ------------------------------------------------------
    def register_patient(self, name, age, ailment):
        with self._lock:
            return self.directory.register_patient(Patient(name, age, ailment))

    def add_doctor(self, name, specialization):
        with self._lock:
            return self.directory.add_doctor(Doctor(name, specialization))

    def book_appointment(self, patient_name, doctor_name, time):
        with self._lock:
            return self.directory.book_appointment(patient_name, doctor_name, time)

    def generate_report(self):
        with self._lock:
            return self.directory.generate_report()

    # ------------------------------------------------------
    # ANALYTICS
    # ------------------------------------------------------
    def plot_doctor_workload(self, output_path=None):
        """
        Plot a bar chart of booked appointments per doctor.
        Shows the window, or writes the image to output_path when given.
        """
        with self._lock:
            workload = doctor_workload(self.directory)
        if not any(workload.values()):
            return "No appointment data available to plot."

        doctors = list(workload.keys())
        counts = [workload[d] for d in doctors]

        try:
            plt.style.use('ggplot')
            fig, ax = plt.subplots(figsize=(10, 6))
            ax.bar(doctors, counts, width=0.8)
            plt.xticks(rotation=45, ha='right')
            plt.title('Appointments Per Doctor')
            plt.xlabel('Doctor')
            plt.ylabel('Number of Appointments')
            plt.tight_layout()
            if output_path:
                fig.savefig(output_path)
                plt.close(fig)
                return f"Graph saved to {output_path}."
            plt.show()
            return "Graph displayed successfully."
        except Exception as e:
            logger.exception("Workload graph failed")
            return f"Error generating graph: {e}"
