# models.py
"""Patient and doctor records held by the hospital directory."""


class Patient:
    """A registered patient. The name is the patient's identity key."""

    def __init__(self, name, age, ailment):
        self.name = name
        self.age = int(age)
        self.ailment = ailment

    def __eq__(self, other):
        if not isinstance(other, Patient):
            return NotImplemented
        return (self.name, self.age, self.ailment) == (other.name, other.age, other.ailment)

    def __repr__(self):
        return f"Patient({self.name!r}, {self.age}, {self.ailment!r})"


class Doctor:
    """A doctor and their appointment schedule.

    The schedule maps patient name to appointment time and keeps the order
    in which appointments were booked. Booking the same patient again
    replaces the time but keeps the entry where it was.
    """

    def __init__(self, name, specialization):
        self.name = name
        self.specialization = specialization
        self.schedule = {}

    def add_schedule(self, patient_name, time):
        self.schedule[patient_name] = time

    def appointments(self):
        """Return the schedule as a list of (patient name, time) pairs."""
        return list(self.schedule.items())

    def __eq__(self, other):
        if not isinstance(other, Doctor):
            return NotImplemented
        return (
            self.name == other.name
            and self.specialization == other.specialization
            and self.appointments() == other.appointments()
        )

    def __repr__(self):
        return f"Doctor({self.name!r}, {self.specialization!r}, {len(self.schedule)} appointments)"
