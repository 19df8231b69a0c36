# reports.py
"""Human-readable views of the hospital directory."""

SEPARATOR = "-----------------------"


def format_report(directory):
    """Render every patient, then every doctor with their schedule."""
    lines = ["=== Hospital Report ===", "", "List of Patients:"]
    with directory.locked():
        if not directory.patients:
            lines.append("No patients registered.")
        for patient in directory.patients.values():
            lines.append(f"Patient Name: {patient.name}")
            lines.append(f"Age: {patient.age}")
            lines.append(f"Ailment: {patient.ailment}")
            lines.append(SEPARATOR)

        lines += ["", "List of Doctors and their schedules:"]
        if not directory.doctors:
            lines.append("No doctors added.")
        for doctor in directory.doctors.values():
            lines.append(f"Doctor Name: {doctor.name}")
            lines.append(f"Specialization: {doctor.specialization}")
            if not doctor.schedule:
                lines.append("Schedule: No appointments.")
            else:
                lines.append("Schedule:")
                for patient_name, time in doctor.schedule.items():
                    lines.append(f"Patient: {patient_name}, Time: {time}")
            lines.append(SEPARATOR)

    return "\n".join(lines) + "\n"


def doctor_workload(directory):
    """Number of booked appointments per doctor, in directory order."""
    with directory.locked():
        return {name: len(doctor.schedule) for name, doctor in directory.doctors.items()}
