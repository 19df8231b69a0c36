import logging

# Import the backend core logic
from hms_core import HospitalManagementSystem

# --- CLI Menu Handlers (Frontend) ---

def get_integer_input(prompt):
    """Prompt until the user enters a valid integer."""
    while True:
        value = input(prompt).strip()
        try:
            return int(value)
        except ValueError:
            print("Invalid input. Please enter a valid integer.")


def add_doctor(hms):
    name = input("Enter doctor's name: ").strip()
    specialization = input("Enter doctor's specialization: ").strip()
    print(hms.add_doctor(name, specialization))


def register_patient(hms):
    name = input("Enter patient's name: ").strip()
    age = get_integer_input("Enter patient's age: ")
    ailment = input("Enter patient's ailment: ").strip()
    print(hms.register_patient(name, age, ailment))


def book_appointment(hms):
    patient_name = input("Enter patient's name: ").strip()
    doctor_name = input("Enter doctor's name: ").strip()
    time = input("Enter appointment time (e.g., 10:30 AM): ").strip()
    print(hms.book_appointment(patient_name, doctor_name, time))


def load_saved_data(hms):
    print(hms.reload())


def print_menu():
    print("\n=== Hospital Management System Menu ===")
    print("1. Add Doctor")
    print("2. Register Patient")
    print("3. Book Appointment")
    print("4. Generate Report")
    print("5. Save Data")
    print("6. Load Data")
    print("7. Show Doctor Workload Graph")
    print("8. Exit")


# --- Main Application Loop ---

def run(hms):
    """Runs the menu loop until the user exits. Saves on exit."""
    if hms.has_saved_data():
        load_saved_data(hms)
    else:
        print("No existing data found. Starting with an empty database.")

    while True:
        print_menu()
        choice = get_integer_input("Enter your choice: ")

        if choice == 1:
            add_doctor(hms)
        elif choice == 2:
            register_patient(hms)
        elif choice == 3:
            book_appointment(hms)
        elif choice == 4:
            print(hms.generate_report())
        elif choice == 5:
            print(hms.save())
        elif choice == 6:
            load_saved_data(hms)
        elif choice == 7:
            print(hms.plot_doctor_workload())
        elif choice == 8:
            print(hms.save())
            print("Thank you for using the Hospital Management System. Goodbye!")
            break
        else:
            print("Invalid choice. Please try again.")


def main():
    logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
    run(HospitalManagementSystem())


if __name__ == '__main__':
    main()
