import logging
import os

from flask import Flask, Response, flash, jsonify, redirect, render_template, request, url_for
from jinja2 import FileSystemLoader

from hms_core import HospitalManagementSystem
from reports import doctor_workload

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def create_app(hms=None):
    """Build the web front end around a session (a fresh one by default)."""
    # --- Flask config ---
    app = Flask(__name__, template_folder=BASE_DIR)
    app.jinja_loader = FileSystemLoader(BASE_DIR)
    app.secret_key = os.environ.get('SECRET_KEY', 'secret-key-change-this')

    if hms is None:
        hms = HospitalManagementSystem()
        if hms.has_saved_data():
            logger.info(hms.reload().message)
    app.config['HMS'] = hms

    def flash_outcome(outcome):
        flash(outcome.message, "success" if outcome.ok else "danger")

    # ---------------- Routes ----------------

    @app.route('/')
    def home():
        return redirect(url_for('dashboard'))

    @app.route('/dashboard')
    def dashboard():
        with hms.locked() as directory:
            patients = list(directory.patients.values())
            doctors = [
                {'name': d.name, 'specialization': d.specialization, 'schedule': dict(d.schedule)}
                for d in directory.doctors.values()
            ]
        return render_template(
            'dashboard.html',
            patients=patients,
            doctors=doctors,
            data_file=hms.data_file,
        )

    # ---------------- Records ----------------
    @app.route('/patients', methods=['POST'])
    def register_patient():
        name = request.form['name'].strip()
        ailment = request.form['ailment'].strip()
        try:
            age = int(request.form['age'].strip())
        except ValueError:
            flash("Invalid age. Please enter a valid integer.", "danger")
            return redirect(url_for('dashboard'))

        flash_outcome(hms.register_patient(name, age, ailment))
        return redirect(url_for('dashboard'))

    @app.route('/doctors', methods=['POST'])
    def add_doctor():
        name = request.form['name'].strip()
        specialization = request.form['specialization'].strip()
        flash_outcome(hms.add_doctor(name, specialization))
        return redirect(url_for('dashboard'))

    @app.route('/appointments', methods=['POST'])
    def book_appointment():
        patient_name = request.form['patient_name'].strip()
        doctor_name = request.form['doctor_name'].strip()
        time = request.form['time'].strip()
        flash_outcome(hms.book_appointment(patient_name, doctor_name, time))
        return redirect(url_for('dashboard'))

    @app.route('/report')
    def report():
        return Response(hms.generate_report(), mimetype='text/plain')

    # ---------------- Storage ----------------
    @app.route('/save', methods=['POST'])
    def save():
        flash_outcome(hms.save())
        return redirect(url_for('dashboard'))

    @app.route('/load', methods=['POST'])
    def load():
        flash_outcome(hms.reload())
        return redirect(url_for('dashboard'))

    @app.route('/api/workload')
    def api_workload():
        with hms.locked() as directory:
            workload = doctor_workload(directory)
        doctors = list(workload.keys())
        return jsonify({'doctors': doctors, 'counts': [workload[d] for d in doctors]})

    return app


# ---------------- Run server ----------------
def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
    host = os.environ.get('HOST', '0.0.0.0')
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('FLASK_DEBUG', '0') == '1'
    create_app().run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    main()
