"""WSGI entry point: `flask --app app run`."""
from src.staff_attendance.staff_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=app.config.get("DEBUG", False))
