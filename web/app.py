"""Flask web application serving vehicle document and service status as JSON."""

import os
from datetime import date
from pathlib import Path

import yaml
from flask import Flask, abort, jsonify, request

# Add parent directory to path for package imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from vehicle_status.classifiers import renewal_status
from vehicle_status.dates import to_iso_date
from vehicle_status.loader import load_vehicle
from vehicle_status.relative import relative_label
from vehicle_status.status import Status

app = Flask(__name__)
app.secret_key = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-prod")

# Path to vehicles directory (relative to project root unless overridden)
app.config["VEHICLES_DIR"] = Path(
    os.environ.get("VEHICLES_DIR", Path(__file__).parent.parent / "vehicles")
)


def get_vehicle_files():
    """Get all vehicle YAML files."""
    return sorted(Path(app.config["VEHICLES_DIR"]).glob("*.yaml"))


def get_vehicle_path(vehicle_id: str) -> Path:
    """Get full path for a vehicle ID."""
    return Path(app.config["VEHICLES_DIR"]) / f"{vehicle_id}.yaml"


def parse_today(value):
    """Parse the ?today= override, defaulting to the current date."""
    if not value:
        return date.today()
    iso = to_iso_date(value)
    if not iso:
        abort(400, description=f"Invalid date: {value}")
    return date.fromisoformat(iso)


@app.errorhandler(400)
@app.errorhandler(404)
@app.errorhandler(422)
def json_error(error):
    return jsonify({"error": error.description}), error.code


@app.route("/")
def index():
    """Summary of every vehicle's renewals and next service."""
    today = parse_today(request.args.get("today"))
    vehicles = []
    for path in get_vehicle_files():
        try:
            vehicle = load_vehicle(path)
        except (ValueError, yaml.YAMLError) as e:
            app.logger.warning("Skipping unreadable vehicle file %s: %s", path.name, e)
            vehicles.append({"id": path.stem, "error": str(e)})
            continue
        reports = vehicle.document_reports(today)
        vehicles.append({
            "id": path.stem,
            "name": vehicle.car.name,
            "expired": sum(1 for r in reports if r.renewal.status == Status.EXPIRED),
            "expiring": sum(1 for r in reports if r.renewal.status == Status.EXPIRING),
            "valid": sum(1 for r in reports if r.renewal.status == Status.VALID),
            "nextService": vehicle.next_service(today).to_dict(),
        })
    return jsonify({"asOf": today.isoformat(), "vehicles": vehicles})


@app.route("/vehicle/<vehicle_id>")
def vehicle_detail(vehicle_id: str):
    """Full status report for one vehicle."""
    path = get_vehicle_path(vehicle_id)
    if not path.exists():
        app.logger.info("Unknown vehicle requested: %s", vehicle_id)
        abort(404, description=f"Vehicle '{vehicle_id}' not found")

    today = parse_today(request.args.get("today"))
    try:
        vehicle = load_vehicle(path)
    except (ValueError, yaml.YAMLError) as e:
        app.logger.warning("Unreadable vehicle file %s: %s", path.name, e)
        abort(422, description=f"Vehicle '{vehicle_id}' could not be loaded: {e}")
    upcoming = vehicle.next_service(today)

    return jsonify({
        "id": vehicle_id,
        "name": vehicle.car.name,
        "asOf": today.isoformat(),
        "documents": [
            {
                "kind": r.document.kind,
                "issueDate": r.document.issue_date,
                "expiryDate": r.document.expiry_date,
                "issued": r.issued.to_dict(),
                "renewal": r.renewal.to_dict(),
            }
            for r in vehicle.document_reports(today)
        ],
        "service": {
            "lastServiceDate": vehicle.last_service_date,
            "intervalMonths": vehicle.service_interval_months,
            "last": vehicle.service_status(today).to_dict(),
            "next": upcoming.to_dict(),
            "color": upcoming.color.value,
        },
    })


@app.route("/label")
def label():
    """Relative label and renewal status for an arbitrary date."""
    value = request.args.get("date")
    if not value:
        abort(400, description="Missing 'date' parameter")
    target = to_iso_date(value)
    if not target:
        abort(400, description=f"Invalid date: {value}")

    today = parse_today(request.args.get("today"))
    return jsonify({
        "date": target,
        "label": relative_label(target, today),
        "renewal": renewal_status(target, today).to_dict(),
    })


if __name__ == "__main__":
    # Run with debug mode for development
    app.run(debug=True, host="0.0.0.0", port=int(os.environ.get("PORT", 5001)))
