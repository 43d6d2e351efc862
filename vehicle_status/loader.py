"""YAML loading and saving utilities for vehicle records."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .car import Car
from .document import Document
from .vehicle import Vehicle

logger = logging.getLogger(__name__)


def _require(dct: Dict[str, Any], key: str, where: str) -> Any:
    if dct.get(key) is None:
        raise ValueError(f"{where}: missing required key '{key}'")
    return dct[key]


def _parse_object(dct: Dict[str, Any]) -> Union[Car, Document, Vehicle, dict]:
    """Parse dictionary into appropriate object type."""
    # Car object (inside 'car' key)
    if "make" in dct or "model" in dct:
        return Car(
            _require(dct, "make", "car"),
            _require(dct, "model", "car"),
            dct.get("year"),
            dct.get("licensePlate"),
        )
    # Document entry
    elif "kind" in dct:
        return Document(
            dct["kind"],
            dct.get("issueDate"),
            dct.get("expiryDate"),
            dct.get("number"),
            dct.get("notes"),
        )
    # Top-level vehicle object
    elif "car" in dct:
        if not isinstance(dct["car"], Car):
            raise ValueError("car: missing required key 'make'")
        documents = dct.get("documents") or []
        if not all(isinstance(d, Document) for d in documents):
            raise ValueError("documents: missing required key 'kind'")
        service = dct.get("service") or {}
        return Vehicle(
            dct["car"],
            documents,
            service.get("lastServiceDate"),
            service.get("intervalMonths"),
        )
    else:
        # Return dict as-is for unknown structures (like 'service')
        return dct


def _load_raw(filename: Union[str, Path]) -> Dict[str, Any]:
    with open(filename, "r") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader)
    if not isinstance(data, dict):
        raise ValueError(f"{filename}: not a vehicle record")
    return data


def _dump_raw(filename: Union[str, Path], data: Dict[str, Any]) -> None:
    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def load_vehicle(filename: Union[str, Path]) -> Vehicle:
    """
    Load a vehicle from a YAML file.

    Unquoted YAML dates are read back as ISO strings, so records may
    write `issueDate: 2024-01-01` or `issueDate: '2024-01-01'`.
    """
    data = _load_raw(filename)
    if "car" not in data:
        raise ValueError(f"{filename}: missing required key 'car'")
    json_data = json.dumps(data, default=str)
    vehicle = json.loads(json_data, object_hook=_parse_object)
    logger.debug("Loaded %s with %d documents", filename, len(vehicle.documents))
    return vehicle


def save_service(
    filename: Union[str, Path],
    service_date: str,
    interval_months: Optional[float] = None,
) -> None:
    """
    Record the last service date in a vehicle YAML file.

    An interval of None keeps whatever interval the file already has.
    """
    data = _load_raw(filename)

    service = data.get("service") or {}
    service["lastServiceDate"] = service_date
    if interval_months is not None:
        service["intervalMonths"] = interval_months
    data["service"] = service

    _dump_raw(filename, data)
    logger.debug("Saved service date %s to %s", service_date, filename)


def save_document(filename: Union[str, Path], document: Document) -> None:
    """
    Add a document to a vehicle YAML file.

    A document of the same kind is replaced (renewed paperwork supersedes
    the old record); otherwise the document is appended.
    """
    data = _load_raw(filename)

    # Build the entry dict, omitting None values for cleaner YAML
    entry = {"kind": document.kind}
    if document.issue_date is not None:
        entry["issueDate"] = document.issue_date
    if document.expiry_date is not None:
        entry["expiryDate"] = document.expiry_date
    if document.number is not None:
        entry["number"] = document.number
    if document.notes is not None:
        entry["notes"] = document.notes

    documents = data.get("documents") or []
    for i, existing in enumerate(documents):
        if str(existing.get("kind", "")).lower() == document.kind.lower():
            documents[i] = entry
            break
    else:
        documents.append(entry)
    data["documents"] = documents

    _dump_raw(filename, data)
    logger.debug("Saved %s document to %s", document.kind, filename)
