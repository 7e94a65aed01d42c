"""HTTP routes for the about and services sections."""

from __future__ import annotations

import json
import re
from dataclasses import replace
from typing import Any

from flask import Blueprint, jsonify, request

from .domain import About, ServiceItem, ServiceNotFoundError
from .usecase import AboutUsecase, ServicesUsecase

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64 = range(-(2**63), 2**63)


class _BadRequest(Exception):
    """A request that cannot be bound to the expected payload."""


def _read_json() -> Any:
    body = request.get_data(cache=True)
    if not body.strip():
        raise _BadRequest("EOF")
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise _BadRequest(str(exc)) from exc
    # A JSON null binds to an empty payload.
    return {} if data is None else data


def _bind(factory: Any) -> Any:
    data = _read_json()
    try:
        return factory(data)
    except ValueError as exc:
        raise _BadRequest(str(exc)) from exc


def _parse_id(raw: str) -> int:
    if _ID_PATTERN.fullmatch(raw) is not None:
        value = int(raw)
        if value in _INT64:
            return value
    raise _BadRequest(f"Invalid service id: {raw}")


def _bad_request(exc: _BadRequest):
    return jsonify(error=str(exc)), 400


def _not_found(_exc: ServiceNotFoundError):
    # The error value is reported as an empty object, without its message.
    return jsonify(error={}), 500


def about_blueprint(usecase: AboutUsecase) -> Blueprint:
    """Routes under /about backed by ``usecase``."""
    blueprint = Blueprint("about", __name__, url_prefix="/about")
    blueprint.register_error_handler(_BadRequest, _bad_request)

    @blueprint.get("")
    def get_about():
        return jsonify(usecase.get_about().to_dict()), 200

    @blueprint.patch("")
    def update_about():
        about = _bind(About.from_dict)
        return jsonify(usecase.update_about(about).to_dict()), 200

    return blueprint


def services_blueprint(usecase: ServicesUsecase) -> Blueprint:
    """Routes under /services backed by ``usecase``."""
    blueprint = Blueprint("services", __name__, url_prefix="/services")
    blueprint.register_error_handler(_BadRequest, _bad_request)
    blueprint.register_error_handler(ServiceNotFoundError, _not_found)

    @blueprint.get("")
    def get_all_services():
        return jsonify(usecase.get_services().to_dict()), 200

    @blueprint.post("")
    def create_service():
        service = _bind(ServiceItem.from_dict)
        return jsonify(usecase.create_service(service).to_dict()), 200

    @blueprint.put("/<service_id>")
    def update_service(service_id: str):
        parsed = _parse_id(service_id)
        service = replace(_bind(ServiceItem.from_dict), id=parsed)
        return jsonify(usecase.update_service(service).to_dict()), 200

    @blueprint.delete("/<service_id>")
    def delete_service(service_id: str):
        usecase.delete_service(_parse_id(service_id))
        return jsonify(message="Service deleted"), 200

    @blueprint.patch("/summary")
    def update_services_summary():
        payload = _read_json()
        if not isinstance(payload, dict):
            raise _BadRequest("summary payload must be a JSON object")
        summary = payload.get("summary")
        if summary is None:
            summary = ""
        if not isinstance(summary, str):
            raise _BadRequest("field 'summary' must be a string")
        return jsonify(usecase.update_summary(summary).to_dict()), 200

    return blueprint