"""Input validation utilities for the RCM Analyzer API."""
from typing import Any, Optional, Tuple

from pydantic import ValidationError

from .models import EquipmentSchema, FailureModeSchema, WorkOrderSchema
from .services.ordinal_scales import SCALES

# Validation constants
MAX_EQUIPMENT_TYPE_LENGTH = 200
MAX_QUERY_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000
MAX_WORK_ORDERS = 10000

# Path segments taken by the /failure-modes/<name> routes
RESERVED_EQUIPMENT_TYPES = frozenset({'types', 'statistics', 'search', 'export', 'import', 'reset'})


def _first_error(error: ValidationError) -> str:
    """Condense a pydantic error into a single message."""
    detail = error.errors()[0]
    location = '.'.join(str(part) for part in detail.get('loc', ()))
    return f"{location}: {detail.get('msg')}" if location else detail.get('msg', 'Invalid value')


def validate_string_field(value: Any, field_name: str, max_length: int, required: bool = False) -> Tuple[bool, Optional[str]]:
    """Validate a string field."""
    if value is None or value == '':
        if required:
            return False, f"{field_name} is required"
        return True, None
    if not isinstance(value, str):
        return False, f"{field_name} must be a string"
    if len(value) > max_length:
        return False, f"{field_name} exceeds maximum length of {max_length} characters"
    return True, None


def validate_equipment_type(value: Any) -> Tuple[bool, Optional[str]]:
    is_valid, error = validate_string_field(value, 'equipment_type', MAX_EQUIPMENT_TYPE_LENGTH, required=True)
    if not is_valid:
        return False, error
    if not value.strip():
        return False, "equipment_type is required"
    if '/' in value:
        return False, "equipment_type must not contain '/'"
    if value in RESERVED_EQUIPMENT_TYPES:
        return False, f"equipment_type '{value}' is reserved"
    return True, None


def validate_search_query(value: Any) -> Tuple[bool, Optional[str]]:
    return validate_string_field(value, 'q', MAX_QUERY_LENGTH, required=True)


def validate_failure_mode(data: Any) -> Tuple[bool, Optional[str]]:
    """Validate a failure mode payload (wire format, camelCase keys)."""
    if not data:
        return False, "Request body is required"
    if not isinstance(data, dict):
        return False, "Request body must be an object"

    is_valid, error = validate_string_field(data.get('description'), 'description', MAX_DESCRIPTION_LENGTH, required=True)
    if not is_valid:
        return False, error

    try:
        FailureModeSchema.model_validate(data)
    except ValidationError as e:
        return False, _first_error(e)
    return True, None


def validate_rpn_request(data: Any) -> Tuple[bool, Optional[str]]:
    """Validate an RPN calculation payload."""
    if not data:
        return False, "Request body is required"
    if not isinstance(data, dict):
        return False, "Request body must be an object"

    for scale, table in SCALES.items():
        if scale not in data:
            return False, f"Missing required field: {scale}"
        if not isinstance(data[scale], str) or data[scale] not in table:
            return False, f"{scale} must be one of: {', '.join(table)}"
    return True, None


def validate_work_orders_request(data: Any, require_equipment_id: bool = True) -> Tuple[bool, Optional[str]]:
    """Validate a payload carrying a list of work orders."""
    if not data:
        return False, "Request body is required"
    if not isinstance(data, dict):
        return False, "Request body must be an object"

    if require_equipment_id:
        is_valid, error = validate_string_field(data.get('equipment_id'), 'equipment_id', MAX_EQUIPMENT_TYPE_LENGTH, required=True)
        if not is_valid:
            return False, error

    work_orders = data.get('work_orders')
    if not isinstance(work_orders, list):
        return False, "work_orders must be a list"
    if len(work_orders) > MAX_WORK_ORDERS:
        return False, f"Maximum {MAX_WORK_ORDERS} work orders allowed per request"

    for index, work_order in enumerate(work_orders):
        if not isinstance(work_order, dict):
            return False, f"Work order {index + 1}: must be an object"
        try:
            WorkOrderSchema.model_validate(work_order)
        except ValidationError as e:
            return False, f"Work order {index + 1}: {_first_error(e)}"
    return True, None


def validate_equipment_list(data: Any) -> Tuple[bool, Optional[str]]:
    if not isinstance(data, dict) or not isinstance(data.get('equipment'), list):
        return False, "equipment must be a list"
    for index, item in enumerate(data['equipment']):
        if not isinstance(item, dict):
            return False, f"Equipment {index + 1}: must be an object"
        try:
            EquipmentSchema.model_validate(item)
        except ValidationError as e:
            return False, f"Equipment {index + 1}: {_first_error(e)}"
    return True, None
