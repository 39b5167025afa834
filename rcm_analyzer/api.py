# rcm_analyzer/api.py
from dataclasses import asdict

from flask import Blueprint, Response, current_app, jsonify, request

from . import validators
from .services.failure_mode_data import INDUSTRY_TEMPLATES, get_equipment_types_for_industry
from .services.failure_mode_service import serialize_failure_mode_map
from .services.ordinal_scales import InvalidEnumValue
from .services.reliability_service import (
    calculate_equipment_reliability,
    equipment_from_dict,
    get_equipment_by_industry,
    get_maintenance_cost_by_type,
    summarize_reliability,
    work_order_from_dict,
)
from .services.rpn_engine import assess_failure_modes, classify_risk, compute_rpn, summarize_risk
from .utils import generate_failure_mode_id

api_blueprint = Blueprint('api', __name__)


def _repository():
    return current_app.extensions['failure_mode_repository']


# --- Failure modes ---

@api_blueprint.route('/failure-modes', methods=['GET'])
def get_failure_modes():
    """Merged failure modes (defaults first, customs appended) by equipment type."""
    try:
        return jsonify(serialize_failure_mode_map(_repository().get_all_failure_modes()))
    except Exception as e:
        current_app.logger.exception("Error fetching failure modes.")
        return jsonify({'error': str(e)}), 500


@api_blueprint.route('/failure-modes/types', methods=['GET'])
def get_equipment_types():
    return jsonify(_repository().get_equipment_types())


@api_blueprint.route('/failure-modes/statistics', methods=['GET'])
def get_statistics():
    return jsonify(_repository().get_statistics())


@api_blueprint.route('/failure-modes/search', methods=['GET'])
def search_failure_modes():
    query = request.args.get('q')
    is_valid, error = validators.validate_search_query(query)
    if not is_valid:
        return jsonify({'error': error}), 400
    results = _repository().search_failure_modes(query)
    return jsonify([mode.to_dict() for mode in results])


@api_blueprint.route('/failure-modes/export', methods=['GET'])
def export_failure_modes():
    return Response(_repository().export_failure_modes(), mimetype='application/json')


@api_blueprint.route('/failure-modes/import', methods=['POST'])
def import_failure_modes():
    """Replace the custom overlay with the posted JSON document."""
    data = request.get_data(as_text=True)
    if not data:
        return jsonify({'error': 'Request body is required'}), 400
    try:
        imported = _repository().import_failure_modes(data)
    except Exception as e:
        current_app.logger.exception("Error importing failure modes.")
        return jsonify({'error': str(e)}), 500
    if not imported:
        return jsonify({'error': 'Invalid failure mode data'}), 400
    return jsonify({'message': 'Failure modes imported successfully.', 'statistics': _repository().get_statistics()})


@api_blueprint.route('/failure-modes/reset', methods=['POST'])
def reset_failure_modes():
    try:
        _repository().reset_to_factory_defaults()
        return jsonify({'message': 'Failure modes reset to factory defaults.'})
    except Exception as e:
        current_app.logger.exception("Error resetting failure modes.")
        return jsonify({'error': str(e)}), 500


@api_blueprint.route('/failure-modes/<string:equipment_type>', methods=['GET'])
def get_failure_modes_for_equipment(equipment_type):
    modes = _repository().get_failure_modes_for_equipment(equipment_type)
    return jsonify([mode.to_dict() for mode in modes])


@api_blueprint.route('/failure-modes/<string:equipment_type>/risk', methods=['GET'])
def get_equipment_risk(equipment_type):
    """RPN ranking of an equipment type's failure modes."""
    try:
        assessments = assess_failure_modes(_repository().get_failure_modes_for_equipment(equipment_type))
    except InvalidEnumValue as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({
        'equipment_type': equipment_type,
        'assessments': [assessment.to_dict() for assessment in assessments],
        'summary': summarize_risk(assessments)
    })


@api_blueprint.route('/failure-modes/<string:equipment_type>', methods=['POST'])
def add_failure_mode(equipment_type):
    is_valid, error = validators.validate_equipment_type(equipment_type)
    if not is_valid:
        return jsonify({'error': error}), 400

    data = request.get_json(silent=True)
    if isinstance(data, dict):
        data.setdefault('id', generate_failure_mode_id())
        data.setdefault('equipmentType', equipment_type)
    is_valid, error = validators.validate_failure_mode(data)
    if not is_valid:
        return jsonify({'error': error}), 400

    try:
        created = _repository().add_failure_mode(equipment_type, data)
        return jsonify(created.to_dict()), 201
    except Exception as e:
        current_app.logger.exception(f"Error adding failure mode to {equipment_type}.")
        return jsonify({'error': str(e)}), 500


@api_blueprint.route('/failure-modes/<string:equipment_type>/<string:failure_mode_id>', methods=['PUT'])
def update_failure_mode(equipment_type, failure_mode_id):
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        data.setdefault('id', failure_mode_id)
        data.setdefault('equipmentType', equipment_type)
    is_valid, error = validators.validate_failure_mode(data)
    if not is_valid:
        return jsonify({'error': error}), 400

    try:
        updated = _repository().update_failure_mode(equipment_type, failure_mode_id, data)
    except Exception as e:
        current_app.logger.exception(f"Error updating failure mode {failure_mode_id}.")
        return jsonify({'error': str(e)}), 500
    if not updated:
        return jsonify({'error': 'Custom failure mode not found'}), 404
    return jsonify({'message': 'Failure mode updated successfully.'})


@api_blueprint.route('/failure-modes/<string:equipment_type>/<string:failure_mode_id>', methods=['DELETE'])
def delete_failure_mode(equipment_type, failure_mode_id):
    try:
        deleted = _repository().delete_failure_mode(equipment_type, failure_mode_id)
    except Exception as e:
        current_app.logger.exception(f"Error deleting failure mode {failure_mode_id}.")
        return jsonify({'error': str(e)}), 500
    if not deleted:
        return jsonify({'error': 'Custom failure mode not found'}), 404
    return jsonify({'message': 'Failure mode deleted successfully.'})


# --- RPN ---

@api_blueprint.route('/rpn', methods=['POST'])
def calculate_rpn():
    data = request.get_json(silent=True)
    is_valid, error = validators.validate_rpn_request(data)
    if not is_valid:
        return jsonify({'error': error}), 400

    rpn = compute_rpn(data['frequency'], data['severity'], data['detectability'])
    return jsonify({'rpn': rpn, 'risk_level': classify_risk(rpn).value})


# --- Reliability ---

@api_blueprint.route('/reliability/metrics', methods=['POST'])
def reliability_metrics():
    """MTBF, MTTR and availability of one piece of equipment."""
    data = request.get_json(silent=True)
    is_valid, error = validators.validate_work_orders_request(data)
    if not is_valid:
        return jsonify({'error': error}), 400

    try:
        work_orders = [work_order_from_dict(wo) for wo in data['work_orders']]
        result = calculate_equipment_reliability(work_orders, data['equipment_id'])
        return jsonify(asdict(result))
    except Exception as e:
        current_app.logger.exception("Error calculating reliability metrics.")
        return jsonify({'error': str(e)}), 500


@api_blueprint.route('/reliability/summary', methods=['POST'])
def reliability_summary():
    data = request.get_json(silent=True)
    is_valid, error = validators.validate_work_orders_request(data, require_equipment_id=False)
    if not is_valid:
        return jsonify({'error': error}), 400

    equipment_ids = data.get('equipment_ids')
    if equipment_ids is not None and not isinstance(equipment_ids, list):
        return jsonify({'error': 'equipment_ids must be a list'}), 400

    try:
        work_orders = [work_order_from_dict(wo) for wo in data['work_orders']]
        results = summarize_reliability(work_orders, equipment_ids)
        return jsonify([asdict(result) for result in results])
    except Exception as e:
        current_app.logger.exception("Error summarizing reliability.")
        return jsonify({'error': str(e)}), 500


@api_blueprint.route('/reliability/cost-by-type', methods=['POST'])
def maintenance_cost_by_type():
    data = request.get_json(silent=True)
    is_valid, error = validators.validate_work_orders_request(data, require_equipment_id=False)
    if not is_valid:
        return jsonify({'error': error}), 400

    work_orders = [work_order_from_dict(wo) for wo in data['work_orders']]
    return jsonify(get_maintenance_cost_by_type(work_orders))


# --- Equipment & industries ---

@api_blueprint.route('/equipment/by-industry', methods=['POST'])
def equipment_by_industry():
    data = request.get_json(silent=True)
    is_valid, error = validators.validate_equipment_list(data)
    if not is_valid:
        return jsonify({'error': error}), 400

    equipment = [equipment_from_dict(item) for item in data['equipment']]
    return jsonify(get_equipment_by_industry(equipment))


@api_blueprint.route('/industries', methods=['GET'])
def get_industries():
    return jsonify(list(INDUSTRY_TEMPLATES))


@api_blueprint.route('/industries/<string:industry>/equipment-types', methods=['GET'])
def get_industry_equipment_types(industry):
    if industry not in INDUSTRY_TEMPLATES:
        return jsonify({'error': 'Industry not found'}), 404
    return jsonify(get_equipment_types_for_industry(industry))
