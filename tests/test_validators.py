"""
Tests for input validation utilities.
"""
import pytest

from rcm_analyzer.validators import (
    MAX_QUERY_LENGTH,
    validate_equipment_list,
    validate_equipment_type,
    validate_failure_mode,
    validate_rpn_request,
    validate_search_query,
    validate_string_field,
    validate_work_orders_request,
)


class TestValidateStringField:

    def test_optional_empty(self):
        assert validate_string_field(None, 'name', 10) == (True, None)

    def test_required_empty(self):
        is_valid, error = validate_string_field('', 'name', 10, required=True)
        assert is_valid is False
        assert 'required' in error

    def test_not_a_string(self):
        assert validate_string_field(5, 'name', 10)[0] is False

    def test_too_long(self):
        is_valid, error = validate_string_field('x' * 11, 'name', 10)
        assert is_valid is False
        assert 'maximum length' in error


class TestValidateQueries:

    def test_equipment_type_blank(self):
        assert validate_equipment_type('   ')[0] is False

    @pytest.mark.parametrize('value', ['search', 'types', 'statistics', 'export', 'import', 'reset'])
    def test_equipment_type_reserved(self, value):
        is_valid, error = validate_equipment_type(value)
        assert is_valid is False
        assert 'reserved' in error

    def test_equipment_type_with_slash(self):
        assert validate_equipment_type('Bomba/Motor')[0] is False

    def test_equipment_type_ok(self):
        assert validate_equipment_type('Motor Eléctrico') == (True, None)

    def test_search_query_required(self):
        assert validate_search_query(None)[0] is False

    def test_search_query_too_long(self):
        assert validate_search_query('a' * (MAX_QUERY_LENGTH + 1))[0] is False


class TestValidateFailureMode:

    def test_valid(self, sample_failure_mode):
        assert validate_failure_mode(sample_failure_mode) == (True, None)

    def test_missing_body(self):
        assert validate_failure_mode(None)[0] is False

    def test_missing_description(self, sample_failure_mode):
        del sample_failure_mode['description']
        is_valid, error = validate_failure_mode(sample_failure_mode)
        assert is_valid is False
        assert 'description' in error

    @pytest.mark.parametrize('field,value', [
        ('severity', 8),
        ('severity', 'Catastrophic'),
        ('frequency', 'Often'),
        ('detectability', None),
    ])
    def test_invalid_labels(self, sample_failure_mode, field, value):
        sample_failure_mode[field] = value
        is_valid, error = validate_failure_mode(sample_failure_mode)
        assert is_valid is False
        assert field in error


class TestValidateRpnRequest:

    def test_valid(self):
        assert validate_rpn_request({'frequency': 'Low', 'severity': 'Critical', 'detectability': 'Medium'}) == (True, None)

    def test_missing_field(self):
        is_valid, error = validate_rpn_request({'frequency': 'Low', 'severity': 'Critical'})
        assert is_valid is False
        assert 'detectability' in error

    @pytest.mark.parametrize('severity', [5, 'Huge', ['Major']])
    def test_invalid_severity(self, severity):
        data = {'frequency': 'Low', 'severity': severity, 'detectability': 'Medium'}
        assert validate_rpn_request(data)[0] is False


class TestValidateWorkOrdersRequest:

    def test_valid(self, sample_work_orders):
        data = {'equipment_id': 'EQ-001', 'work_orders': sample_work_orders}
        assert validate_work_orders_request(data) == (True, None)

    def test_equipment_id_optional(self, sample_work_orders):
        data = {'work_orders': sample_work_orders}
        assert validate_work_orders_request(data)[0] is False
        assert validate_work_orders_request(data, require_equipment_id=False) == (True, None)

    def test_work_orders_not_a_list(self):
        assert validate_work_orders_request({'equipment_id': 'EQ-1', 'work_orders': 'x'})[0] is False

    def test_bad_date_reports_index(self, sample_work_orders):
        sample_work_orders[1]['createdDate'] = 'yesterday'
        is_valid, error = validate_work_orders_request({'equipment_id': 'EQ-1', 'work_orders': sample_work_orders})
        assert is_valid is False
        assert error.startswith('Work order 2')


class TestValidateEquipmentList:

    def test_valid(self):
        data = {'equipment': [{'id': 'EQ-1', 'name': 'Bomba 1', 'equipmentType': 'Bomba Centrífuga', 'industry': 'Industrial'}]}
        assert validate_equipment_list(data) == (True, None)

    def test_not_a_list(self):
        assert validate_equipment_list({'equipment': {}})[0] is False

    def test_item_not_an_object(self):
        is_valid, error = validate_equipment_list({'equipment': ['EQ-1']})
        assert is_valid is False
        assert error.startswith('Equipment 1')
