"""
Unit tests for the reliability metrics service.
"""
from datetime import datetime

import pytest
from pydantic import ValidationError

from rcm_analyzer.services.reliability_service import (
    Equipment,
    WorkOrder,
    calculate_availability,
    calculate_equipment_reliability,
    calculate_mtbf,
    calculate_mttr,
    equipment_from_dict,
    get_equipment_by_industry,
    get_maintenance_cost_by_type,
    summarize_reliability,
    work_order_from_dict,
)


def _corrective(wo_id, day, equipment_id='EQ-100'):
    return WorkOrder(id=wo_id, equipment_id=equipment_id, type='Corrective', status='Completed',
                     created_date=datetime(2024, 3, day), completed_date=datetime(2024, 3, day, 1))


class TestWorkOrderFromDict:

    def test_camel_case_keys(self, sample_work_orders):
        wo = work_order_from_dict(sample_work_orders[0])
        assert wo.id == 'WO-3'
        assert wo.equipment_id == 'EQ-001'
        assert wo.created_date == datetime(2024, 1, 3)
        assert wo.completed_date == datetime(2024, 1, 3, 4)
        assert wo.cost == 300.0

    def test_open_order_has_no_completion(self, work_orders):
        assert work_orders[3].completed_date is None

    def test_missing_id_is_generated(self):
        wo = work_order_from_dict({'equipmentId': 'EQ-1', 'type': 'Preventive', 'status': 'Open',
                                   'createdDate': '2024-01-01T00:00:00'})
        assert wo.id.startswith('WO-')

    def test_dates_normalized_to_naive_utc(self):
        offset = work_order_from_dict({'equipmentId': 'EQ-1', 'type': 'Corrective', 'status': 'Completed',
                                       'createdDate': '2024-01-01T02:00:00+02:00',
                                       'completedDate': '2024-01-01T01:00:00Z'})
        epoch = work_order_from_dict({'equipmentId': 'EQ-1', 'type': 'Corrective', 'status': 'Open',
                                      'createdDate': 1704153600000})
        assert offset.created_date == datetime(2024, 1, 1)
        assert offset.completed_date == datetime(2024, 1, 1, 1)
        assert epoch.created_date == datetime(2024, 1, 2)
        assert epoch.created_date.tzinfo is None

    def test_mixed_date_formats(self):
        orders = [work_order_from_dict(wo) for wo in [
            {'equipmentId': 'EQ-1', 'type': 'Corrective', 'status': 'Completed',
             'createdDate': '2024-01-01T00:00:00', 'completedDate': '2024-01-01T02:00:00Z'},
            {'equipmentId': 'EQ-1', 'type': 'Corrective', 'status': 'Completed',
             'createdDate': '2024-01-03T00:00:00Z', 'completedDate': 1704247200000},
        ]]
        assert calculate_mtbf(orders, 'EQ-1') == 48.0
        assert calculate_mttr(orders, 'EQ-1') == 2.0

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            work_order_from_dict({'equipmentId': 'EQ-1', 'type': 'Inspection', 'status': 'Open',
                                  'createdDate': '2024-01-01T00:00:00'})


class TestCalculateMtbf:
    """Tests for calculate_mtbf."""

    def test_unsorted_input(self, work_orders):
        # Failures on Jan 1 and Jan 3, given in reverse order
        assert calculate_mtbf(work_orders, 'EQ-001') == 48.0

    def test_ignores_open_and_non_corrective(self, work_orders):
        extra = WorkOrder(id='WO-6', equipment_id='EQ-001', type='Preventive', status='Completed',
                          created_date=datetime(2024, 1, 10), completed_date=datetime(2024, 1, 10, 1))
        assert calculate_mtbf(work_orders + [extra], 'EQ-001') == 48.0

    def test_fewer_than_two_failures(self, work_orders):
        assert calculate_mtbf(work_orders, 'EQ-002') == 0.0
        assert calculate_mtbf([], 'EQ-001') == 0.0

    def test_average_of_gaps(self):
        orders = [_corrective('a', 1), _corrective('b', 2), _corrective('c', 5)]
        # gaps of 24h and 72h
        assert calculate_mtbf(orders, 'EQ-100') == 48.0

    def test_order_independent(self):
        orders = [_corrective('a', 1), _corrective('b', 2), _corrective('c', 5)]
        assert calculate_mtbf(list(reversed(orders)), 'EQ-100') == calculate_mtbf(orders, 'EQ-100')


class TestCalculateMttr:

    def test_all_completed_types(self, work_orders):
        # 4h, 2h and 6h of completed work on EQ-001
        assert calculate_mttr(work_orders, 'EQ-001') == 4.0

    def test_single_repair(self, work_orders):
        assert calculate_mttr(work_orders, 'EQ-002') == 10.0

    def test_no_repairs(self, work_orders):
        assert calculate_mttr(work_orders, 'EQ-404') == 0.0


class TestCalculateAvailability:

    @pytest.mark.parametrize('mtbf,mttr,expected', [
        (0, 0, 100.0),
        (100, 0, 100.0),
        (0, 100, 0.0),
        (90, 10, 90.0),
    ])
    def test_availability(self, mtbf, mttr, expected):
        assert calculate_availability(mtbf, mttr) == pytest.approx(expected)


class TestEquipmentReliability:

    def test_rounded_result(self, work_orders):
        result = calculate_equipment_reliability(work_orders, 'EQ-001')
        assert result.mtbf_hours == 48.0
        assert result.mttr_hours == 4.0
        assert result.availability_percent == 92.31
        assert result.failure_count == 2
        assert result.repair_count == 3

    def test_repairs_without_failures(self, work_orders):
        result = calculate_equipment_reliability(work_orders, 'EQ-002')
        assert result.mtbf_hours == 0.0
        assert result.availability_percent == 0.0

    def test_summary_lowest_availability_first(self, work_orders):
        results = summarize_reliability(work_orders)
        assert [r.equipment_id for r in results] == ['EQ-002', 'EQ-001']

    def test_summary_explicit_ids(self, work_orders):
        results = summarize_reliability(work_orders, ['EQ-001', 'EQ-404'])
        assert [r.equipment_id for r in results] == ['EQ-001', 'EQ-404']
        assert results[1].availability_percent == 100.0


class TestAggregations:

    def test_cost_by_type(self, work_orders):
        assert get_maintenance_cost_by_type(work_orders) == {
            'Corrective': 400.0,
            'Preventive': 50.0,
            'Emergency': 1000.0,
        }

    def test_cost_by_type_empty(self):
        assert get_maintenance_cost_by_type([]) == {}

    def test_equipment_by_industry(self):
        equipment = [
            Equipment(id='EQ-1', industry='Minero'),
            Equipment(id='EQ-2', industry='Salud'),
            equipment_from_dict({'name': 'Excavadora 3', 'equipmentType': 'Excavadora', 'industry': 'Minero'}),
        ]
        assert get_equipment_by_industry(equipment) == {'Minero': 2, 'Salud': 1}
        assert equipment[2].id.startswith('EQ-')
