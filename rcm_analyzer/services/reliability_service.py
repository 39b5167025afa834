"""
Reliability Metrics Service

Reliability metrics computed from work-order history:
- MTBF (Mean Time Between Failures)
- MTTR (Mean Time To Repair)
- Inherent availability from MTBF and MTTR
- Maintenance cost by work-order type

All functions are pure: they read the collections handed in and keep no state.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from ..models import EquipmentSchema, WorkOrderSchema
from ..utils import generate_equipment_id, generate_work_order_id

SECONDS_PER_HOUR = 3600


@dataclass
class WorkOrder:
    """A maintenance work order as far as reliability metrics need it"""
    id: str
    equipment_id: str
    type: str          # 'Preventive', 'Corrective', 'Predictive', 'Emergency'
    status: str        # 'Draft', 'Open', 'In Progress', 'Completed', 'Cancelled'
    created_date: datetime
    completed_date: Optional[datetime] = None
    cost: float = 0.0


@dataclass
class Equipment:
    id: str
    name: str = ""
    equipment_type: str = ""
    industry: str = ""


@dataclass
class ReliabilityResult:
    """MTBF, MTTR and availability of one piece of equipment"""
    equipment_id: str
    mtbf_hours: float
    mttr_hours: float
    availability_percent: float
    failure_count: int
    repair_count: int


def _as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive values are taken as UTC already; aware ones are converted."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def work_order_from_dict(data: Dict[str, Any]) -> WorkOrder:
    """
    Build a WorkOrder from camelCase or snake_case keys.

    Dates may be ISO strings, with or without an offset, or epoch timestamps;
    they are all stored as naive UTC so they can be compared.
    """
    schema = WorkOrderSchema.model_validate(data)
    return WorkOrder(
        id=schema.id or generate_work_order_id(),
        equipment_id=schema.equipment_id,
        type=schema.type,
        status=schema.status,
        created_date=_as_naive_utc(schema.created_date),
        completed_date=_as_naive_utc(schema.completed_date),
        cost=schema.cost
    )


def equipment_from_dict(data: Dict[str, Any]) -> Equipment:
    schema = EquipmentSchema.model_validate(data)
    return Equipment(
        id=schema.id or generate_equipment_id(),
        name=schema.name,
        equipment_type=schema.equipment_type,
        industry=schema.industry
    )


def _hours(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / SECONDS_PER_HOUR


def _corrective_failures(work_orders: Iterable[WorkOrder], equipment_id: str) -> List[WorkOrder]:
    return [
        wo for wo in work_orders
        if wo.equipment_id == equipment_id and wo.type == 'Corrective' and wo.status == 'Completed'
    ]


def _completed_repairs(work_orders: Iterable[WorkOrder], equipment_id: str) -> List[WorkOrder]:
    return [
        wo for wo in work_orders
        if wo.equipment_id == equipment_id and wo.status == 'Completed' and wo.completed_date
    ]


def calculate_mtbf(work_orders: Iterable[WorkOrder], equipment_id: str) -> float:
    """
    Calculate Mean Time Between Failures in hours.

    Only completed corrective work orders count as failures. They are ordered
    by creation date before the gaps between consecutive failures are
    averaged. Fewer than two failures gives 0.
    """
    failures = sorted(_corrective_failures(work_orders, equipment_id), key=lambda wo: wo.created_date)
    if len(failures) < 2:
        return 0.0

    total_hours = sum(
        _hours(previous.created_date, current.created_date)
        for previous, current in zip(failures, failures[1:])
    )
    return total_hours / (len(failures) - 1)


def calculate_mttr(work_orders: Iterable[WorkOrder], equipment_id: str) -> float:
    """
    Calculate Mean Time To Repair in hours.

    MTTR = sum(completed - created) / number of completed work orders
    """
    repairs = _completed_repairs(work_orders, equipment_id)
    if not repairs:
        return 0.0

    total_hours = sum(_hours(wo.created_date, wo.completed_date) for wo in repairs)
    return total_hours / len(repairs)


def calculate_availability(mtbf: float, mttr: float) -> float:
    """
    Availability = MTBF / (MTBF + MTTR) * 100

    With no failure and no repair time the equipment counts as fully available.
    """
    if mtbf + mttr == 0:
        return 100.0
    return (mtbf / (mtbf + mttr)) * 100


def get_maintenance_cost_by_type(work_orders: Iterable[WorkOrder]) -> Dict[str, float]:
    costs: Dict[str, float] = defaultdict(float)
    for wo in work_orders:
        costs[wo.type] += wo.cost
    return dict(costs)


def get_equipment_by_industry(equipment: Iterable[Equipment]) -> Dict[str, int]:
    counts: Dict[str, int] = defaultdict(int)
    for item in equipment:
        counts[item.industry] += 1
    return dict(counts)


def calculate_equipment_reliability(work_orders: Iterable[WorkOrder], equipment_id: str) -> ReliabilityResult:
    work_orders = list(work_orders)
    mtbf = calculate_mtbf(work_orders, equipment_id)
    mttr = calculate_mttr(work_orders, equipment_id)

    return ReliabilityResult(
        equipment_id=equipment_id,
        mtbf_hours=round(mtbf, 2),
        mttr_hours=round(mttr, 2),
        availability_percent=round(calculate_availability(mtbf, mttr), 2),
        failure_count=len(_corrective_failures(work_orders, equipment_id)),
        repair_count=len(_completed_repairs(work_orders, equipment_id))
    )


def summarize_reliability(work_orders: Iterable[WorkOrder],
                          equipment_ids: Optional[Iterable[str]] = None) -> List[ReliabilityResult]:
    """
    Reliability results for several pieces of equipment, lowest availability first.

    Without explicit ids every equipment referenced by a work order is included.
    """
    work_orders = list(work_orders)
    if equipment_ids is None:
        equipment_ids = sorted({wo.equipment_id for wo in work_orders})

    results = [calculate_equipment_reliability(work_orders, eq_id) for eq_id in equipment_ids]
    results.sort(key=lambda r: r.availability_percent)
    return results
