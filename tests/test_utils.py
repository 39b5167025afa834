import re

from rcm_analyzer.utils import generate_equipment_id, generate_failure_mode_id, generate_work_order_id


def test_failure_mode_id_format():
    assert re.fullmatch(r'FM-\d{13}', generate_failure_mode_id())


def test_equipment_and_work_order_ids_are_base36():
    assert re.fullmatch(r'EQ-[0-9A-Z]+', generate_equipment_id())
    assert re.fullmatch(r'WO-[0-9A-Z]+', generate_work_order_id())
