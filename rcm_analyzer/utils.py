import time

_BASE36 = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'


def _now_ms() -> int:
    return int(time.time() * 1000)


def _to_base36(value: int) -> str:
    if value == 0:
        return '0'
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return ''.join(reversed(digits))


def generate_failure_mode_id() -> str:
    """Time-based failure mode id, e.g. FM-1718000000000."""
    return f"FM-{_now_ms()}"


def generate_equipment_id() -> str:
    return 'EQ-' + _to_base36(_now_ms())


def generate_work_order_id() -> str:
    return 'WO-' + _to_base36(_now_ms())
