"""
Failure Mode Repository

Merges the built-in failure-mode knowledge base with a user-authored custom
overlay, keyed by equipment type:
- Defaults are loaded once and never mutated
- The custom overlay is loaded from the key-value store at construction and
  written back after every mutation
- The merged view is recomputed on every read and handed out as a copy

Only the custom overlay is mutable. Updating or deleting a failure mode that
exists only in the defaults has no effect.
"""

import json
import logging
import threading
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..models import FailureModeSchema
from ..storage import KeyValueStore
from .failure_mode_data import DEFAULT_FAILURE_MODES

logger = logging.getLogger(__name__)

CUSTOM_STORAGE_KEY = 'rcm3_custom_failure_modes'


class Origin(Enum):
    """Which partition a failure mode belongs to"""
    DEFAULT = 'default'
    CUSTOM = 'custom'


@dataclass
class FailureMode:
    """A failure mode of an equipment type, with its three ordinal ratings"""
    id: str
    equipment_type: str
    description: str
    causes: List[str] = field(default_factory=list)
    effects: List[str] = field(default_factory=list)
    detection_methods: List[str] = field(default_factory=list)
    preventive_actions: List[str] = field(default_factory=list)
    frequency: str = 'Medium'
    severity: str = 'Moderate'
    detectability: str = 'Medium'
    origin: Origin = Origin.CUSTOM

    @classmethod
    def from_dict(cls, data: Dict[str, Any], origin: Origin = Origin.CUSTOM) -> 'FailureMode':
        """Build from the wire format. Raises pydantic.ValidationError on bad input."""
        schema = FailureModeSchema.model_validate(data)
        return cls(
            id=schema.id,
            equipment_type=schema.equipment_type,
            description=schema.description,
            causes=list(schema.causes),
            effects=list(schema.effects),
            detection_methods=list(schema.detection_methods),
            preventive_actions=list(schema.preventive_actions),
            frequency=schema.frequency,
            severity=schema.severity,
            detectability=schema.detectability,
            origin=origin
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire format; the origin tag is not serialized."""
        return {
            'id': self.id,
            'equipmentType': self.equipment_type,
            'description': self.description,
            'causes': list(self.causes),
            'effects': list(self.effects),
            'detectionMethods': list(self.detection_methods),
            'preventiveActions': list(self.preventive_actions),
            'frequency': self.frequency,
            'severity': self.severity,
            'detectability': self.detectability,
        }

    def copy(self) -> 'FailureMode':
        return replace(
            self,
            causes=list(self.causes),
            effects=list(self.effects),
            detection_methods=list(self.detection_methods),
            preventive_actions=list(self.preventive_actions)
        )

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on description, causes or effects."""
        needle = query.lower()
        return (
            needle in self.description.lower()
            or any(needle in cause.lower() for cause in self.causes)
            or any(needle in effect.lower() for effect in self.effects)
        )


FailureModeMap = Dict[str, List[FailureMode]]


def parse_failure_mode_map(data: Any, origin: Origin = Origin.CUSTOM) -> FailureModeMap:
    """
    Convert a {equipment_type: [failure mode dict, ...]} structure.

    Raises ValueError (pydantic.ValidationError included) or TypeError when the
    structure or any record is invalid, including a record whose equipmentType
    differs from the key it is listed under.
    """
    if not isinstance(data, dict):
        raise ValueError("Failure mode data must be an object keyed by equipment type")

    result: FailureModeMap = {}
    for equipment_type, modes in data.items():
        if not isinstance(modes, list):
            raise ValueError(f"Failure modes for {equipment_type!r} must be a list")
        parsed = [FailureMode.from_dict(mode, origin) for mode in modes]
        for mode in parsed:
            if mode.equipment_type != equipment_type:
                raise ValueError(
                    f"Failure mode {mode.id} has equipmentType {mode.equipment_type!r} "
                    f"but is listed under {equipment_type!r}"
                )
        result[equipment_type] = parsed
    return result


def serialize_failure_mode_map(modes_by_type: FailureModeMap) -> Dict[str, List[Dict[str, Any]]]:
    return {
        equipment_type: [mode.to_dict() for mode in modes]
        for equipment_type, modes in modes_by_type.items()
    }


class FailureModeRepository:
    """
    Default knowledge base plus a persisted custom overlay.

    The whole overlay is stored under one key, so mutations are serialized by a
    single lock around the read-modify-write of the overlay.
    """

    def __init__(self, store: KeyValueStore, defaults: Optional[Dict[str, List[Dict]]] = None):
        self._store = store
        self._lock = threading.RLock()
        self._default: FailureModeMap = parse_failure_mode_map(
            DEFAULT_FAILURE_MODES if defaults is None else defaults,
            Origin.DEFAULT
        )
        self._custom: FailureModeMap = self._load_custom()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load_custom(self) -> FailureModeMap:
        try:
            stored = self._store.get(CUSTOM_STORAGE_KEY)
        except Exception as e:
            logger.warning(f"Could not read custom failure modes, starting with an empty overlay: {e}")
            return {}

        if not stored:
            return {}

        try:
            custom = parse_failure_mode_map(json.loads(stored), Origin.CUSTOM)
        except (ValueError, TypeError) as e:
            logger.warning(f"Stored custom failure modes are corrupted and were ignored: {e}")
            return {}

        logger.info(f"Loaded {_count(custom)} custom failure modes for {len(custom)} equipment types")
        return custom

    def _commit(self, custom: FailureModeMap) -> None:
        """Write the new overlay to the store, then make it current."""
        payload = json.dumps(serialize_failure_mode_map(custom), ensure_ascii=False)
        self._store.set(CUSTOM_STORAGE_KEY, payload)
        self._custom = custom

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_default_failure_modes(self) -> FailureModeMap:
        return _copy_map(self._default)

    def get_custom_failure_modes(self) -> FailureModeMap:
        with self._lock:
            return _copy_map(self._custom)

    def get_all_failure_modes(self) -> FailureModeMap:
        """Defaults first, customs appended, per equipment type. Always a fresh copy."""
        with self._lock:
            merged = _copy_map(self._default)
            for equipment_type, modes in self._custom.items():
                merged.setdefault(equipment_type, []).extend(mode.copy() for mode in modes)
            return merged

    def get_failure_modes_for_equipment(self, equipment_type: str) -> List[FailureMode]:
        return self.get_all_failure_modes().get(equipment_type, [])

    def get_equipment_types(self) -> List[str]:
        return sorted(self.get_all_failure_modes().keys())

    def search_failure_modes(self, query: str) -> List[FailureMode]:
        """Match description, causes or effects across the merged set, in map order."""
        results = []
        for modes in self.get_all_failure_modes().values():
            results.extend(mode for mode in modes if mode.matches(query))
        return results

    def get_statistics(self) -> Dict[str, int]:
        with self._lock:
            all_modes = self.get_all_failure_modes()
            return {
                'total_equipment_types': len(all_modes),
                'total_failure_modes': _count(all_modes),
                'custom_failure_modes': _count(self._custom),
                'default_failure_modes': _count(self._default),
            }

    # ------------------------------------------------------------------
    # Mutations (custom overlay only)
    # ------------------------------------------------------------------

    def add_failure_mode(self, equipment_type: str, failure_mode: Union[FailureMode, Dict[str, Any]]) -> FailureMode:
        """
        Append a failure mode to the custom overlay of an equipment type.

        No uniqueness check is made on the id; callers generate it. The
        record's equipment type is set to the one it is filed under.
        """
        new_mode = _as_custom(failure_mode, equipment_type)
        with self._lock:
            custom = _shallow_copy(self._custom)
            custom.setdefault(equipment_type, []).append(new_mode)
            self._commit(custom)
        logger.info(f"Added failure mode {new_mode.id} to {equipment_type}")
        return new_mode.copy()

    def update_failure_mode(self, equipment_type: str, failure_mode_id: str,
                            updated_mode: Union[FailureMode, Dict[str, Any]]) -> bool:
        """Replace a custom failure mode wholesale. Returns False when nothing changed."""
        new_mode = _as_custom(updated_mode, equipment_type)
        with self._lock:
            target = self._locate(equipment_type, failure_mode_id)
            if target is None:
                return False
            if target.origin is Origin.DEFAULT:
                logger.debug(f"Failure mode {failure_mode_id} of {equipment_type} is a default and cannot be updated")
                return False

            custom = _shallow_copy(self._custom)
            modes = custom[equipment_type]
            index = next(i for i, mode in enumerate(modes) if mode is target)
            modes[index] = new_mode
            self._commit(custom)
        logger.info(f"Updated failure mode {failure_mode_id} of {equipment_type}")
        return True

    def delete_failure_mode(self, equipment_type: str, failure_mode_id: str) -> bool:
        """
        Remove a custom failure mode; drops the equipment type from the overlay
        once its list is empty. Returns False when nothing changed.
        """
        with self._lock:
            target = self._locate(equipment_type, failure_mode_id)
            if target is None:
                return False
            if target.origin is Origin.DEFAULT:
                logger.debug(f"Failure mode {failure_mode_id} of {equipment_type} is a default and cannot be deleted")
                return False

            custom = _shallow_copy(self._custom)
            remaining = [mode for mode in custom[equipment_type] if mode.id != failure_mode_id]
            if remaining:
                custom[equipment_type] = remaining
            else:
                del custom[equipment_type]
            self._commit(custom)
        logger.info(f"Deleted failure mode {failure_mode_id} of {equipment_type}")
        return True

    def reset_to_factory_defaults(self) -> None:
        """Drop the whole custom overlay. Irreversible."""
        with self._lock:
            removed = _count(self._custom)
            self._commit({})
        logger.info(f"Reset failure modes to factory defaults ({removed} custom modes removed)")

    # ------------------------------------------------------------------
    # Export / import
    # ------------------------------------------------------------------

    def export_failure_modes(self) -> str:
        """Serialize the merged view as JSON text."""
        return json.dumps(serialize_failure_mode_map(self.get_all_failure_modes()), indent=2, ensure_ascii=False)

    def import_failure_modes(self, data: str) -> bool:
        """
        Replace the custom overlay with the parsed payload.

        An export lists each type's defaults first. When an imported list
        starts with exactly the defaults of its type, in order, that prefix is
        dropped since the defaults are always merged in; every other record is
        kept as custom. Returns False and leaves the overlay untouched when the
        payload cannot be parsed or validated.
        """
        try:
            imported = parse_failure_mode_map(json.loads(data), Origin.CUSTOM)
        except (ValueError, TypeError) as e:
            logger.warning(f"Error importing failure modes: {e}")
            return False

        overlay: FailureModeMap = {}
        for equipment_type, modes in imported.items():
            defaults = [mode.to_dict() for mode in self._default.get(equipment_type, [])]
            prefix = [mode.to_dict() for mode in modes[:len(defaults)]]
            kept = modes[len(defaults):] if prefix == defaults else modes
            if kept:
                overlay[equipment_type] = kept

        with self._lock:
            self._commit(overlay)
        logger.info(f"Imported {_count(overlay)} custom failure modes for {len(overlay)} equipment types")
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _locate(self, equipment_type: str, failure_mode_id: str) -> Optional[FailureMode]:
        """Find a failure mode by id, custom overlay first."""
        for partition in (self._custom, self._default):
            for mode in partition.get(equipment_type, []):
                if mode.id == failure_mode_id:
                    return mode
        return None


def _as_custom(failure_mode: Union[FailureMode, Dict[str, Any]], equipment_type: str) -> FailureMode:
    data = failure_mode.to_dict() if isinstance(failure_mode, FailureMode) else failure_mode
    mode = FailureMode.from_dict(data, Origin.CUSTOM)
    mode.equipment_type = equipment_type
    return mode


def _shallow_copy(modes_by_type: FailureModeMap) -> FailureModeMap:
    # Records are never mutated in place, so fresh lists are enough
    return {equipment_type: list(modes) for equipment_type, modes in modes_by_type.items()}


def _copy_map(modes_by_type: FailureModeMap) -> FailureModeMap:
    return {equipment_type: [mode.copy() for mode in modes] for equipment_type, modes in modes_by_type.items()}


def _count(modes_by_type: FailureModeMap) -> int:
    return sum(len(modes) for modes in modes_by_type.values())
