from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

FrequencyLabel = Literal['Very Low', 'Low', 'Medium', 'High', 'Very High']
SeverityLabel = Literal['Minor', 'Moderate', 'Major', 'Critical']
DetectabilityLabel = Literal['Very High', 'High', 'Medium', 'Low', 'Very Low']

WorkOrderType = Literal['Preventive', 'Corrective', 'Predictive', 'Emergency']
WorkOrderStatus = Literal['Draft', 'Open', 'In Progress', 'Completed', 'Cancelled']


# --- Failure modes (wire format uses camelCase keys) ---

class FailureModeSchema(BaseModel):
    """A failure mode as exchanged over HTTP and in export/import payloads."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    equipment_type: str = Field(alias='equipmentType', min_length=1)
    description: str = Field(min_length=1)
    causes: List[str] = Field(default_factory=list)
    effects: List[str] = Field(default_factory=list)
    detection_methods: List[str] = Field(default_factory=list, alias='detectionMethods')
    preventive_actions: List[str] = Field(default_factory=list, alias='preventiveActions')
    frequency: FrequencyLabel
    # The four-label scale only; numeric 1-10 severities are rejected here
    severity: SeverityLabel
    detectability: DetectabilityLabel


# --- Work orders ---

class WorkOrderSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    equipment_id: str = Field(alias='equipmentId', min_length=1)
    type: WorkOrderType
    status: WorkOrderStatus
    created_date: datetime = Field(alias='createdDate')
    completed_date: Optional[datetime] = Field(default=None, alias='completedDate')
    cost: float = 0.0


class EquipmentSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    name: str = ""
    equipment_type: str = Field(default="", alias='equipmentType')
    industry: str = ""
