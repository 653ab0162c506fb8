"""
Survey fields, selection defaults and human-readable labels
"""

from enum import Enum
from typing import Any, Dict, Optional


SEQUENCE_COLUMN = "SEQNO"
AGE_GROUP_COLUMN = "_AGEG5YR"


class Field(str, Enum):
    BMI = "_BMI5"
    PHYSICAL_HEALTH = "PHYSHLTH"
    MENTAL_HEALTH = "MENTHLTH"
    GENERAL_HEALTH = "GENHLTH"
    SEX = "SEXVAR"
    PHYSICAL_ACTIVITY = "_TOTINDA"
    SMOKED = "SMOKE100"

    @classmethod
    def parse(cls, value: Any) -> "Field":
        """Return the Field for a column name, raising ValueError if unknown"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown field '{value}'") from None

    @property
    def attribute(self) -> str:
        return FIELD_ATTRIBUTES[self]

    def value_of(self, record) -> Optional[float]:
        return getattr(record, FIELD_ATTRIBUTES[self])


# Record attribute behind each selectable column
FIELD_ATTRIBUTES: Dict[Field, str] = {
    Field.BMI: "body_mass_index",
    Field.PHYSICAL_HEALTH: "physical_health_days",
    Field.MENTAL_HEALTH: "mental_health_days",
    Field.GENERAL_HEALTH: "general_health",
    Field.SEX: "sex_code",
    Field.PHYSICAL_ACTIVITY: "physical_activity_flag",
    Field.SMOKED: "smoked_flag",
}

DEFAULT_X = Field.BMI
DEFAULT_Y = Field.PHYSICAL_HEALTH
DEFAULT_COLOR = Field.GENERAL_HEALTH

# ───────────────────────────────────────────────
# Labels
# ───────────────────────────────────────────────
AXIS_LABELS: Dict[Field, str] = {
    Field.BMI: "Body Mass Index (BMI)",
    Field.PHYSICAL_HEALTH: "Physical Health Days (past 30)",
    Field.MENTAL_HEALTH: "Mental Health Days (past 30)",
    Field.GENERAL_HEALTH: "General Health",
    Field.SEX: "Sex",
    Field.PHYSICAL_ACTIVITY: "Physical Activity",
    Field.SMOKED: "Smoked 100+ Cigarettes",
}

COLOR_LABELS: Dict[Field, Dict[int, str]] = {
    Field.GENERAL_HEALTH: {
        1: "Excellent",
        2: "Very Good",
        3: "Good",
        4: "Fair",
        5: "Poor",
        7: "Don't Know",
    },
    Field.SEX: {1: "Male", 2: "Female"},
    Field.PHYSICAL_ACTIVITY: {1: "Active", 2: "Inactive"},
    Field.SMOKED: {1: "Yes", 2: "No"},
}


def format_raw(value: Any) -> str:
    """Render a raw value, dropping the '.0' of integral floats"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def axis_label(field: Any) -> str:
    try:
        return AXIS_LABELS[Field.parse(field)]
    except ValueError:
        return str(field)


def color_label(field: Any, value: Any) -> str:
    """Category label for a coded value; unmapped values fall back to their raw form"""
    try:
        labels = COLOR_LABELS.get(Field.parse(field), {})
    except ValueError:
        labels = {}
    if isinstance(value, float) and value.is_integer():
        key = int(value)
    else:
        key = value
    return labels.get(key, format_raw(value))
