# notebook 1- 1-cleaning

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Mapping, Optional

import numpy as np
import pandas as pd


# ----------------------------------
# 1. Parse-or-zero numeric coercion
# ----------------------------------
def to_number(value: Any) -> float:
    """
    Coerce a loosely-typed JSON value into a finite float.

    - None / missing -> 0.0
    - numeric strings are parsed ("12.5" -> 12.5)
    - NaN, +/-inf and anything unparseable -> 0.0
    - booleans are not numbers here -> 0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0

    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0

    return number if math.isfinite(number) else 0.0


def coerce_numeric_columns(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """
    Vectorised parse-or-zero for the given columns (copy, never in place).
    """
    df = df.copy()

    for col in columns:
        if col not in df.columns:
            df[col] = 0.0
            continue

        # element-wise: to_numeric raises on nested lists/dicts even with coerce
        df[col] = (
            df[col]
            .map(to_number)
            .astype(float)
            .replace([np.inf, -np.inf], np.nan)
            .fillna(0.0)
        )

    return df


# ----------------------------------
# 2. Structural helpers
# ----------------------------------
def as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def as_records(value: Any) -> list[Mapping[str, Any]]:
    """
    Turn an optional JSON array into a list of mappings.
    Non-list values become []; non-mapping items become {}.
    """
    if not isinstance(value, (list, tuple)):
        return []

    return [as_mapping(item) for item in value]


def normalize_key(value: Any) -> str:
    """
    Lookup key for case-insensitive categorical values:
    strip surrounding whitespace and lowercase. None -> "".
    """
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""

    return str(value).strip().lower()


# ----------------------------------
# 3. Closed categorical enumerations
# ----------------------------------
class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: Optional[Any]) -> "Gender":
        key = normalize_key(value)
        if key == cls.MALE.value:
            return cls.MALE
        if key == cls.FEMALE.value:
            return cls.FEMALE
        return cls.UNRECOGNIZED


class Device(str, Enum):
    MOBILE = "mobile"
    DESKTOP = "desktop"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: Optional[Any]) -> "Device":
        key = normalize_key(value)
        if key == cls.MOBILE.value:
            return cls.MOBILE
        if key == cls.DESKTOP.value:
            return cls.DESKTOP
        return cls.UNRECOGNIZED


# Recognised members only, in display order
GENDERS = [Gender.MALE, Gender.FEMALE]
DEVICES = [Device.MOBILE, Device.DESKTOP]
