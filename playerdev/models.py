from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Player(BaseModel):
    """Player measurement snapshot handed to the metrics engine.

    Every field is optional so partial records can be analysed; ``None`` means
    "not measured yet" and is never treated as zero.
    """
    model_config = ConfigDict(frozen=True)

    # Identification
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[str] = None  # e.g. "Forward", "Defender"
    in_club_since: Optional[int] = None  # Year, e.g. 2015

    # Anthropometrics
    calendar_age: Optional[float] = None  # Decimal years, e.g. 17.5
    height_cm: Optional[float] = None
    previous_height_cm: Optional[float] = None  # Used for growth rate (PHV)
    weight_kg: Optional[float] = None
    previous_weight_kg: Optional[float] = None
    body_fat_percent: Optional[float] = None

    # Season load
    training_days: Optional[float] = None
    injury_days: Optional[float] = None
    matches: Optional[float] = None
    minutes: Optional[float] = None
    total_distance_m: Optional[float] = None
    sprint_distance_m: Optional[float] = None

    # Performance tests (seconds, lower is better)
    sprint_10m_sec: Optional[float] = None
    sprint_30m_sec: Optional[float] = None
    cod_left_sec: Optional[float] = None  # Change of direction, left
    cod_right_sec: Optional[float] = None  # Change of direction, right
    club_rating_10m: Optional[float] = None  # Club's own 1-10 rating
    club_rating_30m: Optional[float] = None

    notes: Optional[str] = None

    @field_validator('first_name', 'last_name', 'position', 'notes')
    @classmethod
    def strip_text(cls, v):
        if v is None:
            return v
        return v.strip()

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class ReferenceStat(BaseModel):
    """Mean and standard deviation of one test for one age"""
    model_config = ConfigDict(frozen=True)

    mean: float
    sd: float = Field(ge=0)


class ReferenceEntry(BaseModel):
    """Age-group reference values for the timed tests"""
    model_config = ConfigDict(frozen=True)

    sprint_10m: ReferenceStat
    sprint_30m: ReferenceStat
    cod: ReferenceStat


class MaturityEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    biological_age: float
    maturity_offset: float
    category: str


class CalculationResults(BaseModel):
    """Derived indicators for one Player snapshot.

    Fields left as ``None`` were not computed because their inputs were
    missing; consumers must not read them as zero.
    """
    model_config = ConfigDict(frozen=True)

    biological_age: Optional[float] = None
    maturity_offset: Optional[float] = None
    maturity_category: Optional[str] = None
    bmi: Optional[float] = None
    phv: Optional[float] = None  # Annualised growth rate, cm/year
    height_change_cm: Optional[float] = None
    weight_change_kg: Optional[float] = None

    availability: Optional[float] = None  # % of training days not lost to injury
    sprint_percent: Optional[float] = None  # % of total distance covered sprinting
    playing_time_percent: Optional[float] = None

    # Sign-corrected: positive means faster than the age reference
    zscore_10m: Optional[float] = None
    zscore_30m: Optional[float] = None
    zscore_cod_left: Optional[float] = None
    zscore_cod_right: Optional[float] = None

    overall_rating: Optional[str] = None
    training_suggestions: List[str] = Field(default_factory=list)
    report_comments: List[str] = Field(default_factory=list)
