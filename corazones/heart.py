"""Heart disease dataset: categorised records, entropy and information gain."""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from .csvdata import PathLike, read_csv


class Age(Enum):
    YOUNG = 0
    MIDDLE = 1
    OLD = 2


class Sex(Enum):
    MALE = 0
    FEMALE = 1


class ChestPain(Enum):
    TYPICAL = 0
    ATYPICAL = 1
    OTHER = 2
    NULL = 3


class RestingBloodPressure(Enum):
    LOW = 0
    HIGH = 1


class Cholestoral(Enum):
    LOW = 0
    HIGH = 1


class FastingBloodSugar(Enum):
    LOW = 0
    HIGH = 1


class MaxHeartRate(Enum):
    LOW = 0
    HIGH = 1


class PreviousPeak(Enum):
    LOW = 0
    HIGH = 1


class Slope(Enum):
    NULL = 0
    PLANE = 1
    LOW = 2


class Thallasemia(Enum):
    NULL = 0
    UNFIXABLE = 1
    NORMAL = 2
    FIXABLE = 3


class Output(Enum):
    NO = 0
    YES = 1


class Fields(Enum):
    AGE = 0
    SEX = 1
    CHEST_PAIN = 2
    RESTING_BLOOD_PRESSURE = 3
    CHOLESTORAL = 4
    FASTING_BLOOD_SUGAR = 5
    RESTING_ELECTRO_CARDIO = 6
    MAX_HEART_RATE = 7
    EXERCISE_ANGINA = 8
    PREVIOUS_PEAK = 9
    SLOPE = 10
    THALLASEMIA = 11
    OUTPUT = 12


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_COLUMNS = 12


def _to_int(text: str) -> int:
    """Parse the leading integer of a field, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


_CHEST_PAIN = {
    3: ChestPain.NULL,
    2: ChestPain.OTHER,
    1: ChestPain.ATYPICAL,
    0: ChestPain.TYPICAL,
}

_SLOPE = {2: Slope.LOW, 1: Slope.PLANE}

_THALLASEMIA = {
    3: Thallasemia.FIXABLE,
    2: Thallasemia.NORMAL,
    1: Thallasemia.UNFIXABLE,
}


@dataclass
class HeartRecord:
    """One patient, with every measurement reduced to a category."""

    age: Age = Age.YOUNG
    sex: Sex = Sex.MALE
    chest_pain: ChestPain = ChestPain.TYPICAL
    resting_blood_pressure: RestingBloodPressure = RestingBloodPressure.LOW
    cholestoral: Cholestoral = Cholestoral.LOW
    fasting_blood_sugar: FastingBloodSugar = FastingBloodSugar.LOW
    resting_electro_cardio: int = 0
    max_heart_rate: MaxHeartRate = MaxHeartRate.LOW
    exercise_angina: int = 0
    previous_peak: PreviousPeak = PreviousPeak.LOW
    slope: Slope = Slope.NULL
    thallasemia: Thallasemia = Thallasemia.NULL
    output: Output = Output.NO

    @classmethod
    def from_row(cls, row: Sequence[str]) -> HeartRecord:
        """Build a record from the first twelve fields of a CSV row."""
        if len(row) < _COLUMNS:
            raise ValueError(
                f"row has {len(row)} fields, at least {_COLUMNS} are needed"
            )
        values = [_to_int(field) for field in row[:_COLUMNS]]
        (age, sex, chest_pain, pressure, cholestoral, sugar, cardio,
         angina, peak, slope, thal, output) = values

        if age < 50:
            age_class = Age.YOUNG
        elif age < 65:
            age_class = Age.MIDDLE
        else:
            age_class = Age.OLD

        return cls(
            age=age_class,
            sex=Sex.MALE if sex == 0 else Sex.FEMALE,
            chest_pain=_CHEST_PAIN.get(chest_pain, ChestPain.TYPICAL),
            resting_blood_pressure=(
                RestingBloodPressure.LOW if pressure < 125
                else RestingBloodPressure.HIGH
            ),
            cholestoral=Cholestoral.LOW if cholestoral < 240 else Cholestoral.HIGH,
            fasting_blood_sugar=(
                FastingBloodSugar.LOW if sugar == 0 else FastingBloodSugar.HIGH
            ),
            resting_electro_cardio=cardio,
            # The heart-rate category is taken from the electrocardiogram column.
            max_heart_rate=MaxHeartRate.LOW if cardio < 150 else MaxHeartRate.HIGH,
            exercise_angina=angina,
            previous_peak=PreviousPeak.LOW if peak < 1 else PreviousPeak.HIGH,
            slope=_SLOPE.get(slope, Slope.NULL),
            thallasemia=_THALLASEMIA.get(thal, Thallasemia.NULL),
            output=Output.YES if output == 1 else Output.NO,
        )


def _ratio(count: int, total: int) -> float:
    return count / total if total else math.nan


def _log2(value: float) -> float:
    if value == 0:
        return -math.inf
    return math.log2(value)


def _plogp(probability: float) -> float:
    return probability * _log2(probability)


class HeartDataSet:
    """A collection of heart records with entropy measures over them."""

    DEFAULT_PATH = "Datasets/heart.csv"

    def __init__(self, records: Iterable[HeartRecord] = ()) -> None:
        self.records: list[HeartRecord] = list(records)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> HeartDataSet:
        """Build a dataset from CSV rows.

        The first (header) row and the last row are not parsed; each of them
        yields a record with every category at its default.
        """
        last = len(rows) - 1
        return cls(
            HeartRecord() if index in (0, last) else HeartRecord.from_row(row)
            for index, row in enumerate(rows)
        )

    @classmethod
    def load(cls, path: PathLike = DEFAULT_PATH) -> HeartDataSet:
        """Read a dataset from a CSV file."""
        return cls.from_rows(read_csv(path))

    def entropy(self) -> float:
        """Shannon entropy, in bits, of the output column."""
        total = len(self.records)
        yes = sum(1 for record in self.records if record.output is Output.YES)
        no = total - yes
        return -_plogp(_ratio(no, total)) - _plogp(_ratio(yes, total))

    def information_gain(self, field: Fields) -> float:
        """Information measure for the given field.

        Only AGE, SEX and CHEST_PAIN are supported.
        """
        entropy = self.entropy()
        total = len(self.records)

        if field is Fields.AGE:
            counts = Counter(record.age for record in self.records)
            return entropy - sum(
                _plogp(_ratio(counts[member], total)) for member in Age
            )

        if field is Fields.SEX:
            counts = Counter(record.sex for record in self.records)
            male = counts[Sex.MALE]
            female = counts[Sex.FEMALE]
            return (
                entropy
                - _plogp(_ratio(male, total))
                - female * _log2(_ratio(female, total))
            )

        if field is Fields.CHEST_PAIN:
            typical = sum(
                1 for record in self.records
                if record.chest_pain is ChestPain.TYPICAL
            )
            return entropy - _plogp(_ratio(typical, total))

        raise ValueError(f"information gain is not supported for {field.name}")