import pytest

from dartmatch.exceptions import InvalidHitError
from dartmatch.models import Throw


@pytest.mark.parametrize(
    "sector, multiplier, points",
    [
        (20, 3, 60),
        (1, 1, 1),
        (25, 1, 25),
        (25, 2, 50),
        (19, 2, 38),
    ],
)
def test_points_are_sector_times_multiplier(sector, multiplier, points) -> None:
    assert Throw(sector, multiplier).points == points


def test_multiplier_defaults_to_single() -> None:
    throw = Throw(7)
    assert throw.multiplier == 1
    assert throw.points == 7
    assert str(throw) == "S7"


@pytest.mark.parametrize(
    "sector, multiplier, msg",
    [
        (20, 0, "Multiplier"),
        (20, 4, "Multiplier"),
        (0, 1, "Sector"),
        (21, 1, "Sector"),
        (24, 1, "Sector"),
        (25, 3, "triple bull"),
        ("20", 1, "integer"),
        (20, True, "integer"),
        (20.0, 1, "integer"),
    ],
    ids=[
        "zero-multiplier",
        "quad",
        "zero-sector",
        "sector-21",
        "sector-24",
        "triple-bull",
        "string-sector",
        "bool-multiplier",
        "float-sector",
    ],
)
def test_rejects_invalid_throws(sector, multiplier, msg) -> None:
    with pytest.raises(InvalidHitError) as exc:
        Throw(sector, multiplier)
    assert msg.lower() in str(exc.value).lower()
    assert exc.value.code == "invalid_hit"


def test_throw_is_immutable() -> None:
    throw = Throw(20, 3)
    with pytest.raises(AttributeError):
        throw.multiplier = 1  # type: ignore[misc]


def test_is_double() -> None:
    assert Throw(10, 2).is_double
    assert Throw(25, 2).is_double
    assert not Throw(20, 3).is_double
