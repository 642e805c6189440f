from typing import Tuple

from fleetprob.domain.config import CLASSIC_FLEET, MODE_HUNTING, MODE_NORMAL

from .definition import Scenario


def worked_example() -> Scenario:
    return Scenario(
        scenario_id="worked",
        name="Two hits in a row (10x10)",
        height=10,
        width=10,
        hits=((2, 3), (2, 4)),
        misses=((0, 0), (1, 1), (3, 3)),
        remaining=(5, 4, 3),
        mode=MODE_NORMAL,
    )


def open_water() -> Scenario:
    return Scenario(
        scenario_id="open",
        name="Opening move, classic fleet (10x10)",
        height=10,
        width=10,
        remaining=CLASSIC_FLEET,
        mode=MODE_HUNTING,
    )


def contradictory_corner() -> Scenario:
    return Scenario(
        scenario_id="contradiction",
        name="Boxed-in corner hit (no legal destroyer)",
        height=10,
        width=10,
        hits=((0, 0),),
        misses=((0, 1), (1, 0)),
        remaining=(2,),
        mode=MODE_NORMAL,
    )


def builtin_scenarios() -> Tuple[Scenario, ...]:
    return (worked_example(), open_water(), contradictory_corner())
