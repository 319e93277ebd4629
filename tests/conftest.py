import pytest
from pathlib import Path
from types import SimpleNamespace

from route_plotter.models.navdata import NavDatabase, NavEntity, EntityType
from route_plotter.models.position import Position

# A small world on a grid so expected coordinates are easy to read:
# airway UL1 runs A -> B -> C -> D -> E along 50N.
A = Position(50.0, 0.0)
B = Position(50.0, 1.0)
C = Position(50.0, 2.0)
D = Position(50.0, 3.0)
E = Position(50.0, 4.0)
WOD = Position(51.45, -0.87)
DUP_FIRST = Position(48.0, 2.0)
DUP_SECOND = Position(52.0, 5.0)

EGLL = Position(51.4775, -0.4614)
EGLL_09R = Position(51.4647, -0.4822)
EGLL_27L = Position(51.4650, -0.4340)
EGKK = Position(51.1481, -0.1903)

SID_START = Position(51.465, -0.5)
SID_TURN = Position(51.2, -0.3)
STAR_TURN = Position(50.5, 1.0)


def make_navdata() -> NavDatabase:
    return NavDatabase([
        NavEntity(EntityType.AIRPORT, 'EGLL', [EGLL]),
        NavEntity(EntityType.AIRPORT, 'EGKK', [EGKK]),
        NavEntity(EntityType.RUNWAY, '09R/27L', [EGLL_09R, EGLL_27L],
                  airport_name='EGLL', runway_names=('09R', '27L')),
        NavEntity(EntityType.FIX, 'A', [A]),
        NavEntity(EntityType.FIX, 'B', [B]),
        NavEntity(EntityType.VOR, 'C', [C]),
        NavEntity(EntityType.NDB, 'D', [D]),
        NavEntity(EntityType.FIX, 'E', [E]),
        NavEntity(EntityType.VOR, 'WOD', [WOD]),
        NavEntity(EntityType.FIX, 'DUP', [DUP_FIRST]),
        NavEntity(EntityType.FIX, 'DUP', [DUP_SECOND]),
        NavEntity(EntityType.LOW_AIRWAY, 'UL1', [A, B, C]),
        NavEntity(EntityType.LOW_AIRWAY, 'UL1', [C, D, E]),
        NavEntity(EntityType.SID, 'AAA1X', [SID_START, SID_TURN, A],
                  airport_name='EGLL', runway_names=('27L',)),
        NavEntity(EntityType.SID, 'AAA1X', [EGLL_09R, A],
                  airport_name='EGLL', runway_names=('09R',)),
        NavEntity(EntityType.STAR, 'DDD1A', [D, STAR_TURN],
                  airport_name='EGKK', runway_names=('',)),
    ])


@pytest.fixture
def navdata() -> NavDatabase:
    """Return the grid navigation database."""
    return make_navdata()


@pytest.fixture
def world() -> SimpleNamespace:
    """Return the positions used by the grid navigation database."""
    return SimpleNamespace(
        A=A, B=B, C=C, D=D, E=E, WOD=WOD,
        DUP_FIRST=DUP_FIRST, DUP_SECOND=DUP_SECOND,
        EGLL=EGLL, EGLL_09R=EGLL_09R, EGLL_27L=EGLL_27L, EGKK=EGKK,
        SID_START=SID_START, SID_TURN=SID_TURN, STAR_TURN=STAR_TURN,
    )


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def csv_navdata_dir(test_assets_dir) -> Path:
    """Return the directory with the CSV navigation data."""
    return test_assets_dir / 'csv'
