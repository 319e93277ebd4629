import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import pandas as pd

from ..models.navdata import NavDatabase, NavEntity, EntityType
from ..models.position import Position

logger = logging.getLogger(__name__)

POINT_TYPES = {
    'fix': EntityType.FIX,
    'vor': EntityType.VOR,
    'ndb': EntityType.NDB,
    'airport': EntityType.AIRPORT,
}
AIRWAY_TYPES = {
    'low': EntityType.LOW_AIRWAY,
    'high': EntityType.HIGH_AIRWAY,
}
PROCEDURE_TYPES = {
    'sid': EntityType.SID,
    'star': EntityType.STAR,
}


class TabularNavSource:
    """
    Build a NavDatabase from tabular navigation data.

    Expected columns:
        points: type (fix/vor/ndb/airport), name, latitude_deg, longitude_deg
        runways: airport_ident, le_ident, le_latitude_deg, le_longitude_deg,
            he_ident, he_latitude_deg, he_longitude_deg
        airways: type (low/high), name, [segment], sequence, latitude_deg, longitude_deg
        procedures: type (sid/star), airport_ident, runway, name, sequence,
            latitude_deg, longitude_deg

    Airway and procedure rows are grouped into one entity per path and ordered
    by `sequence`.
    """

    FILES = ('points', 'runways', 'airways', 'procedures')

    def __init__(
        self,
        points: Optional[pd.DataFrame] = None,
        runways: Optional[pd.DataFrame] = None,
        airways: Optional[pd.DataFrame] = None,
        procedures: Optional[pd.DataFrame] = None,
    ):
        self.points = points
        self.runways = runways
        self.airways = airways
        self.procedures = procedures

    @classmethod
    def load_directory(cls, directory: Union[str, Path]) -> 'TabularNavSource':
        """
        Read points.csv, runways.csv, airways.csv and procedures.csv from a
        directory. Missing files are treated as empty.
        """
        directory = Path(directory)
        frames = {}
        for name in cls.FILES:
            path = directory / f'{name}.csv'
            if path.exists():
                logger.info(f"Loading {path}")
                frames[name] = pd.read_csv(path, encoding='utf-8-sig', dtype=str)
            else:
                logger.debug(f"No {path}, skipping")
        return cls(**frames)

    def _safe_get(self, row: pd.Series, key: str) -> Any:
        """
        Safely get a value from a pandas Series, converting nan to None.
        """
        value = row.get(key)
        if pd.isna(value):
            return None
        return value

    def _position(self, row: pd.Series, prefix: str = '') -> Optional[Position]:
        lat = self._safe_get(row, f'{prefix}latitude_deg')
        lon = self._safe_get(row, f'{prefix}longitude_deg')
        if lat is None or lon is None:
            return None
        return Position(float(lat), float(lon))

    def build(self) -> NavDatabase:
        """Create the NavDatabase from all available frames."""
        navdata = NavDatabase()
        navdata.extend(self._build_points())
        navdata.extend(self._build_runways())
        navdata.extend(self._build_paths(self.airways, AIRWAY_TYPES, ['type', 'name', 'segment']))
        navdata.extend(self._build_paths(self.procedures, PROCEDURE_TYPES, ['type', 'airport_ident', 'runway', 'name']))
        logger.info(f"Built navigation database with {len(navdata)} entities")
        return navdata

    def _build_points(self) -> List[NavEntity]:
        entities = []
        if self.points is None:
            return entities

        for _, row in self.points.iterrows():
            entity_type = POINT_TYPES.get(str(self._safe_get(row, 'type') or '').lower())
            name = self._safe_get(row, 'name')
            position = self._position(row)
            if entity_type is None or name is None or position is None:
                logger.warning(f"Skipping point row {row.to_dict()}")
                continue
            entities.append(NavEntity(entity_type, str(name), [position]))
        return entities

    def _build_runways(self) -> List[NavEntity]:
        entities = []
        if self.runways is None:
            return entities

        for _, row in self.runways.iterrows():
            airport = self._safe_get(row, 'airport_ident')
            le_position = self._position(row, 'le_')
            he_position = self._position(row, 'he_')
            if airport is None or le_position is None or he_position is None:
                logger.warning(f"Skipping runway row {row.to_dict()}")
                continue
            le_ident = str(self._safe_get(row, 'le_ident') or '')
            he_ident = str(self._safe_get(row, 'he_ident') or '')
            entities.append(NavEntity(
                EntityType.RUNWAY,
                f'{le_ident}/{he_ident}',
                [le_position, he_position],
                airport_name=str(airport),
                runway_names=(le_ident, he_ident),
            ))
        return entities

    def _build_paths(self, frame: Optional[pd.DataFrame], types: dict, keys: List[str]) -> List[NavEntity]:
        """Group ordered rows into airway or procedure entities."""
        entities = []
        if frame is None or frame.empty:
            return entities

        frame = frame.copy()
        for key in keys:
            if key not in frame.columns:
                frame[key] = ''
        frame[keys] = frame[keys].fillna('')
        has_sequence = 'sequence' in frame.columns
        if has_sequence:
            frame['sequence'] = pd.to_numeric(frame['sequence'])

        # Paths keep the order in which they first appear
        for group_key, group in frame.groupby(keys, sort=False):
            fields = dict(zip(keys, group_key))
            if has_sequence:
                group = group.sort_values('sequence', kind='stable')
            entity_type = types.get(str(fields['type']).lower())
            if entity_type is None or not fields['name']:
                logger.warning(f"Skipping path {fields}")
                continue

            positions = []
            for _, row in group.iterrows():
                position = self._position(row)
                if position is None:
                    logger.warning(f"Skipping row without coordinates in {fields['name']}")
                    continue
                positions.append(position)

            entities.append(NavEntity(
                entity_type,
                str(fields['name']),
                positions,
                airport_name=(str(fields['airport_ident']) or None) if 'airport_ident' in fields else None,
                runway_names=(str(fields['runway']),) if 'runway' in fields else (),
            ))
        return entities
