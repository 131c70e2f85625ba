"""Champion repository implementation."""
import logging

from domain.entities import ChampionCatalog
from domain.exceptions import MalformedResponse
from domain.interfaces import IChampionRepository
from infrastructure.api import DataDragonClient
from .fields import require_str

logger = logging.getLogger(__name__)


class ChampionRepository(IChampionRepository):
    """Champion names from Data Dragon: realm version first, then ``champion.json``."""

    def __init__(self, ddragon_client: DataDragonClient):
        self.ddragon_client = ddragon_client

    async def get_champion_catalog(self) -> ChampionCatalog:
        config = self.ddragon_client.config
        realm = config.region.friendly

        realm_data = await self.ddragon_client.get_realm(realm)
        try:
            version = require_str(realm_data['n'], 'champion')
        except (KeyError, TypeError) as e:
            logger.error(f"Error parsing realm {realm}: {e}")
            raise MalformedResponse() from e

        data = await self.ddragon_client.get_champions(version, config.champion_locale)
        try:
            names = {int(c['key']): require_str(c, 'name') for c in data['data'].values()}
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Error parsing champions {version}: {e}")
            raise MalformedResponse() from e

        logger.debug(f"Loaded {len(names)} champions for {version}")
        return ChampionCatalog(version=version, names=names)
