"""
MongoDB Team Repository
=======================

Concrete implementation of TeamRepository using MongoDB.
"""
import logging
from typing import List, Optional

from pymongo import ReturnDocument

from kudos.domain.constants.kudos_card_fields import KudosCardFields
from kudos.domain.constants.team_fields import TeamFields
from kudos.domain.exceptions import TeamInUseError, TeamNotFoundError
from kudos.domain.models.team import Team
from kudos.domain.repositories.team_repository import TeamRepository
from kudos.infrastructure.db.mongo_connection import MongoConnection
from kudos.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class MongoTeamRepository(TeamRepository):
    """
    MongoDB implementation of TeamRepository.

    Team ids are integers drawn from a sequence document in the counters
    collection, so they stay compatible with the ids stored on kudos cards.
    """

    COLLECTION_NAME = "teams"
    KUDOS_CARDS_COLLECTION_NAME = "kudos_cards"
    COUNTERS_COLLECTION_NAME = "counters"

    def __init__(
        self,
        connection: MongoConnection,
        collection_name: str = COLLECTION_NAME,
        kudos_cards_collection_name: str = KUDOS_CARDS_COLLECTION_NAME,
        counters_collection_name: str = COUNTERS_COLLECTION_NAME,
    ):
        self._collection = connection.get_collection(collection_name)
        self._kudos_cards = connection.get_collection(kudos_cards_collection_name)
        self._counters = connection.get_collection(counters_collection_name)

    def _to_entity(self, doc: dict) -> Team:
        """Convert MongoDB document to Team entity."""
        return Team(
            id=doc.get(TeamFields.ID),
            name=doc.get(TeamFields.NAME, ""),
            created_at=doc.get(TeamFields.CREATED_AT, now()),
            updated_at=doc.get(TeamFields.UPDATED_AT, now()),
        )

    def _to_document(self, team: Team) -> dict:
        """Convert Team entity to MongoDB document."""
        return {
            TeamFields.ID: team.id,
            TeamFields.NAME: team.name,
            TeamFields.CREATED_AT: team.created_at,
            TeamFields.UPDATED_AT: team.updated_at,
        }

    async def _next_id(self) -> int:
        counter = await self._counters.find_one_and_update(
            {TeamFields.MONGO_ID: TeamFields.COUNTER_KEY},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(counter["seq"])

    async def find_all(self) -> List[Team]:
        """Find all teams ordered by name."""
        cursor = self._collection.find({}).sort(TeamFields.NAME, 1)
        docs = await cursor.to_list(None)
        return [self._to_entity(doc) for doc in docs]

    async def find_by_id(self, team_id: int) -> Optional[Team]:
        """Find a team by its ID."""
        doc = await self._collection.find_one({TeamFields.ID: team_id})
        if not doc:
            return None
        return self._to_entity(doc)

    async def create(self, team: Team) -> Team:
        """Create a new team."""
        team.id = await self._next_id()

        await self._collection.insert_one(self._to_document(team))
        return team

    async def update(self, team: Team) -> Team:
        """Update an existing team."""
        doc = self._to_document(team)
        result = await self._collection.find_one_and_update(
            {TeamFields.ID: team.id},
            {"$set": {k: v for k, v in doc.items() if k not in (TeamFields.ID, TeamFields.CREATED_AT)}},
            return_document=ReturnDocument.AFTER,
        )

        if not result:
            raise TeamNotFoundError(team.id)

        return self._to_entity(result)

    async def delete(self, team_id: int) -> bool:
        """Delete a team that no kudos card references."""
        references = await self._kudos_cards.count_documents({KudosCardFields.TEAM_ID: team_id})
        if references > 0:
            logger.info("Refusing to delete team %s: %d kudos cards reference it", team_id, references)
            raise TeamInUseError(team_id)

        result = await self._collection.delete_one({TeamFields.ID: team_id})
        return result.deleted_count > 0
