"""
MongoDB Reaction Repository
===========================

Concrete implementation of ReactionRepository using MongoDB.
"""
import uuid
from typing import List, Optional

from kudos.domain.constants.reaction_fields import ReactionFields
from kudos.domain.models.reaction import Reaction, ReactionCount, ReactionType
from kudos.domain.repositories.reaction_repository import ReactionRepository
from kudos.infrastructure.db.mongo_connection import MongoConnection
from kudos.utils.datetime_utils import now


class MongoReactionRepository(ReactionRepository):
    """MongoDB implementation of ReactionRepository. Removal is a hard delete."""

    COLLECTION_NAME = "reactions"

    def __init__(self, connection: MongoConnection, collection_name: str = COLLECTION_NAME):
        self._collection = connection.get_collection(collection_name)

    def _to_entity(self, doc: dict) -> Reaction:
        """Convert MongoDB document to Reaction entity."""
        return Reaction(
            id=doc.get(ReactionFields.ID),
            kudos_card_id=doc.get(ReactionFields.KUDOS_CARD_ID),
            user_id=doc.get(ReactionFields.USER_ID),
            type=ReactionType(doc.get(ReactionFields.TYPE)),
            created_at=doc.get(ReactionFields.CREATED_AT, now()),
        )

    def _to_document(self, reaction: Reaction) -> dict:
        """Convert Reaction entity to MongoDB document."""
        return {
            ReactionFields.ID: reaction.id,
            ReactionFields.KUDOS_CARD_ID: reaction.kudos_card_id,
            ReactionFields.USER_ID: reaction.user_id,
            ReactionFields.TYPE: reaction.type.value,
            ReactionFields.CREATED_AT: reaction.created_at,
        }

    async def add(self, reaction: Reaction) -> Reaction:
        """Add a new reaction."""
        reaction.id = str(uuid.uuid4())

        await self._collection.insert_one(self._to_document(reaction))
        return reaction

    async def remove(self, reaction_id: str) -> bool:
        """Delete a reaction document."""
        result = await self._collection.delete_one({ReactionFields.ID: reaction_id})
        return result.deleted_count > 0

    async def find_by_id(self, reaction_id: str) -> Optional[Reaction]:
        """Find a reaction by its ID."""
        doc = await self._collection.find_one({ReactionFields.ID: reaction_id})
        if not doc:
            return None
        return self._to_entity(doc)

    async def find_by_user_and_type(
        self,
        kudos_card_id: str,
        user_id: str,
        reaction_type: ReactionType,
    ) -> Optional[Reaction]:
        """Find a user's reaction of one type on a kudos card."""
        doc = await self._collection.find_one(
            {
                ReactionFields.KUDOS_CARD_ID: kudos_card_id,
                ReactionFields.USER_ID: user_id,
                ReactionFields.TYPE: ReactionType(reaction_type).value,
            }
        )
        if not doc:
            return None
        return self._to_entity(doc)

    async def find_by_kudos_card_id(self, kudos_card_id: str) -> List[Reaction]:
        """Find all reactions of a kudos card, oldest first."""
        cursor = self._collection.find({ReactionFields.KUDOS_CARD_ID: kudos_card_id}).sort(
            ReactionFields.CREATED_AT, 1
        )
        docs = await cursor.to_list(None)
        return [self._to_entity(doc) for doc in docs]

    async def count_by_type(self, kudos_card_id: str) -> List[ReactionCount]:
        """Count the reactions of a kudos card per type."""
        pipeline = [
            {"$match": {ReactionFields.KUDOS_CARD_ID: kudos_card_id}},
            {"$group": {"_id": f"${ReactionFields.TYPE}", "count": {"$sum": 1}}},
            {"$sort": {"count": -1, "_id": 1}},
        ]
        cursor = await self._collection.aggregate(pipeline)
        rows = await cursor.to_list(None)
        return [ReactionCount(type=ReactionType(row["_id"]), count=row["count"]) for row in rows]
