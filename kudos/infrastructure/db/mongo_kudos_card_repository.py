"""
MongoDB Kudos Card Repository
=============================

Read access to the kudos_cards collection: existence checks and the
ranked aggregations used by analytics.
"""
import logging
from typing import Any, Dict, List, Optional

from kudos.domain.constants.kudos_card_fields import CategoryFields, KudosCardFields
from kudos.domain.constants.team_fields import TeamFields
from kudos.domain.models.analytics import CategoryCount, KeywordCount, RecipientCount, TeamCount
from kudos.domain.models.kudos_card import KudosCard
from kudos.domain.repositories.kudos_card_repository import KudosCardRepository
from kudos.infrastructure.db.mongo_connection import MongoConnection
from kudos.utils.datetime_utils import now, period_start

logger = logging.getLogger(__name__)

KEYWORD_MIN_LENGTH = 4
KEYWORD_STOPWORDS = [
    "this", "that", "with", "from", "have", "were", "they", "their",
    "your", "thank", "thanks", "for", "and", "the", "are", "was",
]


class MongoKudosCardRepository(KudosCardRepository):
    """MongoDB implementation of KudosCardRepository."""

    COLLECTION_NAME = "kudos_cards"
    TEAMS_COLLECTION_NAME = "teams"
    CATEGORIES_COLLECTION_NAME = "categories"

    def __init__(
        self,
        connection: MongoConnection,
        collection_name: str = COLLECTION_NAME,
        teams_collection_name: str = TEAMS_COLLECTION_NAME,
        categories_collection_name: str = CATEGORIES_COLLECTION_NAME,
    ):
        self._collection = connection.get_collection(collection_name)
        self._teams_collection_name = teams_collection_name
        self._categories_collection_name = categories_collection_name

    def _to_entity(self, doc: dict) -> KudosCard:
        """Convert MongoDB document to KudosCard entity."""
        return KudosCard(
            id=doc.get(KudosCardFields.ID),
            recipient_name=doc.get(KudosCardFields.RECIPIENT_NAME, ""),
            team_id=doc.get(KudosCardFields.TEAM_ID),
            category_id=doc.get(KudosCardFields.CATEGORY_ID),
            message=doc.get(KudosCardFields.MESSAGE, ""),
            created_by=doc.get(KudosCardFields.CREATED_BY),
            sent_by=doc.get(KudosCardFields.SENT_BY),
            created_at=doc.get(KudosCardFields.CREATED_AT, now()),
            updated_at=doc.get(KudosCardFields.UPDATED_AT, now()),
            deleted_at=doc.get(KudosCardFields.DELETED_AT),
        )

    def _match_stage(self, period: Optional[str]) -> Dict[str, Any]:
        """Live cards, optionally restricted to the period window."""
        match: Dict[str, Any] = {KudosCardFields.DELETED_AT: None}
        if period:
            match[KudosCardFields.CREATED_AT] = {"$gte": period_start(period)}
        return {"$match": match}

    async def _aggregate(self, pipeline: List[Dict[str, Any]]) -> List[dict]:
        logger.debug("kudos_cards aggregation: %s", pipeline)
        cursor = await self._collection.aggregate(pipeline)
        return await cursor.to_list(None)

    async def find_by_id(self, kudos_card_id: str) -> Optional[KudosCard]:
        """Find a live kudos card by its ID."""
        doc = await self._collection.find_one(
            {KudosCardFields.ID: kudos_card_id, KudosCardFields.DELETED_AT: None}
        )
        if not doc:
            return None
        return self._to_entity(doc)

    async def get_top_recipients(self, limit: int, period: Optional[str] = None) -> List[RecipientCount]:
        pipeline = [
            self._match_stage(period),
            {"$group": {"_id": f"${KudosCardFields.RECIPIENT_NAME}", "count": {"$sum": 1}}},
            {"$sort": {"count": -1}},
            {"$limit": limit},
        ]
        rows = await self._aggregate(pipeline)
        return [RecipientCount(recipient_name=row["_id"], count=row["count"]) for row in rows]

    async def get_top_teams(self, limit: int, period: Optional[str] = None) -> List[TeamCount]:
        pipeline = [
            self._match_stage(period),
            {
                "$lookup": {
                    "from": self._teams_collection_name,
                    "localField": KudosCardFields.TEAM_ID,
                    "foreignField": TeamFields.ID,
                    "as": "team",
                }
            },
            {"$unwind": "$team"},
            {
                "$group": {
                    "_id": {"id": f"${KudosCardFields.TEAM_ID}", "name": f"$team.{TeamFields.NAME}"},
                    "count": {"$sum": 1},
                }
            },
            {"$sort": {"count": -1}},
            {"$limit": limit},
        ]
        rows = await self._aggregate(pipeline)
        return [
            TeamCount(team_id=row["_id"]["id"], team_name=row["_id"]["name"], count=row["count"])
            for row in rows
        ]

    async def get_trending_categories(self, limit: int, period: Optional[str] = None) -> List[CategoryCount]:
        pipeline = [
            self._match_stage(period),
            {
                "$lookup": {
                    "from": self._categories_collection_name,
                    "localField": KudosCardFields.CATEGORY_ID,
                    "foreignField": CategoryFields.ID,
                    "as": "category",
                }
            },
            {"$unwind": "$category"},
            {
                "$group": {
                    "_id": {"id": f"${KudosCardFields.CATEGORY_ID}", "name": f"$category.{CategoryFields.NAME}"},
                    "count": {"$sum": 1},
                }
            },
            {"$sort": {"count": -1}},
            {"$limit": limit},
        ]
        rows = await self._aggregate(pipeline)
        return [
            CategoryCount(category_id=row["_id"]["id"], category_name=row["_id"]["name"], count=row["count"])
            for row in rows
        ]

    async def get_trending_keywords(self, limit: int, period: Optional[str] = None) -> List[KeywordCount]:
        pipeline = [
            self._match_stage(period),
            {
                "$project": {
                    "word": {
                        "$map": {
                            "input": {
                                "$regexFindAll": {
                                    "input": {"$toLower": f"${KudosCardFields.MESSAGE}"},
                                    "regex": r"\S+",
                                }
                            },
                            "in": "$$this.match",
                        }
                    }
                }
            },
            {"$unwind": "$word"},
            {
                "$match": {
                    "$expr": {"$gte": [{"$strLenCP": "$word"}, KEYWORD_MIN_LENGTH]},
                    "word": {"$nin": KEYWORD_STOPWORDS},
                }
            },
            {"$group": {"_id": "$word", "count": {"$sum": 1}}},
            {"$sort": {"count": -1}},
            {"$limit": limit},
        ]
        rows = await self._aggregate(pipeline)
        return [KeywordCount(keyword=row["_id"], count=row["count"]) for row in rows]
