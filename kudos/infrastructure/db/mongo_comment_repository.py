"""
MongoDB Comment Repository
==========================

Concrete implementation of CommentRepository using MongoDB.
"""
import logging
import uuid
from typing import List, Optional

from pymongo import ReturnDocument

from kudos.domain.constants.comment_fields import CommentFields
from kudos.domain.models.comment import Comment
from kudos.domain.repositories.comment_repository import CommentRepository
from kudos.infrastructure.db.mongo_connection import MongoConnection
from kudos.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class MongoCommentRepository(CommentRepository):
    """
    MongoDB implementation of CommentRepository.

    Deleted comments keep their document with deleted_at set; every read
    except find_by_kudos_card_id(include_deleted=True) filters them out.
    """

    COLLECTION_NAME = "comments"

    def __init__(self, connection: MongoConnection, collection_name: str = COLLECTION_NAME):
        self._collection = connection.get_collection(collection_name)

    def _to_entity(self, doc: dict) -> Comment:
        """Convert MongoDB document to Comment entity."""
        return Comment(
            id=doc.get(CommentFields.ID),
            kudos_card_id=doc.get(CommentFields.KUDOS_CARD_ID),
            user_id=doc.get(CommentFields.USER_ID),
            content=doc.get(CommentFields.CONTENT, ""),
            created_at=doc.get(CommentFields.CREATED_AT, now()),
            updated_at=doc.get(CommentFields.UPDATED_AT, now()),
            deleted_at=doc.get(CommentFields.DELETED_AT),
        )

    def _to_document(self, comment: Comment) -> dict:
        """Convert Comment entity to MongoDB document."""
        return {
            CommentFields.ID: comment.id,
            CommentFields.KUDOS_CARD_ID: comment.kudos_card_id,
            CommentFields.USER_ID: comment.user_id,
            CommentFields.CONTENT: comment.content,
            CommentFields.CREATED_AT: comment.created_at,
            CommentFields.UPDATED_AT: comment.updated_at,
            CommentFields.DELETED_AT: comment.deleted_at,
        }

    async def add(self, comment: Comment) -> Comment:
        """Add a new comment."""
        comment.id = str(uuid.uuid4())

        await self._collection.insert_one(self._to_document(comment))
        return comment

    async def update(self, comment: Comment) -> Optional[Comment]:
        """Persist the content of an existing comment."""
        result = await self._collection.find_one_and_update(
            {CommentFields.ID: comment.id, CommentFields.DELETED_AT: None},
            {
                "$set": {
                    CommentFields.CONTENT: comment.content,
                    CommentFields.UPDATED_AT: comment.updated_at,
                }
            },
            return_document=ReturnDocument.AFTER,
        )
        if not result:
            return None
        return self._to_entity(result)

    async def soft_delete(self, comment_id: str) -> bool:
        """Set deleted_at on a live comment."""
        timestamp = now()
        result = await self._collection.update_one(
            {CommentFields.ID: comment_id, CommentFields.DELETED_AT: None},
            {
                "$set": {
                    CommentFields.DELETED_AT: timestamp,
                    CommentFields.UPDATED_AT: timestamp,
                }
            },
        )
        return result.modified_count > 0

    async def find_by_id(self, comment_id: str) -> Optional[Comment]:
        """Find a live comment by its ID."""
        doc = await self._collection.find_one({CommentFields.ID: comment_id, CommentFields.DELETED_AT: None})
        if not doc:
            return None
        return self._to_entity(doc)

    async def find_by_kudos_card_id(
        self,
        kudos_card_id: str,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find the comments of a kudos card, oldest first."""
        query = {CommentFields.KUDOS_CARD_ID: kudos_card_id}
        if not include_deleted:
            query[CommentFields.DELETED_AT] = None

        cursor = self._collection.find(query).sort(CommentFields.CREATED_AT, 1)
        docs = await cursor.to_list(None)
        return [self._to_entity(doc) for doc in docs]

    async def count_by_kudos_card_id(self, kudos_card_id: str) -> int:
        """Count the live comments of a kudos card."""
        return await self._collection.count_documents(
            {CommentFields.KUDOS_CARD_ID: kudos_card_id, CommentFields.DELETED_AT: None}
        )
