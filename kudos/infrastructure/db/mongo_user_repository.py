"""
MongoDB User Repository
=======================

Concrete implementation of AdminUserRepository and UserRepository using MongoDB.
User documents are written by the auth module; this repository reads them
and applies admin updates and deletions.
"""
import logging
import re
from typing import List, Optional

from pymongo import ReturnDocument

from kudos.domain.constants.user_fields import UserFields
from kudos.domain.exceptions import UserNotFoundError
from kudos.domain.models.role import ApprovalStatus, Role
from kudos.domain.models.user import User, UserSearchFilters
from kudos.domain.repositories.user_repository import AdminUserRepository, UserRepository
from kudos.infrastructure.db.mongo_connection import MongoConnection
from kudos.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class MongoUserRepository(AdminUserRepository, UserRepository):
    """MongoDB implementation of the user repositories."""

    COLLECTION_NAME = "users"

    def __init__(self, connection: MongoConnection, collection_name: str = COLLECTION_NAME):
        self._collection = connection.get_collection(collection_name)

    def _to_entity(self, doc: dict) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            id=doc.get(UserFields.ID),
            email=doc.get(UserFields.EMAIL, ""),
            first_name=doc.get(UserFields.FIRST_NAME, ""),
            last_name=doc.get(UserFields.LAST_NAME, ""),
            role=Role.parse(doc.get(UserFields.ROLE, Role.MEMBER)),
            job_title=doc.get(UserFields.JOB_TITLE) or "",
            approval_status=ApprovalStatus.parse(doc.get(UserFields.APPROVAL_STATUS, ApprovalStatus.PENDING)),
            created_at=doc.get(UserFields.CREATED_AT, now()),
            updated_at=doc.get(UserFields.UPDATED_AT, now()),
        )

    def _build_query(self, filters: UserSearchFilters) -> dict:
        query: dict = {}
        if filters.query:
            pattern = {"$regex": re.escape(filters.query), "$options": "i"}
            query["$or"] = [
                {UserFields.FIRST_NAME: pattern},
                {UserFields.LAST_NAME: pattern},
                {UserFields.EMAIL: pattern},
            ]
        if filters.role is not None:
            query[UserFields.ROLE] = int(filters.role)
        if filters.approval_status is not None:
            query[UserFields.APPROVAL_STATUS] = ApprovalStatus(filters.approval_status).value
        return query

    # ------------------------------------------------------------------
    # AdminUserRepository
    # ------------------------------------------------------------------

    async def find_pending_users(self, limit: int, offset: int) -> List[User]:
        """Find users awaiting approval, newest first."""
        cursor = (
            self._collection.find({UserFields.APPROVAL_STATUS: ApprovalStatus.PENDING.value})
            .sort(UserFields.CREATED_AT, -1)
            .skip(offset)
            .limit(limit)
        )
        docs = await cursor.to_list(None)
        return [self._to_entity(doc) for doc in docs]

    async def count_pending_users(self) -> int:
        return await self._collection.count_documents(
            {UserFields.APPROVAL_STATUS: ApprovalStatus.PENDING.value}
        )

    async def search_users(self, filters: UserSearchFilters) -> List[User]:
        """Find users matching the filters, newest first."""
        cursor = self._collection.find(self._build_query(filters)).sort(UserFields.CREATED_AT, -1)
        if filters.offset:
            cursor = cursor.skip(filters.offset)
        if filters.limit:
            cursor = cursor.limit(filters.limit)

        docs = await cursor.to_list(None)
        return [self._to_entity(doc) for doc in docs]

    async def count_users(self, filters: UserSearchFilters) -> int:
        return await self._collection.count_documents(self._build_query(filters))

    # ------------------------------------------------------------------
    # UserRepository
    # ------------------------------------------------------------------

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by its ID."""
        doc = await self._collection.find_one({UserFields.ID: user_id})
        if not doc:
            return None
        return self._to_entity(doc)

    async def update(self, user: User) -> User:
        """Update the editable profile fields of a user."""
        result = await self._collection.find_one_and_update(
            {UserFields.ID: user.id},
            {
                "$set": {
                    UserFields.EMAIL: user.email,
                    UserFields.FIRST_NAME: user.first_name,
                    UserFields.LAST_NAME: user.last_name,
                    UserFields.ROLE: int(user.role),
                    UserFields.JOB_TITLE: user.job_title,
                    UserFields.APPROVAL_STATUS: user.approval_status.value,
                    UserFields.UPDATED_AT: user.updated_at,
                }
            },
            return_document=ReturnDocument.AFTER,
        )

        if not result:
            raise UserNotFoundError(user.id)

        return self._to_entity(result)

    async def delete(self, user_id: str) -> bool:
        """Delete a user account."""
        result = await self._collection.delete_one({UserFields.ID: user_id})
        if result.deleted_count:
            logger.info("Deleted user %s", user_id)
        return result.deleted_count > 0
