"""Constants for KudosCard and Category field names"""


class KudosCardFields:
    """Field name constants for KudosCard documents"""
    ID = "id"
    RECIPIENT_NAME = "recipient_name"
    TEAM_ID = "team_id"
    CATEGORY_ID = "category_id"
    MESSAGE = "message"
    CREATED_BY = "created_by"
    SENT_BY = "sent_by"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    DELETED_AT = "deleted_at"


class CategoryFields:
    """Field name constants for Category documents"""
    ID = "id"
    NAME = "name"
