"""Constants for Comment model field names"""


class CommentFields:
    """Field name constants for Comment documents"""
    ID = "id"
    KUDOS_CARD_ID = "kudos_card_id"
    USER_ID = "user_id"
    CONTENT = "content"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    DELETED_AT = "deleted_at"
