"""Constants for Reaction model field names"""


class ReactionFields:
    """Field name constants for Reaction documents"""
    ID = "id"
    KUDOS_CARD_ID = "kudos_card_id"
    USER_ID = "user_id"
    TYPE = "type"
    CREATED_AT = "created_at"
