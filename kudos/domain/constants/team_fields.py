"""Constants for Team model field names"""


class TeamFields:
    """Field name constants for Team documents"""
    ID = "id"
    NAME = "name"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    COUNTER_KEY = "teams"  # Sequence document in the counters collection
