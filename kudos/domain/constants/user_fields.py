"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents (shared with the auth module)"""
    ID = "id"
    EMAIL = "email"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    ROLE = "role"
    JOB_TITLE = "job_title"
    APPROVAL_STATUS = "approval_status"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
