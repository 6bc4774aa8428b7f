"""Constants for Principal model field names"""


class PrincipalFields:
    """Field name constants for Principal model"""
    ID = "id"
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
