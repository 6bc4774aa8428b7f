"""Constants for Purchase model field names"""


class PurchaseFields:
    """Field name constants for Purchase model"""
    ID = "id"
    USER_ID = "user_id"
    COURSE_ID = "course_id"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
