"""Constants for Course model field names"""


class CourseFields:
    """Field name constants for Course model"""
    ID = "id"
    CREATOR_ID = "creator_id"
    TITLE = "title"
    DESCRIPTION = "description"
    PRICE = "price"
    IMAGE_URL = "image_url"

    # Fields an owner may change after creation
    MUTABLE = (TITLE, DESCRIPTION, PRICE, IMAGE_URL)

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
