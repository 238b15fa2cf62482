"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    AGE = "age"
    PASSWORD = "password"
    ROLE = "role"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    REQUIRED = (FIRST_NAME, LAST_NAME, EMAIL, AGE)

    # Fields matched by the list search
    SEARCHABLE = (FIRST_NAME, LAST_NAME)
