"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    EMAIL = "email"
    # Holds the bcrypt hash, never plaintext
    PASSWORD = "password"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
