"""Constants for UsageLogEntry field names"""


class UsageLogFields:
    """Field name constants for UsageLogEntry model"""
    DEVICE_ID = "device_id"
    ACTION = "action"
    TIMESTAMP = "timestamp"
    SEQUENCE = "sequence"

    # MongoDB specific
    MONGO_ID = "_id"
    COUNTER_VALUE = "value"
    COUNTER_KEY = "usage_log_sequence"
