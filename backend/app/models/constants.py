"""Status and category values shared by the models and services."""


class ScanStatus:
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class RemovalStatus:
    PENDING = "pending"
    SUBMITTED = "submitted"
    IN_PROGRESS = "in-progress"
    ACTION_REQUIRED = "action-required"
    COMPLETED = "completed"
    FAILED = "failed"

    ALL = (PENDING, SUBMITTED, IN_PROGRESS, ACTION_REQUIRED, COMPLETED, FAILED)


class ActionRequired:
    EMAIL_VERIFICATION = "email-verification"
    ID_VERIFICATION = "id-verification"


class BrokerPriority:
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    ALL = (HIGH, MEDIUM, LOW)


class BrokerCategory:
    PEOPLE_SEARCH = "people-search"
    MARKETING = "marketing"
    CREDIT = "credit"
    PUBLIC_RECORDS = "public-records"

    ALL = (PEOPLE_SEARCH, MARKETING, CREDIT, PUBLIC_RECORDS)
