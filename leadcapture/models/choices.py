"""
Fixed vocabularies shared by models, validation and scoring.
"""


class Budget:
    UNDER_5K = "under_5k"
    FROM_5K_TO_15K = "5k_15k"
    FROM_15K_TO_50K = "15k_50k"
    FROM_50K_TO_100K = "50k_100k"
    OVER_100K = "100k_plus"
    NOT_SURE = "not_sure"

    ALL = (UNDER_5K, FROM_5K_TO_15K, FROM_15K_TO_50K, FROM_50K_TO_100K, OVER_100K, NOT_SURE)


class Timeline:
    ASAP = "asap"
    ONE_MONTH = "1_month"
    THREE_MONTHS = "3_months"
    SIX_MONTHS = "6_months"
    ONE_YEAR = "1_year"
    FLEXIBLE = "flexible"

    ALL = (ASAP, ONE_MONTH, THREE_MONTHS, SIX_MONTHS, ONE_YEAR, FLEXIBLE)


class BusinessSize:
    ALL = ("1-10", "11-50", "51-200", "201-500", "500+")


# Services a consultation visitor can tick
class InterestedService:
    ALL = (
        "ai_websites",
        "smart_chatbots",
        "email_marketing",
        "social_media_automation",
        "custom_ai_solutions",
        "consultation_only",
    )


# Service types an inquiry can be made for
class ServiceType:
    AI_WEBSITE = "ai_website"
    SMART_CHATBOT = "smart_chatbot"
    EMAIL_MARKETING = "email_marketing"
    SOCIAL_MEDIA_AUTOMATION = "social_media_automation"
    CUSTOM_AI_SOLUTION = "custom_ai_solution"
    CONSULTATION = "consultation"

    ALL = (
        AI_WEBSITE,
        SMART_CHATBOT,
        EMAIL_MARKETING,
        SOCIAL_MEDIA_AUTOMATION,
        CUSTOM_AI_SOLUTION,
        CONSULTATION,
    )


class Priority:
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class ContactStatus:
    NEW = "new"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"

    ALL = (NEW, IN_PROGRESS, RESOLVED, CLOSED)


class ConsultationStatus:
    PENDING = "pending"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"

    ALL = (PENDING, SCHEDULED, COMPLETED, CANCELLED, NO_SHOW)


class InquiryStatus:
    NEW = "new"
    REVIEWING = "reviewing"
    QUOTED = "quoted"
    APPROVED = "approved"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    ALL = (NEW, REVIEWING, QUOTED, APPROVED, IN_PROGRESS, COMPLETED, CANCELLED)
