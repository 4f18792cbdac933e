"""Status and type vocabulary stored in the database.

Values are the Arabic labels shown to end users; they are persisted as-is.
"""

# Property
PROPERTY_AVAILABLE = "متاح"

# Unit
UNIT_RENTED = "مؤجر"

# Contract / tenant
ACTIVE = "نشط"

# Payment
PAYMENT_DUE = "مستحقة"
PAYMENT_PAID = "مدفوعة"
PAYMENT_TYPE_RENT = "إيجار"

# Maintenance
MAINTENANCE_PENDING = "قيد الانتظار"
MAINTENANCE_SCHEDULED = "مجدولة"
MAINTENANCE_COMPLETED = "مكتملة"
MAINTENANCE_OPEN = (MAINTENANCE_PENDING, MAINTENANCE_SCHEDULED)
PRIORITY_MEDIUM = "medium"
PRIORITY_URGENT = "urgent"

# Rating
PRIVACY_PUBLIC = "public"

# Users: signup form label -> stored user_type
USER_TYPE_OWNER = "owner"
USER_TYPE_TENANT = "tenant"
USER_TYPE_LABELS = {
    "مالك عقار": USER_TYPE_OWNER,
    "مستأجر": USER_TYPE_TENANT,
    "مزود خدمة": "service_provider",
    "مدير عقارات": "property_manager",
}


def initial_maintenance_status(scheduled: bool) -> str:
    """A request created with a scheduled date starts as scheduled, otherwise pending."""
    return MAINTENANCE_SCHEDULED if scheduled else MAINTENANCE_PENDING
