import enum
# =========================================================
# ENUMS
# =========================================================
class AlertProperty(str, enum.Enum):
    name = "name"
    date = "date"
    description = "description"
