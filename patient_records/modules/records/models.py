import enum
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, CheckConstraint, DDL, event
from patient_records.core.base import Base, TimestampedMixin, NOW_MS

class RecordStatus(str, enum.Enum):
    INQUIRY = "Inquiry"
    ONBOARDING = "Onboarding"
    ACTIVE = "Active"
    CHURNED = "Churned"

STATUS_VALUES = tuple(s.value for s in RecordStatus)

class Record(Base, TimestampedMixin):
    __tablename__ = "patients"
    __table_args__ = (
        CheckConstraint(
            "status IN (" + ", ".join(f"'{v}'" for v in STATUS_VALUES) + ")",
            name="ck_patients_status",
        ),
        {"sqlite_autoincrement": True},
    )

    first_name: Mapped[str] = mapped_column("firstName", String)
    middle_name: Mapped[str | None] = mapped_column("middleName", String, nullable=True)
    last_name: Mapped[str] = mapped_column("lastName", String)
    date_of_birth: Mapped[str] = mapped_column("dateOfBirth", String)
    status: Mapped[str] = mapped_column(String)
    street: Mapped[str] = mapped_column(String)
    city: Mapped[str] = mapped_column(String)
    state: Mapped[str] = mapped_column(String)
    zip_code: Mapped[str] = mapped_column("zipCode", String)

# updatedAt is owned by the database, not the ORM. DDL text is %-formatted.
event.listen(
    Record.__table__,
    "after_create",
    DDL(
        "CREATE TRIGGER IF NOT EXISTS update_patients_updated_at "
        "AFTER UPDATE ON patients FOR EACH ROW "
        "BEGIN "
        f"UPDATE patients SET updatedAt = {NOW_MS.replace('%', '%%')} WHERE id = NEW.id; "
        "END"
    ),
)
