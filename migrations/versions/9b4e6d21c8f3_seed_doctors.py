"""seed_doctors

Revision ID: 9b4e6d21c8f3
Revises: 3c1f0a9d2b7e
Create Date: 2026-09-28 10:40:02.118934

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9b4e6d21c8f3"
down_revision: Union[str, Sequence[str], None] = "3c1f0a9d2b7e"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# (name, specialization, years of experience, rating in tenths, bio, next available)
DOCTORS = [
    (
        "Dr. Sarah Chen",
        "Anxiety & Depression",
        12,
        49,
        "Cognitive behavioural therapist focused on anxiety, panic and low mood.",
        "Tomorrow, 10:00 AM",
    ),
    (
        "Dr. Michael Rodriguez",
        "Trauma & PTSD",
        15,
        48,
        "Trauma-informed psychiatrist experienced with EMDR and long-term recovery.",
        "Today, 3:00 PM",
    ),
    (
        "Dr. Emily Watson",
        "Relationship Counseling",
        8,
        47,
        "Couples and family counsellor helping people rebuild communication.",
        "Friday, 2:00 PM",
    ),
    (
        "Dr. James Park",
        "Addiction Recovery",
        10,
        46,
        "Addiction specialist supporting recovery from substance and behavioural dependence.",
        "Monday, 9:00 AM",
    ),
    (
        "Dr. Aisha Bello",
        "Child & Adolescent",
        9,
        49,
        "Child psychologist working with young people and their families.",
        "Thursday, 11:30 AM",
    ),
    (
        "Dr. Lukas Meyer",
        "Stress Management",
        6,
        45,
        "Helps professionals manage burnout, stress and sleep problems.",
        "Wednesday, 4:00 PM",
    ),
]


def upgrade() -> None:
    """Seed the starter doctor directory."""
    doctors_table = sa.table(
        "doctors",
        sa.column("name", sa.String),
        sa.column("specialization", sa.String),
        sa.column("experience", sa.Integer),
        sa.column("rating", sa.Integer),
        sa.column("bio", sa.Text),
        sa.column("is_available", sa.Boolean),
        sa.column("next_available", sa.String),
    )

    op.bulk_insert(
        doctors_table,
        [
            {
                "name": name,
                "specialization": specialization,
                "experience": experience,
                "rating": rating,
                "bio": bio,
                "is_available": True,
                "next_available": next_available,
            }
            for name, specialization, experience, rating, bio, next_available in DOCTORS
        ],
    )


def downgrade() -> None:
    """Remove seeded doctors."""
    doctors_table = sa.table("doctors", sa.column("name", sa.String))
    op.execute(
        doctors_table.delete().where(
            doctors_table.c.name.in_([doctor[0] for doctor in DOCTORS])
        )
    )
