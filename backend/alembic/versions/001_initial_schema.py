"""Initial schema — languages, users, projects, project_languages, identifiers,
translations, revisions. Seeds the default languages.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_LANGUAGES = [
    {"iso_code": "en", "name": "English"},
    {"iso_code": "de", "name": "German"},
    {"iso_code": "es", "name": "Spanish"},
    {"iso_code": "fr", "name": "French"},
]


def upgrade() -> None:
    languages = op.create_table(
        "languages",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("iso_code", sa.String(16), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
    )
    op.create_index("ix_languages_iso_code", "languages", ["iso_code"], unique=True)

    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("mail", sa.String(255), nullable=False),
        sa.Column("admin", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "projects",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("archived", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("base_language_id", sa.Integer, sa.ForeignKey("languages.id"), nullable=False),
    )
    op.create_index("ix_projects_name", "projects", ["name"])

    op.create_table(
        "project_languages",
        sa.Column("position", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "project_id", sa.Integer,
            sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "language_id", sa.Integer,
            sa.ForeignKey("languages.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.UniqueConstraint(
            "project_id", "language_id", name="uq_project_languages_project_language",
        ),
    )

    op.create_table(
        "identifiers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("identifier", sa.String(255), nullable=False),
        sa.Column(
            "project_id", sa.Integer,
            sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False,
        ),
    )
    op.create_index("ix_identifiers_project_id", "identifiers", ["project_id"])

    op.create_table(
        "translations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("translation", sa.Text, nullable=False, server_default=""),
        sa.Column(
            "identifier_id", sa.Integer,
            sa.ForeignKey("identifiers.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("language_id", sa.Integer, sa.ForeignKey("languages.id"), nullable=False),
        sa.Column("approved", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("improvement_needed", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_translations_identifier_id", "translations", ["identifier_id"])

    op.create_table(
        "revisions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "translation_id", sa.Integer,
            sa.ForeignKey("translations.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("revision_translation", sa.Text, nullable=False),
        sa.Column("approved", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_revisions_translation_id", "revisions", ["translation_id"])

    op.bulk_insert(languages, DEFAULT_LANGUAGES)


def downgrade() -> None:
    op.drop_table("revisions")
    op.drop_table("translations")
    op.drop_table("identifiers")
    op.drop_table("project_languages")
    op.drop_table("projects")
    op.drop_table("users")
    op.drop_table("languages")
