"""init schema

Revision ID: 0001_init
Revises: 
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=30), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table('prospective_tenant_applications',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('applicant_email', sa.String(length=255), nullable=False),
        sa.Column('applicant_name', sa.String(length=200), nullable=False),
        sa.Column('phone_number', sa.String(length=30), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('employment_status', sa.String(length=20), nullable=False),
        sa.Column('employer_name', sa.String(length=200), nullable=True),
        sa.Column('family_size', sa.Integer(), nullable=False),
        sa.Column('desired_accommodation_type', sa.String(length=20), nullable=False),
        sa.Column('previous_address', sa.String(length=512), nullable=False),
        sa.Column('reason_for_leaving', sa.Text(), nullable=False),
        sa.Column('yearly_rent_capacity', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('application_status', sa.String(length=20), nullable=False),
        sa.Column('review_notes', sa.Text(), nullable=True),
        sa.Column('reviewed_at', sa.DateTime(), nullable=True),
        sa.Column('reviewed_by', sa.Integer(), nullable=True),
        sa.Column('submitted_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['reviewed_by'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_prospective_tenant_applications_applicant_email',
                    'prospective_tenant_applications', ['applicant_email'], unique=True)
    op.create_index('ix_prospective_tenant_applications_application_status',
                    'prospective_tenant_applications', ['application_status'], unique=False)
    op.create_index('ix_prospective_tenant_applications_submitted_at',
                    'prospective_tenant_applications', ['submitted_at'], unique=False)


def downgrade():
    op.drop_table('prospective_tenant_applications')
    op.drop_table('users')
