"""Initial swine reproduction schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column('created_by', sa.String(length=255), nullable=True),
        sa.Column('updated_by', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    ]


def upgrade() -> None:
    """Create sows, boars, heats, services, pregnancies, births, abortions, piglets, notifications."""

    # --- sows ---
    op.create_table(
        'sows',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('ear_tag', sa.String(length=64), nullable=False),
        sa.Column('alias', sa.String(length=128), nullable=True),
        sa.Column('breed', sa.String(length=128), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(length=16), server_default='active', nullable=False),
        sa.Column('reproductive_status', sa.String(length=16), server_default='empty', nullable=False),
        sa.Column('expected_farrowing_date', sa.Date(), nullable=True),
        sa.Column('parity_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('total_piglets_born', sa.Integer(), server_default='0', nullable=False),
        sa.Column('total_piglets_alive', sa.Integer(), server_default='0', nullable=False),
        sa.Column('total_piglets_dead', sa.Integer(), server_default='0', nullable=False),
        sa.Column('total_abortions', sa.Integer(), server_default='0', nullable=False),
        sa.Column('last_farrowing_date', sa.Date(), nullable=True),
        sa.Column('last_weaning_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id', name='pk_sows'),
        sa.UniqueConstraint('ear_tag', name='uq_sows_ear_tag'),
    )
    op.create_index('ix_sows_status_reproductive', 'sows', ['status', 'reproductive_status'])

    # --- boars ---
    op.create_table(
        'boars',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('ear_tag', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=True),
        sa.Column('breed', sa.String(length=128), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(length=16), server_default='active', nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id', name='pk_boars'),
        sa.UniqueConstraint('ear_tag', name='uq_boars_ear_tag'),
    )

    # --- heats ---
    op.create_table(
        'heats',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('sow_id', sa.Uuid(), nullable=False),
        sa.Column('heat_date', sa.Date(), nullable=False),
        sa.Column('heat_end_date', sa.Date(), nullable=True),
        sa.Column('intensity', sa.String(length=16), nullable=True),
        sa.Column('status', sa.String(length=16), server_default='detected', nullable=False),
        sa.Column('induced', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('induction_protocol', sa.String(length=255), nullable=True),
        sa.Column('detected_by', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['sow_id'], ['sows.id'], name='fk_heats_sow_id_sows', ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id', name='pk_heats'),
    )
    op.create_index('ix_heats_sow_date', 'heats', ['sow_id', 'heat_date'])
    op.create_index(
        'ix_heats_detected',
        'heats',
        ['status', 'heat_date'],
        postgresql_where="status = 'detected'",
    )

    # --- services ---
    op.create_table(
        'services',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('sow_id', sa.Uuid(), nullable=False),
        sa.Column('heat_id', sa.Uuid(), nullable=False),
        sa.Column('boar_id', sa.Uuid(), nullable=True),
        sa.Column('service_date', sa.Date(), nullable=False),
        sa.Column('service_time', sa.Time(), nullable=True),
        sa.Column('service_type', sa.String(length=16), nullable=False),
        sa.Column('service_number', sa.Integer(), server_default='1', nullable=False),
        sa.Column('mating_duration_minutes', sa.Integer(), nullable=True),
        sa.Column('mating_quality', sa.String(length=32), nullable=True),
        sa.Column('semen_batch', sa.String(length=64), nullable=True),
        sa.Column('semen_dose', sa.String(length=64), nullable=True),
        sa.Column('semen_volume_ml', sa.Numeric(6, 2), nullable=True),
        sa.Column('technician', sa.String(length=255), nullable=True),
        sa.Column('success', sa.Boolean(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['sow_id'], ['sows.id'], name='fk_services_sow_id_sows', ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['heat_id'], ['heats.id'], name='fk_services_heat_id_heats', ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['boar_id'], ['boars.id'], name='fk_services_boar_id_boars', ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id', name='pk_services'),
    )
    op.create_index('ix_services_heat_date', 'services', ['heat_id', 'service_date'])
    op.create_index('ix_services_sow_date', 'services', ['sow_id', 'service_date'])

    # --- pregnancies ---
    op.create_table(
        'pregnancies',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('sow_id', sa.Uuid(), nullable=False),
        sa.Column('service_id', sa.Uuid(), nullable=False),
        sa.Column('conception_date', sa.Date(), nullable=False),
        sa.Column('expected_farrowing_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=24), server_default='in_progress', nullable=False),
        sa.Column('confirmed', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('confirmation_date', sa.Date(), nullable=True),
        sa.Column('confirmation_method', sa.String(length=32), nullable=True),
        sa.Column('ultrasound_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('last_ultrasound_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['sow_id'], ['sows.id'], name='fk_pregnancies_sow_id_sows', ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['service_id'], ['services.id'], name='fk_pregnancies_service_id_services', ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id', name='pk_pregnancies'),
    )
    op.create_index('ix_pregnancies_sow_status', 'pregnancies', ['sow_id', 'status'])
    op.create_index('ix_pregnancies_service', 'pregnancies', ['service_id'])

    # --- births ---
    op.create_table(
        'births',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('sow_id', sa.Uuid(), nullable=False),
        sa.Column('pregnancy_id', sa.Uuid(), nullable=False),
        sa.Column('boar_id', sa.Uuid(), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('birth_time', sa.Time(), nullable=True),
        sa.Column('birth_type', sa.String(length=16), server_default='normal', nullable=False),
        sa.Column('born_alive', sa.Integer(), nullable=False),
        sa.Column('born_dead', sa.Integer(), nullable=False),
        sa.Column('mummified', sa.Integer(), nullable=False),
        sa.Column('total_born', sa.Integer(), nullable=False),
        sa.Column('gestation_days', sa.Integer(), nullable=False),
        sa.Column('expected_weaning_date', sa.Date(), nullable=False),
        sa.Column('average_weight_kg', sa.Numeric(5, 2), nullable=True),
        sa.Column('sow_condition', sa.String(length=64), nullable=True),
        sa.Column('assisted_by', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.CheckConstraint('total_born = born_alive + born_dead + mummified', name='ck_births_total_born_matches'),
        sa.CheckConstraint('gestation_days BETWEEN 110 AND 120', name='ck_births_gestation_days_range'),
        sa.ForeignKeyConstraint(['sow_id'], ['sows.id'], name='fk_births_sow_id_sows', ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['pregnancy_id'], ['pregnancies.id'], name='fk_births_pregnancy_id_pregnancies', ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['boar_id'], ['boars.id'], name='fk_births_boar_id_boars', ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id', name='pk_births'),
        sa.UniqueConstraint('pregnancy_id', name='uq_births_pregnancy_id'),
    )
    op.create_index('ix_births_sow_date', 'births', ['sow_id', 'birth_date'])
    op.create_index('ix_births_expected_weaning', 'births', ['expected_weaning_date'])

    # --- abortions ---
    op.create_table(
        'abortions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('sow_id', sa.Uuid(), nullable=False),
        sa.Column('pregnancy_id', sa.Uuid(), nullable=False),
        sa.Column('abortion_date', sa.Date(), nullable=False),
        sa.Column('gestation_days', sa.Integer(), nullable=False),
        sa.Column('recovery_until', sa.Date(), nullable=False),
        sa.Column('fetuses_expelled', sa.Integer(), nullable=True),
        sa.Column('suspected_cause', sa.String(length=255), nullable=True),
        sa.Column('veterinary_treatment', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.CheckConstraint('gestation_days BETWEEN 1 AND 113', name='ck_abortions_gestation_days_range'),
        sa.ForeignKeyConstraint(['sow_id'], ['sows.id'], name='fk_abortions_sow_id_sows', ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['pregnancy_id'], ['pregnancies.id'], name='fk_abortions_pregnancy_id_pregnancies', ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id', name='pk_abortions'),
        sa.UniqueConstraint('pregnancy_id', name='uq_abortions_pregnancy_id'),
    )
    op.create_index('ix_abortions_sow_date', 'abortions', ['sow_id', 'abortion_date'])

    # --- piglets ---
    op.create_table(
        'piglets',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('birth_id', sa.Uuid(), nullable=False),
        sa.Column('sow_id', sa.Uuid(), nullable=False),
        sa.Column('ear_tag', sa.String(length=64), nullable=True),
        sa.Column('sex', sa.String(length=8), nullable=True),
        sa.Column('birth_status', sa.String(length=16), nullable=False),
        sa.Column('current_status', sa.String(length=16), nullable=False),
        sa.Column('birth_weight_kg', sa.Numeric(5, 2), nullable=True),
        sa.Column('weaning_date', sa.Date(), nullable=True),
        sa.Column('weaning_weight_kg', sa.Numeric(5, 2), nullable=True),
        sa.Column('exit_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['birth_id'], ['births.id'], name='fk_piglets_birth_id_births', ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['sow_id'], ['sows.id'], name='fk_piglets_sow_id_sows', ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id', name='pk_piglets'),
    )
    op.create_index('ix_piglets_birth_status', 'piglets', ['birth_id', 'current_status'])
    op.create_index('ix_piglets_sow', 'piglets', ['sow_id'])

    # --- notifications ---
    op.create_table(
        'notifications',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('priority', sa.String(length=16), server_default='normal', nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('related_id', sa.Uuid(), nullable=True),
        sa.Column('data', sa.Text(), nullable=True),
        sa.Column('read', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('read_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_notifications'),
    )
    op.create_index('ix_notifications_type_related', 'notifications', ['type', 'related_id'])
    op.create_index('ix_notifications_read_created', 'notifications', ['read', 'created_at'])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table('notifications')
    op.drop_table('piglets')
    op.drop_table('abortions')
    op.drop_table('births')
    op.drop_table('pregnancies')
    op.drop_table('services')
    op.drop_table('heats')
    op.drop_table('boars')
    op.drop_table('sows')
