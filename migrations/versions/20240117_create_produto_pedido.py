"""Create produto and pedido tables

Revision ID: 20240117_create_produto_pedido
Revises: 
Create Date: 2024-01-17 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20240117_create_produto_pedido"
down_revision = None
branch_labels = None
depends_on = None

STATUS_PEDIDO = (
    "Pendente", "Pago", "EmPreparacao", "Pronto", "Finalizado", "Cancelado", "Invalido",
)


def upgrade() -> None:
    op.create_table(
        "produto",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("nome", sa.String(255), nullable=False),
        sa.Column("foto", sa.String(255), nullable=False, server_default=""),
        sa.Column("descricao", sa.String(500), nullable=False),
        sa.Column("categoria", sa.String(20), nullable=False, index=True),
        sa.Column("preco", sa.Float, nullable=False),
        sa.Column("ingredientes", sa.JSON, nullable=False),
        sa.Column("data_criacao", sa.String(32), nullable=False),
        sa.Column("data_atualizacao", sa.String(32), nullable=False),
    )

    op.create_table(
        "pedido",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("cliente_id", sa.String(11), nullable=True),
        sa.Column("lanche_id", sa.Integer, nullable=True),
        sa.Column("lanche_snapshot", sa.JSON, nullable=True),
        sa.Column("acompanhamento_id", sa.Integer, nullable=True),
        sa.Column("acompanhamento_snapshot", sa.JSON, nullable=True),
        sa.Column("bebida_id", sa.Integer, nullable=True),
        sa.Column("bebida_snapshot", sa.JSON, nullable=True),
        sa.Column("pagamento", sa.String(255), nullable=True),
        sa.Column(
            "status",
            sa.Enum(*STATUS_PEDIDO, name="pedido_status_enum", native_enum=False, create_constraint=True),
            nullable=False,
            server_default="Pendente",
        ),
        sa.Column("data_criacao", sa.String(32), nullable=False),
        sa.Column("data_atualizacao", sa.String(32), nullable=False),
    )
    op.create_index("idx_pedido_status_criacao", "pedido", ["status", "data_criacao"])


def downgrade() -> None:
    op.drop_index("idx_pedido_status_criacao", table_name="pedido")
    op.drop_table("pedido")
    op.drop_table("produto")
