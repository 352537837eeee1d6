from sqlalchemy import Column, Float, Integer, JSON, String

from app.database.db_connection import Base


class ProdutoModel(Base):
    __tablename__ = "produto"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(255), nullable=False)
    foto = Column(String(255), nullable=False, default="")
    descricao = Column(String(500), nullable=False)
    categoria = Column(String(20), nullable=False, index=True)
    preco = Column(Float, nullable=False)
    ingredientes = Column(JSON, nullable=False)

    # Timestamps no formato textual fixo (ver app.core.timestamps)
    data_criacao = Column(String(32), nullable=False)
    data_atualizacao = Column(String(32), nullable=False)
